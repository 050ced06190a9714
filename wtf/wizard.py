"""Interactive builders that assemble tar, find and ffmpeg command lines step by step."""

from __future__ import annotations

import re
import sys
from typing import Callable, Sequence, TextIO

_MAX_ATTEMPTS = 3
_NUMBER = re.compile(r"[+-]?[0-9]+")


class WizardCancelled(Exception):
    """The user ended the wizard by giving no answer or closing the input."""


class WizardAborted(Exception):
    """The user gave too many invalid answers in a row."""


class Prompter:
    """Asks questions on an output stream and reads answers from an input stream."""

    def __init__(self, input_stream: TextIO | None = None, output: TextIO | None = None) -> None:
        self.input_stream = input_stream if input_stream is not None else sys.stdin
        self.output = output if output is not None else sys.stdout

    def _say(self, *parts: object, end: str = "\n") -> None:
        print(*parts, end=end, file=self.output)

    def _cancel(self, message: str) -> WizardCancelled:
        self._say(message)
        return WizardCancelled("Operation canceled.")

    def read_input(self, prompt: str) -> str:
        """Show ``prompt`` and return the next line of input, stripped.

        Raises WizardCancelled when the input ends before a full line is read.
        """
        self._say(prompt, end="")
        self.output.flush()
        line = self.input_stream.readline()
        if not line.endswith("\n"):
            raise self._cancel("\nOperation canceled.")
        return line.strip()

    def read_choice(self, prompt: str, options: Sequence[str]) -> int:
        """Show numbered ``options`` and return the zero-based index chosen."""
        self._say(prompt)
        for number, option in enumerate(options, start=1):
            self._say(f"{number}. {option}")

        for attempt in range(_MAX_ATTEMPTS):
            choice = self.read_input("Enter choice (number): ")
            if not choice:
                raise self._cancel("Operation canceled.")
            if _NUMBER.fullmatch(choice):
                number = int(choice)
                if 1 <= number <= len(options):
                    return number - 1
            if attempt < _MAX_ATTEMPTS - 1:
                self._say(f"Invalid choice. Please enter 1-{len(options)}: ", end="")

        self._say("Too many invalid attempts. Exiting wizard.")
        raise WizardAborted("too many invalid attempts")

    def read_yes_no(self, prompt: str) -> bool:
        """Ask a yes/no question and return the answer."""
        for attempt in range(_MAX_ATTEMPTS):
            response = self.read_input(prompt + " (y/n): ").lower()
            if not response:
                raise self._cancel("Operation canceled.")
            if response in ("y", "yes"):
                return True
            if response in ("n", "no"):
                return False
            if attempt < _MAX_ATTEMPTS - 1:
                self._say("Please enter 'y' or 'n': ", end="")

        self._say("Too many invalid attempts. Exiting wizard.")
        raise WizardAborted("too many invalid attempts")


def show_available_wizards(out: TextIO | None = None) -> None:
    """Print the list of wizards that can be started."""
    out = out if out is not None else sys.stdout
    for line in (
        "🧙 Available Command Wizards:",
        "",
        "📁 tar     - Create and extract archives",
        "🔍 find    - Search for files and directories",
        "🎬 ffmpeg  - Convert and process media files",
        "",
        "Usage: wtf wizard <command>",
    ):
        print(line, file=out)


def _present(prompter: Prompter, tool: str, command: str, width: int) -> None:
    rule = "=" * width
    prompter._say("\n" + rule)
    prompter._say(f"🎉 Your {tool} command is ready!")
    prompter._say(rule)
    prompter._say(f"Command: {command}")
    prompter._say(rule)


def _offer_save(prompter: Prompter, tool: str, command: str) -> None:
    if prompter.read_yes_no("\nSave this command to your personal notebook?"):
        description = prompter.read_input("Enter description: ") or f"Generated {tool} command"
        prompter._say(f"✅ Command saved: {description}")
        prompter._say(f"   Command: {command}")


_COMPRESSION_FLAGS = {1: "z", 2: "j", 3: "J"}
_DEFAULT_ARCHIVES = {0: "archive.tar", 1: "archive.tar.gz", 2: "archive.tar.bz2", 3: "archive.tar.xz"}


def run_tar_wizard(prompter: Prompter) -> str:
    """Build a tar command interactively and return it."""
    prompter._say("🧙 ✨ TAR Archive Wizard ✨")
    prompter._say("I'll help you build the perfect tar command!")
    prompter._say()

    operation = prompter.read_choice(
        "What do you want to do?",
        [
            "Create an archive",
            "Extract an archive",
            "List contents of archive",
            "Add files to existing archive",
        ],
    )

    command = "tar "
    if operation == 0:
        command += "-c"
        compression = prompter.read_choice(
            "\nChoose compression:",
            [
                "No compression (.tar)",
                "Gzip compression (.tar.gz / .tgz)",
                "Bzip2 compression (.tar.bz2)",
                "XZ compression (.tar.xz)",
            ],
        )
        command += _COMPRESSION_FLAGS.get(compression, "")
        if prompter.read_yes_no("\nShow files being processed (verbose)?"):
            command += "v"
        command += "f"

        archive = prompter.read_input("\nEnter archive name: ") or _DEFAULT_ARCHIVES[compression]
        command += " " + archive

        source = prompter.read_input(
            "Enter files/directories to archive (default: current directory): "
        ) or "."
        command += " " + source

        if prompter.read_yes_no("\nExclude any files/patterns?"):
            exclude = prompter.read_input("Enter exclude pattern (e.g., '*.tmp'): ")
            if exclude:
                command += f" --exclude='{exclude}'"

    elif operation == 1:
        command += "-x"
        if prompter.read_yes_no("\nAuto-detect compression?"):
            command += "a"
        else:
            compression = prompter.read_choice(
                "Choose compression type:",
                ["No compression", "Gzip compression", "Bzip2 compression", "XZ compression"],
            )
            command += _COMPRESSION_FLAGS.get(compression, "")
        if prompter.read_yes_no("\nShow files being extracted (verbose)?"):
            command += "v"
        command += "f"
        command += " " + prompter.read_input("\nEnter archive file name: ")
        if prompter.read_yes_no("\nExtract to specific directory?"):
            command += " -C " + prompter.read_input("Enter directory: ")

    elif operation == 2:
        command += "-tv"
        if prompter.read_yes_no("\nAuto-detect compression?"):
            command += "a"
        command += "f"
        command += " " + prompter.read_input("\nEnter archive file name: ")

    else:
        command += "-rv"
        command += "f " + prompter.read_input("\nEnter existing archive name: ")
        command += " " + prompter.read_input("Enter files to add: ")

    _present(prompter, "tar", command, 50)
    _offer_save(prompter, "tar", command)
    return command


def run_find_wizard(prompter: Prompter) -> str:
    """Build a find command interactively and return it."""
    prompter._say("🧙 ✨ FIND Command Wizard ✨")
    prompter._say("I'll help you build the perfect find command!")
    prompter._say()

    location = prompter.read_input("Enter search location (default: current directory): ") or "."
    command = "find " + location

    prompter._say("\nBuilding your find command step by step...")
    prompter._say("I'll ask about different search criteria.")

    if prompter.read_yes_no("Search by name pattern?"):
        pattern = prompter.read_input("Enter name pattern (e.g., '*.txt', 'test*'): ")
        if "*" in pattern or "?" in pattern:
            command += f" -name '{pattern}'"
        else:
            command += f" -name '*{pattern}*'"

    if prompter.read_yes_no("\nFilter by file type?"):
        type_flags = [" -type f", " -type d", " -type l", " -type f -executable"]
        choice = prompter.read_choice(
            "Choose file type:",
            ["Regular files", "Directories", "Symbolic links", "Executable files"],
        )
        command += type_flags[choice]

    if prompter.read_yes_no("\nFilter by file size?"):
        op = prompter.read_choice("Size comparison:", ["Larger than", "Smaller than", "Exactly"])
        size = prompter.read_input("Enter size (e.g., 100k, 1M, 2G): ")
        command += " -size " + ("+", "-", "")[op] + size

    if prompter.read_yes_no("\nFilter by modification time?"):
        op = prompter.read_choice(
            "Time comparison:",
            [
                "Modified within last N days",
                "Modified more than N days ago",
                "Modified exactly N days ago",
            ],
        )
        days = prompter.read_input("Enter number of days: ")
        command += " -mtime " + ("-", "+", "")[op] + days

    if prompter.read_yes_no("\nPerform action on found files?"):
        action = prompter.read_choice(
            "Choose action:",
            [
                "Just list them (default)",
                "Delete them",
                "Copy to directory",
                "Move to directory",
                "Execute command on each",
                "Print detailed info",
            ],
        )
        if action == 1:
            if prompter.read_yes_no("⚠️  This will DELETE files! Are you sure?"):
                command += " -delete"
        elif action in (2, 3):
            dest = prompter.read_input("Enter destination directory: ")
            tool = "cp" if action == 2 else "mv"
            command += f" -exec {tool} {{}} {dest} \\;"
        elif action == 4:
            exec_cmd = prompter.read_input("Enter command to execute (use {} for filename): ")
            command += f" -exec {exec_cmd} \\;"
        elif action == 5:
            command += " -ls"

    if prompter.read_yes_no("\nLimit search depth?"):
        depth = prompter.read_input("Enter maximum depth: ")
        command = command.replace(location, f"{location} -maxdepth {depth}", 1)

    _present(prompter, "find", command, 50)
    _offer_save(prompter, "find", command)
    return command


_MP4_CRF = {0: "18", 1: "23", 2: "28"}
_VIDEO_CODECS = {
    1: " -c:v libxvid -c:a mp3",
    2: " -c:v libx264 -c:a aac",
    3: " -c:v libx264 -c:a aac",
    4: " -c:v libvpx-vp9 -c:a libopus",
    5: " -c:v wmv2 -c:a wmav2",
}
_AUDIO_CODECS = {
    1: " -vn -c:a aac",
    2: " -vn -c:a pcm_s16le",
    3: " -vn -c:a flac",
    4: " -vn -c:a libvorbis",
}
_SCALES = {0: "1920:1080", 1: "1280:720", 2: "854:480", 3: "640:360"}


def run_ffmpeg_wizard(prompter: Prompter) -> str:
    """Build an ffmpeg command interactively and return it."""
    prompter._say("🧙 ✨ FFMPEG Wizard ✨")
    prompter._say("I'll help you build the perfect ffmpeg command!")
    prompter._say()

    command = "ffmpeg -i " + prompter.read_input("Enter input file name: ")

    operation = prompter.read_choice(
        "\nWhat do you want to do?",
        [
            "Convert video format",
            "Extract audio from video",
            "Resize/scale video",
            "Cut/trim video",
            "Merge videos",
            "Convert audio format",
            "Add watermark",
        ],
    )

    if operation == 0:
        fmt = prompter.read_choice(
            "\nChoose output format:",
            ["MP4 (H.264)", "AVI", "MOV", "MKV", "WebM", "WMV"],
        )
        quality = prompter.read_choice(
            "\nChoose quality:",
            [
                "High quality (slower encoding)",
                "Medium quality (balanced)",
                "Low quality (faster encoding)",
                "Custom settings",
            ],
        )
        if fmt == 0:
            command += " -c:v libx264"
            crf = _MP4_CRF.get(quality)
            if crf is None:
                crf = prompter.read_input("Enter CRF value (18-28, lower = better): ")
            command += " -crf " + crf
            command += " -c:a aac"
        else:
            command += _VIDEO_CODECS[fmt]

    elif operation == 1:
        audio = prompter.read_choice("\nChoose audio format:", ["MP3", "AAC", "WAV", "FLAC", "OGG"])
        if audio == 0:
            command += " -vn -c:a libmp3lame"
            bitrate = prompter.read_input("Enter bitrate (default: 192k): ") or "192k"
            command += " -b:a " + bitrate
        else:
            command += _AUDIO_CODECS[audio]

    elif operation == 2:
        resolution = prompter.read_choice(
            "\nChoose resolution:",
            [
                "1920x1080 (1080p)",
                "1280x720 (720p)",
                "854x480 (480p)",
                "640x360 (360p)",
                "Custom resolution",
                "Scale by factor",
            ],
        )
        if resolution in _SCALES:
            command += " -vf scale=" + _SCALES[resolution]
        elif resolution == 4:
            width = prompter.read_input("Enter width: ")
            height = prompter.read_input("Enter height: ")
            command += f" -vf scale={width}:{height}"
        else:
            factor = prompter.read_input("Enter scale factor (e.g., 0.5 for half size): ")
            command += f" -vf scale=iw*{factor}:ih*{factor}"

    elif operation == 3:
        prompter._say("\nTrim options:")
        start = prompter.read_input("Enter start time (HH:MM:SS or seconds): ")
        if prompter.read_yes_no("Specify duration?"):
            duration = prompter.read_input("Enter duration (HH:MM:SS or seconds): ")
            command += f" -ss {start} -t {duration}"
        else:
            end = prompter.read_input("Enter end time (HH:MM:SS or seconds): ")
            command += f" -ss {start} -to {end}"
        command += " -c copy"

    command += " " + prompter.read_input("\nEnter output file name: ")

    if prompter.read_yes_no("\nOverwrite output file if exists?"):
        command += " -y"

    _present(prompter, "ffmpeg", command, 60)

    if operation in (0, 2):
        prompter._say(
            "⏱️  Note: Video processing may take time depending on file size and quality settings."
        )

    _offer_save(prompter, "ffmpeg", command)
    return command


_WIZARDS: dict[str, Callable[[Prompter], str]] = {
    "tar": run_tar_wizard,
    "find": run_find_wizard,
    "ffmpeg": run_ffmpeg_wizard,
}


def run_wizard(name: str | None, prompter: Prompter) -> str | None:
    """Run the wizard called ``name`` and return the command it built.

    With no name, or an unknown one, the available wizards are listed and
    None is returned.
    """
    if not name:
        show_available_wizards(prompter.output)
        return None
    wizard = _WIZARDS.get(name.lower())
    if wizard is None:
        prompter._say(f"❌ Wizard for '{name.lower()}' not available.")
        prompter._say("\nAvailable wizards:")
        show_available_wizards(prompter.output)
        return None
    return wizard(prompter)