"""Creation and management of alternative command names for the tool."""

from __future__ import annotations

import os
from pathlib import Path


def get_alias_dir(home: str | os.PathLike[str], windows: bool) -> Path:
    """Return the directory where alias launchers are stored."""
    home = Path(home)
    if windows:
        return home / ".wtf" / "aliases"
    return home / ".local" / "bin" / "wtf-aliases"


def _batch_script(exec_path: str) -> str:
    return f'@echo off\n"{exec_path}" %*\n'


def _shell_script(exec_path: str) -> str:
    return f'#!/bin/bash\n"{exec_path}" "$@"\n'


def _alias_file(name: str, alias_dir: Path, windows: bool) -> Path:
    return alias_dir / (f"{name}.bat" if windows else name)


def add_alias(
    name: str,
    exec_path: str | os.PathLike[str],
    alias_dir: str | os.PathLike[str],
    windows: bool,
) -> Path:
    """Write a launcher script named ``name`` into ``alias_dir`` and return its path."""
    alias_dir = Path(alias_dir)
    alias_dir.mkdir(mode=0o755, parents=True, exist_ok=True)
    exec_path = os.fspath(exec_path)
    script = _alias_file(name, alias_dir, windows)
    script.write_text(_batch_script(exec_path) if windows else _shell_script(exec_path))
    script.chmod(0o755)

    print("📁 Created:", script)
    print("💡 To complete setup, add this directory to your PATH:")
    if windows:
        print(f"   {alias_dir}")
        print("   Or copy the .bat file to a directory already in PATH")
    else:
        print(f'   export PATH="{alias_dir}:$PATH"')
        print("   Add this line to your ~/.bashrc or ~/.zshrc")
    return script


def list_aliases(alias_dir: str | os.PathLike[str], windows: bool) -> list[str]:
    """Return the names of configured aliases, sorted; empty if the directory is missing."""
    try:
        entries = sorted(Path(alias_dir).iterdir(), key=lambda p: p.name)
    except OSError:
        return []
    names = []
    for entry in entries:
        if entry.is_dir():
            continue
        name = entry.name
        if windows and name.endswith(".bat"):
            name = name[: -len(".bat")]
        names.append(name)
    return names


def remove_alias(name: str, alias_dir: str | os.PathLike[str], windows: bool) -> None:
    """Delete the launcher for ``name``; raise FileNotFoundError if there is none."""
    _alias_file(name, Path(alias_dir), windows).unlink()


def contains_alias(content: str, alias_name: str) -> bool:
    """Tell whether shell configuration text already defines ``alias_name``."""
    return bool(content) and (
        f"alias {alias_name}=" in content or f"alias {alias_name} " in content
    )


def quick_setup(
    alias_name: str,
    exec_path: str | os.PathLike[str],
    home: str | os.PathLike[str],
    windows: bool,
) -> list[Path]:
    """Set up ``alias_name`` as a way to start the tool; return the files written."""
    exec_path = os.fspath(exec_path)
    if windows:
        return [_setup_windows(alias_name, exec_path)]
    return _setup_unix(alias_name, exec_path, Path(home))


def _setup_windows(alias_name: str, exec_path: str) -> Path:
    batch = Path(f"{alias_name}.bat")
    batch.write_text(_batch_script(exec_path))
    batch.chmod(0o755)

    print(f"📁 Created: {batch}")
    print("💡 This file is in your current directory. You can:")
    print("   1. Copy it to a directory in your PATH")
    print(f'   2. Or use it directly: .\\{alias_name} "your query"')
    print("\n🔧 Alternative: Run this command for current session:")
    print(f'   doskey {alias_name}="{exec_path}" $*')
    return batch


def _setup_unix(alias_name: str, exec_path: str, home: Path) -> list[Path]:
    alias_line = f"alias {alias_name}='{exec_path}'"
    written = []
    for rc_file in (home / ".bashrc", home / ".zshrc"):
        if not rc_file.exists():
            continue
        try:
            existing = rc_file.read_text()
        except OSError:
            existing = ""
        if contains_alias(existing, alias_name):
            print(f"ℹ️  Alias already exists in {rc_file}")
            continue
        try:
            with rc_file.open("a") as handle:
                handle.write(f"\n# WTF alias\n{alias_line}\n")
        except OSError:
            continue
        written.append(rc_file)
        print(f"✅ Added alias to {rc_file}")

    print("💡 Manual setup: Add this line to your shell config:")
    print(f"   {alias_line}")
    return written