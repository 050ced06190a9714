# wtf — What's The Function

`wtf` is a command-line helper for shell commands. It sets up alternative
names for itself and builds `tar`, `find` and `ffmpeg` command lines for you
through interactive wizards. It also contains a few pieces you can use from
your own code: project context detection, in-memory caches, configuration
defaults and text helpers for pipelines and history.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
wtf --help
```

Subcommands:

- `wtf alias add <name>` writes a launcher script named `<name>`. On Windows it
  goes to `~/.wtf/aliases`; elsewhere it goes to `~/.local/bin/wtf-aliases`.
  The command then tells you how to put that directory on your `PATH`.
- `wtf alias list` lists the aliases you have configured.
- `wtf alias remove <name>` deletes a launcher.
- `wtf setup <name>` is a quick setup. On Unix-like systems it adds
  `alias <name>='...'` to `~/.bashrc` and `~/.zshrc`, but only to those files
  that exist and do not define the alias already. On Windows it writes
  `<name>.bat` to the current directory.
- `wtf wizard [tar|find|ffmpeg]` starts an interactive command builder. Run it
  without a name to see the wizards available.

The global options `-v/--verbose`, `-d/--database`, `-l/--limit`,
`-p/--platform`, `-a/--all-platforms`, `--no-cross-platform` and `--version`
are all accepted.

## Library use

Detect what kind of project a directory holds:

```python
from wtf.projectcontext import analyze_directory

ctx = analyze_directory(".")
print(ctx.project_types)     # list of ProjectType members
print(ctx.description())     # e.g. "Git repository, Python project"
print(ctx.context_boosts())  # e.g. {"git": 2.0, "pip": 2.0, ...}
```

`analyze_current_directory()` does the same for the working directory. It
recognises Git, Docker, Node.js, Python, Go, Rust, Java (Maven and Gradle),
.NET, Ruby, PHP, C/C++ (CMake), Kubernetes, Terraform, Ansible, Webpack, Vite
and Make. It also reads the `package.json` scripts and the Makefile targets.

Caches:

```python
from wtf.cache import Cache, LRUCache

cache = LRUCache(2, 0)       # capacity 2, no expiry
cache.put("a", 1)
cache.put("b", 2)
cache.get("a")
cache.put("c", 3)            # evicts "b", the least recently used entry
print(cache.stats())         # CacheStats with hits, misses, evictions, hit_ratio

ttl_cache = Cache(60.0)      # entries expire 60 seconds after set()
ttl_cache.set("k", "v")
ttl_cache.cleanup()          # drops expired entries
```

Both caches accept a `clock=` callable, which makes testing easier.

Wizards driven from your own streams:

```python
import io
from wtf.wizard import Prompter, run_tar_wizard

answers = io.StringIO("1\n2\nn\nbackup.tar.gz\nsrc\nn\nn\n")
command = run_tar_wizard(Prompter(answers, io.StringIO()))
print(command)               # tar -czf backup.tar.gz src
```

`Prompter` raises `WizardCancelled` when it gets an empty answer or the input
ends. It raises `WizardAborted` after three invalid answers in a row.

Text helpers in `wtf.formatting`:

- `format_time_ago`
- `format_pipeline_command`
- `is_pipeline_command`
- `pipeline_steps`
- `auto_pipeline_keywords`
- `default_pipeline_description`

Aliases can also be managed from code with the functions in `wtf.aliases`:

- `get_alias_dir`
- `add_alias`
- `list_aliases`
- `remove_alias`
- `contains_alias`
- `quick_setup`

## Configuration

`wtf.config.default_config()` returns a `Config` with these defaults:

- database path `assets/commands.yml`
- personal database `~/.config/cmd-finder/personal.yml`
- at most 5 results
- caching on

`Config.validate()` raises `ValueError` for out-of-range settings.
`Config.resolve_database_path()` returns the first database file that exists,
checking a list of standard locations. `Config.ensure_config_dir()` creates the
configuration directory.

## What this package does not do

There is no command database and no search. `wtf` cannot look commands up from
a natural-language query, and there is no `search`, `pipeline`, `save` or
`history` command. The global options listed above are parsed, but no
subcommand uses them. The wizards' "save" step only prints the command; it
stores nothing. There is no cache built for search results and no stored
search history.