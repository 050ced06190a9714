"""Text helpers for showing search history and command pipelines."""

from __future__ import annotations

from datetime import timedelta

_PIPE = "|"
_PIPE_DISPLAY = " │ "

_MINUTE = 60
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR


def _plural(count: int, unit: str) -> str:
    if count == 1:
        return f"1 {unit} ago"
    return f"{count} {unit}s ago"


def format_time_ago(delta: timedelta) -> str:
    """Describe how long ago something happened, e.g. ``"3 hours ago"``."""
    seconds = delta.total_seconds()
    if seconds < _MINUTE:
        return "just now"
    if seconds < _HOUR:
        return _plural(int(seconds // _MINUTE), "minute")
    hours = int(seconds // _HOUR)
    if seconds < _DAY:
        return _plural(hours, "hour")
    days = hours // 24
    if days < 7:
        return _plural(days, "day")
    if days < 30:
        return _plural(days // 7, "week")
    return _plural(days // 30, "month")


def format_pipeline_command(command: str) -> str:
    """Return ``command`` with its pipes drawn as spaced box-drawing bars."""
    if _PIPE not in command:
        return command
    return command.replace(_PIPE, _PIPE_DISPLAY)


def is_pipeline_command(command: str) -> bool:
    """Tell whether ``command`` looks like a chain of several commands."""
    return (
        _PIPE in command
        or "pipe" in command.lower()
        or "&&" in command
        or ">>" in command
    )


def pipeline_steps(command: str) -> list[str]:
    """Split a pipeline into its stripped steps."""
    return [step.strip() for step in command.split(_PIPE)]


_KEYWORD_RULES: tuple[tuple[tuple[str, ...], tuple[str, ...]], ...] = (
    (("grep",), ("search", "filter")),
    (("awk", "sed"), ("text", "processing")),
    (("sort",), ("sort", "order")),
    (("find",), ("find", "search")),
)


def auto_pipeline_keywords(command: str) -> list[str]:
    """Return keywords guessed from the tools a pipeline uses."""
    keywords = ["pipeline", "workflow"]
    for tools, extra in _KEYWORD_RULES:
        if any(tool in command for tool in tools):
            keywords.extend(extra)
    return keywords


def default_pipeline_description(name: str, command: str) -> str:
    """Return the description used for a saved pipeline that has none."""
    return f"{name} - {len(pipeline_steps(command))}-step pipeline"