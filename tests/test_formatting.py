from datetime import timedelta

import pytest

from wtf.formatting import (
    auto_pipeline_keywords,
    default_pipeline_description,
    format_pipeline_command,
    format_time_ago,
    is_pipeline_command,
    pipeline_steps,
)


@pytest.mark.parametrize(
    "delta, expected",
    [
        (timedelta(seconds=0), "just now"),
        (timedelta(seconds=59), "just now"),
        (timedelta(minutes=1), "1 minute ago"),
        (timedelta(minutes=1, seconds=59), "1 minute ago"),
        (timedelta(hours=1), "1 hour ago"),
        (timedelta(days=1), "1 day ago"),
        (timedelta(days=7), "1 week ago"),
        (timedelta(days=30), "1 month ago"),
    ],
)
def test_format_time_ago_singular_and_now(delta, expected):
    assert format_time_ago(delta) == expected


@pytest.mark.parametrize("minutes", [2, 10, 59])
def test_format_time_ago_minutes(minutes):
    result = format_time_ago(timedelta(minutes=minutes))
    assert result.startswith(f"{minutes} ")
    assert result.endswith("minutes ago")


@pytest.mark.parametrize("hours", [2, 12, 23])
def test_format_time_ago_hours(hours):
    result = format_time_ago(timedelta(hours=hours, minutes=30))
    assert result.startswith(f"{hours} ")
    assert result.endswith("hours ago")


@pytest.mark.parametrize("days", [2, 6])
def test_format_time_ago_days(days):
    result = format_time_ago(timedelta(days=days))
    assert result.startswith(f"{days} ")
    assert result.endswith("days ago")


def test_format_time_ago_weeks_and_months_units():
    assert format_time_ago(timedelta(days=20)).endswith("weeks ago")
    assert format_time_ago(timedelta(days=100)).endswith("months ago")


def test_format_time_ago_negative_is_just_now():
    assert format_time_ago(timedelta(seconds=-5)) == "just now"


def test_format_pipeline_command_without_pipe_is_unchanged():
    command = "ls -la"
    assert format_pipeline_command(command) == command


def test_format_pipeline_command_replaces_every_pipe():
    command = "cat file.txt | wc -l | sort"
    result = format_pipeline_command(command)
    assert "|" not in result
    assert result.count("│") == command.count("|")
    assert "cat file.txt" in result
    assert "wc -l" in result


@pytest.mark.parametrize(
    "command, expected",
    [
        ("cat a | wc -l", True),
        ("make && make install", True),
        ("echo hi >> log.txt", True),
        ("mkfifo PIPE", True),
        ("ls -la", False),
        ("echo hi > out.txt", False),
    ],
)
def test_is_pipeline_command(command, expected):
    assert is_pipeline_command(command) is expected


def test_pipeline_steps_strips_each_step():
    assert pipeline_steps("find . -type f | head -10 | sort") == [
        "find . -type f",
        "head -10",
        "sort",
    ]


def test_pipeline_steps_single_command():
    assert pipeline_steps("  ls  ") == ["ls"]


def test_auto_keywords_base_only():
    assert auto_pipeline_keywords("cat a | wc -l") == ["pipeline", "workflow"]


def test_auto_keywords_grep_and_sort_in_order():
    assert auto_pipeline_keywords("grep ERROR app.log | tail -20 | sort") == [
        "pipeline",
        "workflow",
        "search",
        "filter",
        "sort",
        "order",
    ]


def test_auto_keywords_awk_or_sed_added_once():
    keywords = auto_pipeline_keywords("cat f | awk '{print $1}' | sed 's/a/b/'")
    assert keywords.count("text") == 1
    assert keywords.count("processing") == 1


def test_auto_keywords_find():
    keywords = auto_pipeline_keywords("find . -type f | head -10")
    assert keywords[:2] == ["pipeline", "workflow"]
    assert keywords[2:] == ["find", "search"]


def test_default_pipeline_description_counts_steps():
    command = "find . -type f | head -10 | sort"
    description = default_pipeline_description("top-files", command)
    assert description.startswith("top-files - ")
    assert f"{len(pipeline_steps(command))}-step pipeline" in description


def test_default_pipeline_description_single_step():
    assert default_pipeline_description("x", "ls").endswith("1-step pipeline")