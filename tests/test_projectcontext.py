import json

import pytest

from wtf.projectcontext import (
    ProjectContext,
    ProjectType,
    analyze_current_directory,
    analyze_directory,
)


def _populate(directory, entries):
    for entry in entries:
        path = directory / entry.rstrip("/")
        if entry.endswith("/"):
            path.mkdir(parents=True, exist_ok=True)
        else:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.touch()


@pytest.mark.parametrize(
    "entries, expected_types, language, has_git, has_docker",
    [
        ([".git/"], [ProjectType.GIT], "", True, False),
        (["Dockerfile"], [ProjectType.DOCKER], "", False, True),
        (["package.json"], [ProjectType.NODE], "javascript", False, False),
        (["requirements.txt"], [ProjectType.PYTHON], "python", False, False),
        (["go.mod"], [ProjectType.GO], "go", False, False),
        (
            [".git/", "Dockerfile", "package.json"],
            [ProjectType.GIT, ProjectType.DOCKER, ProjectType.NODE],
            "javascript",
            True,
            True,
        ),
        ([], [ProjectType.GENERIC], "", False, False),
    ],
)
def test_analyze_directory(tmp_path, entries, expected_types, language, has_git, has_docker):
    _populate(tmp_path, entries)
    ctx = analyze_directory(tmp_path)
    assert len(ctx.project_types) == len(expected_types)
    assert set(ctx.project_types) == set(expected_types)
    assert ctx.language == language
    assert ctx.has_git is has_git
    assert ctx.has_docker is has_docker


@pytest.mark.parametrize(
    "types, expected",
    [
        ([ProjectType.GIT], {"git": 2.0, "commit": 1.5, "branch": 1.5, "checkout": 1.5}),
        ([ProjectType.DOCKER], {"docker": 2.0, "container": 1.8, "image": 1.5}),
        ([ProjectType.GIT, ProjectType.NODE], {"git": 2.0, "npm": 2.0, "node": 1.8}),
    ],
)
def test_context_boosts(types, expected):
    boosts = ProjectContext(project_types=types).context_boosts()
    for keyword, value in expected.items():
        assert boosts[keyword] == value


@pytest.mark.parametrize(
    "types, expected",
    [
        ([ProjectType.GIT], "Git repository"),
        ([ProjectType.DOCKER], "Docker project"),
        ([ProjectType.GIT, ProjectType.NODE], "Git repository, Node.js project"),
        ([ProjectType.GENERIC], "generic directory"),
        ([], "generic directory"),
    ],
)
def test_description(types, expected):
    assert ProjectContext(project_types=types).description() == expected


def test_description_includes_build_system():
    ctx = ProjectContext(project_types=[ProjectType.JAVA], build_system="maven")
    assert ctx.description() == "Java project (maven)"


def test_later_type_overrides_boost():
    boosts = ProjectContext(project_types=[ProjectType.DOCKER, ProjectType.GO]).context_boosts()
    assert boosts["build"] == 1.5
    assert boosts["run"] == 1.3


def test_duplicate_types_removed(tmp_path):
    _populate(tmp_path, ["go.mod", "go.sum"])
    ctx = analyze_directory(tmp_path)
    assert ctx.project_types == [ProjectType.GO]


def test_package_scripts_extracted_and_boosted(tmp_path):
    (tmp_path / "package.json").write_text(
        json.dumps({"name": "demo", "scripts": {"lint": "eslint .", "serve": "node app.js"}})
    )
    ctx = analyze_directory(tmp_path)
    assert ctx.package_scripts == {"lint": "eslint .", "serve": "node app.js"}
    boosts = ctx.context_boosts()
    assert boosts["lint"] == 1.3
    assert boosts["serve"] == 1.3
    assert boosts["npm"] == 2.0


def test_make_targets_extracted(tmp_path):
    (tmp_path / "Makefile").write_text(
        "build:\n\tgo build\n.PHONY: build\nVERSION=1\n# note: skip\ntest: build\n"
    )
    ctx = analyze_directory(tmp_path)
    assert ctx.project_types == [ProjectType.MAKE]
    assert ctx.make_targets == ["build", "test"]
    assert ctx.context_boosts()["test"] == 1.3
    assert ctx.description() == "Makefile project"


def test_build_systems_detected(tmp_path):
    _populate(tmp_path, ["pom.xml"])
    ctx = analyze_directory(tmp_path)
    assert ctx.build_system == "maven"
    assert ctx.language == "java"

    cmake_dir = tmp_path / "c"
    _populate(cmake_dir, ["CMakeLists.txt"])
    cctx = analyze_directory(cmake_dir)
    assert cctx.build_system == "cmake"
    assert cctx.description() == "C/C++ project (cmake)"


def test_infrastructure_detected(tmp_path):
    _populate(tmp_path, ["k8s-deploy.yaml", "main.tf", "site-playbook.yml"])
    ctx = analyze_directory(tmp_path)
    assert set(ctx.project_types) == {
        ProjectType.KUBERNETES,
        ProjectType.TERRAFORM,
        ProjectType.ANSIBLE,
    }


def test_dotnet_language(tmp_path):
    _populate(tmp_path, ["App.csproj"])
    ctx = analyze_directory(tmp_path)
    assert ctx.project_types == [ProjectType.DOTNET]
    assert ctx.language == "csharp"


def test_missing_directory_yields_empty_context(tmp_path):
    ctx = analyze_directory(tmp_path / "missing")
    assert ctx.project_types == []
    assert ctx.description() == "generic directory"


def test_analyze_current_directory(tmp_path, monkeypatch):
    _populate(tmp_path, ["Cargo.toml"])
    monkeypatch.chdir(tmp_path)
    ctx = analyze_current_directory()
    assert ctx.project_types == [ProjectType.RUST]
    assert ctx.language == "rust"