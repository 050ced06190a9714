"""Detection of the kind of project in a directory, used to boost search relevance."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from enum import Enum


class ProjectType(str, Enum):
    """Kinds of project that can be recognised from the files in a directory."""

    GIT = "git"
    DOCKER = "docker"
    NODE = "node"
    PYTHON = "python"
    GO = "go"
    RUST = "rust"
    JAVA = "java"
    DOTNET = "dotnet"
    RUBY = "ruby"
    PHP = "php"
    C = "c"
    CPP = "cpp"
    KUBERNETES = "kubernetes"
    TERRAFORM = "terraform"
    ANSIBLE = "ansible"
    WEBPACK = "webpack"
    VITE = "vite"
    MAKE = "make"
    GENERIC = "generic"

    def __str__(self) -> str:
        return self.value


_C_BOOSTS = {"gcc": 2.0, "make": 1.8, "cmake": 1.8, "compile": 1.5, "build": 1.5}

_BOOSTS: dict[ProjectType, dict[str, float]] = {
    ProjectType.GIT: {
        "git": 2.0, "commit": 1.5, "branch": 1.5, "merge": 1.5,
        "pull": 1.5, "push": 1.5, "clone": 1.5, "checkout": 1.5,
    },
    ProjectType.DOCKER: {
        "docker": 2.0, "container": 1.8, "image": 1.5,
        "build": 1.3, "run": 1.3, "compose": 1.5,
    },
    ProjectType.NODE: {
        "npm": 2.0, "yarn": 2.0, "node": 1.8,
        "javascript": 1.5, "package": 1.3, "install": 1.3,
    },
    ProjectType.PYTHON: {
        "python": 2.0, "pip": 2.0, "virtual": 1.5,
        "venv": 1.5, "conda": 1.5, "requirements": 1.3,
    },
    ProjectType.GO: {"go": 2.0, "mod": 1.8, "build": 1.5, "test": 1.5, "run": 1.3},
    ProjectType.RUST: {"cargo": 2.0, "rust": 1.8, "build": 1.5, "test": 1.5},
    ProjectType.JAVA: {
        "java": 2.0, "maven": 1.8, "gradle": 1.8, "build": 1.5, "compile": 1.5,
    },
    ProjectType.DOTNET: {"dotnet": 2.0, "nuget": 1.8, "build": 1.5, "restore": 1.5},
    ProjectType.RUBY: {"ruby": 2.0, "gem": 1.8, "bundle": 1.5, "rake": 1.5},
    ProjectType.PHP: {"php": 2.0, "composer": 1.8, "artisan": 1.5, "laravel": 1.3},
    ProjectType.C: _C_BOOSTS,
    ProjectType.CPP: _C_BOOSTS,
    ProjectType.KUBERNETES: {
        "kubectl": 2.0, "kubernetes": 1.8, "k8s": 1.8,
        "pod": 1.5, "service": 1.3, "deploy": 1.3,
    },
    ProjectType.TERRAFORM: {
        "terraform": 2.0, "plan": 1.8, "apply": 1.8, "destroy": 1.5, "init": 1.5,
    },
    ProjectType.ANSIBLE: {
        "ansible": 2.0, "playbook": 1.8, "inventory": 1.5, "vault": 1.5,
    },
    ProjectType.WEBPACK: {"webpack": 2.0, "build": 1.5, "bundle": 1.5},
    ProjectType.VITE: {"vite": 2.0, "build": 1.5, "dev": 1.5},
    ProjectType.MAKE: {"make": 2.0, "build": 1.5},
}

_DESCRIPTIONS: dict[ProjectType, str] = {
    ProjectType.GIT: "Git repository",
    ProjectType.DOCKER: "Docker project",
    ProjectType.NODE: "Node.js project",
    ProjectType.PYTHON: "Python project",
    ProjectType.GO: "Go project",
    ProjectType.RUST: "Rust project",
    ProjectType.JAVA: "Java project",
    ProjectType.DOTNET: ".NET project",
    ProjectType.RUBY: "Ruby project",
    ProjectType.PHP: "PHP project",
    ProjectType.C: "C/C++ project",
    ProjectType.CPP: "C++ project",
    ProjectType.KUBERNETES: "Kubernetes deployment",
    ProjectType.TERRAFORM: "Terraform infrastructure",
    ProjectType.ANSIBLE: "Ansible playbook",
    ProjectType.WEBPACK: "Webpack project",
    ProjectType.VITE: "Vite project",
    ProjectType.MAKE: "Makefile project",
    ProjectType.GENERIC: "generic directory",
}

_SCRIPT_BOOST = 1.3


@dataclass
class ProjectContext:
    """What was learned about a working directory."""

    working_dir: str = ""
    project_types: list[ProjectType] = field(default_factory=list)
    has_git: bool = False
    has_docker: bool = False
    language: str = ""
    package_scripts: dict[str, str] = field(default_factory=dict)
    make_targets: list[str] = field(default_factory=list)
    build_system: str = ""

    def context_boosts(self) -> dict[str, float]:
        """Return keyword weights suited to the detected project types."""
        boosts: dict[str, float] = {}
        for project_type in self.project_types:
            boosts.update(_BOOSTS.get(project_type, {}))
        for script in self.package_scripts:
            boosts[script] = _SCRIPT_BOOST
        for target in self.make_targets:
            boosts[target] = _SCRIPT_BOOST
        return boosts

    def description(self) -> str:
        """Return a human-readable summary of the detected context."""
        if not self.project_types:
            return "generic directory"
        result = ", ".join(
            _DESCRIPTIONS[t] for t in self.project_types if t in _DESCRIPTIONS
        )
        if self.build_system:
            result += f" ({self.build_system})"
        return result

    def _add(self, project_type: ProjectType, language: str = "") -> None:
        self.project_types.append(project_type)
        if language and not self.language:
            self.language = language


def _is_yaml(name: str) -> bool:
    return name.endswith((".yaml", ".yml"))


def _read_package_scripts(path: str) -> dict[str, str] | None:
    try:
        with open(path, encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, ValueError):
        return None
    if not isinstance(data, dict):
        return None
    scripts = data.get("scripts")
    if scripts is None:
        return {}
    if not isinstance(scripts, dict) or not all(
        isinstance(v, str) for v in scripts.values()
    ):
        return None
    return dict(scripts)


def _read_make_targets(path: str) -> list[str]:
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            content = handle.read()
    except OSError:
        return []
    targets = []
    for line in content.split("\n"):
        line = line.strip()
        if ":" not in line or line.startswith("#") or line.startswith("\t"):
            continue
        target = line.split(":", 1)[0].strip()
        if target and "=" not in target and not target.startswith("."):
            targets.append(target)
    return targets


def _inspect(name: str, directory: str, ctx: ProjectContext) -> None:
    if name == ".git":
        ctx.has_git = True
        ctx._add(ProjectType.GIT)

    if name in ("Dockerfile", "docker-compose.yml", "docker-compose.yaml"):
        ctx.has_docker = True
        ctx._add(ProjectType.DOCKER)

    if name == "package.json":
        ctx._add(ProjectType.NODE, "javascript")
        scripts = _read_package_scripts(os.path.join(directory, name))
        if scripts is not None:
            ctx.package_scripts = scripts
    elif name in ("node_modules", "yarn.lock", "pnpm-lock.yaml"):
        ctx._add(ProjectType.NODE, "javascript")
    elif name in ("webpack.config.js", "webpack.config.ts"):
        ctx._add(ProjectType.WEBPACK)
    elif name in ("vite.config.js", "vite.config.ts"):
        ctx._add(ProjectType.VITE)

    if name in ("requirements.txt", "setup.py", "pyproject.toml", "Pipfile"):
        ctx._add(ProjectType.PYTHON, "python")

    if name in ("go.mod", "go.sum"):
        ctx._add(ProjectType.GO, "go")

    if name in ("Cargo.toml", "Cargo.lock"):
        ctx._add(ProjectType.RUST, "rust")

    if name == "pom.xml":
        ctx._add(ProjectType.JAVA, "java")
        ctx.build_system = "maven"
    elif name in ("build.gradle", "build.gradle.kts"):
        ctx._add(ProjectType.JAVA, "java")
        ctx.build_system = "gradle"

    if name.endswith((".csproj", ".vbproj", ".fsproj")):
        ctx._add(ProjectType.DOTNET, "csharp")
    elif name in ("global.json", "nuget.config"):
        ctx._add(ProjectType.DOTNET)

    if name in ("Gemfile", "Rakefile"):
        ctx._add(ProjectType.RUBY, "ruby")

    if name in ("composer.json", "composer.lock"):
        ctx._add(ProjectType.PHP, "php")

    if name == "CMakeLists.txt":
        ctx._add(ProjectType.C, "c")
        ctx.build_system = "cmake"
    elif name in ("Makefile", "makefile"):
        ctx._add(ProjectType.MAKE)
        ctx.make_targets.extend(_read_make_targets(os.path.join(directory, name)))

    if ("k8s" in name or "kubernetes" in name) and _is_yaml(name):
        ctx._add(ProjectType.KUBERNETES)
    elif name in ("kustomization.yaml", "kustomization.yml"):
        ctx._add(ProjectType.KUBERNETES)

    if name.endswith((".tf", ".tfvars")):
        ctx._add(ProjectType.TERRAFORM)

    if name in ("ansible.cfg", "hosts", "inventory"):
        ctx._add(ProjectType.ANSIBLE)
    elif "playbook" in name and _is_yaml(name):
        ctx._add(ProjectType.ANSIBLE)


def analyze_directory(directory: str | os.PathLike[str]) -> ProjectContext:
    """Inspect the entries of ``directory`` and describe the project found there.

    An unreadable directory yields a context with no project types.
    """
    directory = os.fspath(directory)
    ctx = ProjectContext(working_dir=directory)
    try:
        names = sorted(os.listdir(directory))
    except OSError:
        return ctx

    for name in names:
        _inspect(name, directory, ctx)

    ctx.project_types = list(dict.fromkeys(ctx.project_types))
    if not ctx.project_types:
        ctx.project_types.append(ProjectType.GENERIC)
    return ctx


def analyze_current_directory() -> ProjectContext:
    """Analyze the current working directory."""
    return analyze_directory(os.getcwd())