"""Shell command helper: project context detection, caches, alias setup and command wizards."""

__version__ = "1.2.0"