"""Model, parse, manage and check GNOME Shell extensions for upgrade compatibility."""

__version__ = "0.6.3"

__all__ = [
    "extension",
    "manager",
    "markup",
    "parsing",
    "upgrade",
    "upgrade_report",
    "upgrade_result",
    "zoom",
]