"""Locally installed shell extensions as reported by the shell."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class ExtensionState(IntEnum):
    """Lifecycle state of an extension, as numbered by the shell."""

    ENABLED = 1
    DISABLED = 2
    ERROR = 3
    OUT_OF_DATE = 4
    DOWNLOADING = 5
    INITIALIZED = 6
    DISABLING = 7
    ENABLING = 8
    UNINSTALLED = 99


class ExtensionType(IntEnum):
    """Where an extension is installed."""

    SYSTEM = 1
    PER_USER = 2


@dataclass(eq=False)
class Extension:
    """An installed extension and the properties the shell reports for it."""

    uuid: str | None
    name: str | None = None
    description: str | None = None
    state: ExtensionState = ExtensionState.INITIALIZED
    enabled: bool = False
    url: str | None = None
    version: str | None = None
    error: str | None = None
    has_prefs: bool = False
    has_update: bool = False
    can_change: bool = False
    is_user: bool = False
    session_modes: list[str] = field(default_factory=list)
    donations: dict[str, str] = field(default_factory=dict)


def _cmp_optional(a: str | None, b: str | None) -> int:
    if a is None or b is None:
        if a is None and b is None:
            return 0
        return -1 if a is None else 1
    return (a > b) - (a < b)


def compare_extension(a: Extension, b: Extension) -> int:
    """Order two extensions by UUID; a missing UUID sorts first.

    Returns a negative number, zero or a positive number.
    """
    return _cmp_optional(a.uuid, b.uuid)


def is_extension_equal(a: Extension, b: Extension) -> bool:
    """Return True when both extensions have the same UUID."""
    return compare_extension(a, b) == 0