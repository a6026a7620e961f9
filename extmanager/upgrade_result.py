"""Pairing of a locally installed extension with its online listing."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from extmanager.extension import Extension


@dataclass
class WebData:
    """What the extensions website reports about one extension."""

    uuid: str | None = None
    name: str | None = None
    creator: str | None = None
    shell_versions: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if not isinstance(self.shell_versions, frozenset):
            self.shell_versions = frozenset(self._as_iterable(self.shell_versions))

    @staticmethod
    def _as_iterable(values: Iterable[str] | str) -> Iterable[str]:
        if isinstance(values, str):
            return (values,)
        return values

    def supports_shell_version(self, version: str | None) -> bool:
        """Return True if a release exists for the given shell version."""
        if version is None:
            return False
        return version in self.shell_versions


@dataclass
class UpgradeResult:
    """Outcome of checking one installed extension against the website."""

    local_data: Extension | None = None
    web_data: WebData | None = None

    @property
    def name(self) -> str | None:
        """Display name, preferring the website's over the local one."""
        if self.web_data is not None:
            return self.web_data.name
        if self.local_data is not None:
            return self.local_data.name
        return None

    @property
    def creator(self) -> str | None:
        """Creator as listed on the website; None when not listed there."""
        if self.web_data is not None:
            return self.web_data.creator
        return None

    @property
    def uuid(self) -> str | None:
        """UUID, preferring the website's over the local one."""
        if self.web_data is not None:
            return self.web_data.uuid
        if self.local_data is not None:
            return self.local_data.uuid
        return None