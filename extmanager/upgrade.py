"""Checking installed extensions against a future shell release."""

from __future__ import annotations

import logging
import struct
from abc import ABC, abstractmethod

from extmanager.manager import Manager
from extmanager.upgrade_report import (
    SupportStatus,
    build_report,
    compatibility_fraction,
    progress_style,
    summary_text,
    support_status,
)
from extmanager.upgrade_result import UpgradeResult, WebData

logger = logging.getLogger(__name__)


class ExtensionNotFound(LookupError):
    """Raised by a data provider when the website does not list an extension."""


class DataProvider(ABC):
    """Source of what the extensions website knows about an extension."""

    @abstractmethod
    def get(self, uuid: str) -> WebData:
        """Return the website's data for ``uuid``.

        Raises ExtensionNotFound when the extension is not listed; any other
        exception means the lookup itself failed.
        """


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


class UpgradeAssistant:
    """Works out which installed extensions support a chosen shell version."""

    def __init__(self, manager: Manager | None, data_provider: DataProvider) -> None:
        self.manager = manager
        self.data_provider = data_provider

        self.target_version: str | None = None
        self.current_version: str | None = (
            manager.shell_version if manager is not None else None
        )

        self.total_extensions = 0
        self.number_checked = 0
        self.number_supported = 0
        self.user_results: list[UpgradeResult] = []
        self.system_results: list[UpgradeResult] = []

    @property
    def checked_text(self) -> str:
        """Progress line shown while the check runs."""
        return f"Checked {self.number_checked}/{self.total_extensions} Extensions"

    def run(self, target_version: str | None) -> None:
        """Check every installed extension against ``target_version``.

        Extensions the website does not list are kept with an unknown
        status; any other lookup failure is raised and ends the check.
        """
        if target_version is None:
            return
        self.target_version = target_version

        if self.manager is None:
            return

        self.current_version = self.manager.shell_version
        self.total_extensions = 0
        self.number_checked = 0
        self.number_supported = 0
        self.user_results = []
        self.system_results = []

        extensions = list(self.manager.extensions)
        self.total_extensions = len(extensions)

        for extension in extensions:
            logger.debug("Processing: %s", extension.uuid)
            try:
                web_data: WebData | None = self.data_provider.get(extension.uuid)
            except ExtensionNotFound:
                web_data = None

            self.number_checked += 1
            result = UpgradeResult(local_data=extension, web_data=web_data)

            if support_status(result, target_version) is SupportStatus.SUPPORTED:
                self.number_supported += 1

            target = self.user_results if extension.is_user else self.system_results
            target.append(result)

    def _require_target(self) -> str:
        if self.target_version is None:
            raise ValueError("No target version has been checked")
        return self.target_version

    def fraction(self) -> float:
        """Share of checked extensions that support the target version."""
        return compatibility_fraction(self.number_supported, self.total_extensions)

    def percent(self) -> int:
        """Compatible share as a whole percentage, rounded down."""
        return int(_f32(self.fraction() * 100))

    def style(self) -> str | None:
        """Style class matching the compatible share."""
        return progress_style(self.fraction())

    def summary(self) -> tuple[str, str]:
        """Upper and lower summary lines for the results."""
        return summary_text(
            self.number_supported, self.total_extensions, self._require_target()
        )

    def report(self) -> str:
        """Plain-text report of the last check."""
        return build_report(
            self.current_version,
            self._require_target(),
            self.number_supported,
            self.total_extensions,
            self.user_results,
            self.system_results,
        )