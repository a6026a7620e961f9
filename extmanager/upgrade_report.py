"""Compatibility figures and texts for checking extensions against a shell release."""

from __future__ import annotations

import datetime
import logging
import struct
from collections.abc import Iterable
from enum import Enum

from extmanager.upgrade_result import UpgradeResult

logger = logging.getLogger(__name__)

_FIRST_VERSION = 40
_FIRST_VERSION_YEAR = 2021
_MARCH = 3
_SEPTEMBER = 9
_MINIMUM_NEWEST_VERSION = 43


def _f32(value: float) -> float:
    """Round a number to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


_ERROR_THRESHOLD = _f32(0.3)


class SupportStatus(Enum):
    """Whether an extension has a release for the target shell version."""

    SUPPORTED = "Yes"
    UNSUPPORTED = "No"
    UNKNOWN = "Unknown"


def support_status(result: UpgradeResult, target_version: str | None) -> SupportStatus:
    """Classify one result: unknown when the extension is not listed online."""
    web_data = result.web_data
    if web_data is None:
        return SupportStatus.UNKNOWN
    if web_data.supports_shell_version(target_version):
        return SupportStatus.SUPPORTED
    return SupportStatus.UNSUPPORTED


def guess_current_gnome_version(today: datetime.date) -> int:
    """Estimate the newest shell release out on the given date.

    Two releases come out a year, in March and September, starting with
    40 in March 2021.
    """
    version = _FIRST_VERSION + (today.year - _FIRST_VERSION_YEAR) * 2
    if today.month < _MARCH:
        version -= 1
    elif today.month >= _SEPTEMBER:
        version += 1
    logger.info("Current GNOME Version: %d", version)
    return version


def available_versions(today: datetime.date) -> list[str]:
    """List the versions to choose from, oldest first; the last is the default."""
    newest = max(_MINIMUM_NEWEST_VERSION, guess_current_gnome_version(today))
    return [str(version) for version in range(_FIRST_VERSION, newest + 1)]


def compatibility_fraction(supported: int, total: int) -> float:
    """Share of supported extensions, in single precision.

    Raises ValueError when there are no extensions.
    """
    if total <= 0:
        raise ValueError("There are no extensions to compare against")
    return _f32(_f32(supported) / _f32(total))


def _percent(fraction: float) -> int:
    return int(_f32(fraction * 100))


def progress_style(fraction: float) -> str | None:
    """Style class for the progress bar: success, warning or error."""
    if fraction == 1.0:
        return "success"
    if _ERROR_THRESHOLD < fraction <= 1.0:
        return "warning"
    if fraction <= _ERROR_THRESHOLD:
        return "error"
    return None


def summary_text(supported: int, total: int, target_version: str) -> tuple[str, str]:
    """Return the upper and lower summary lines shown with the results."""
    top = (
        f"<b>{supported} out of {total}</b> extensions currently installed on this "
        f"system have been marked as supporting <b>GNOME {target_version}</b>"
    )
    unsupported = total - supported
    if unsupported == 0:
        bottom = f"If you switch to GNOME {target_version} now, all of your extensions should work"
    else:
        bottom = (
            f"If you switch to GNOME {target_version} now, "
            f"{unsupported} of your extensions might not work"
        )
    return top, bottom


def _text(value: str | None) -> str:
    return "(null)" if value is None else value


def _describe(results: Iterable[UpgradeResult], target_version: str) -> str:
    return "".join(
        f"'{_text(result.name)}' by {_text(result.creator)}\n"
        f"Extension ID: {_text(result.uuid)}\n"
        f"Supported: {support_status(result, target_version).value}\n\n"
        for result in results
    )


def build_report(
    current_version: str | None,
    target_version: str,
    supported: int,
    total: int,
    user_results: Iterable[UpgradeResult],
    system_results: Iterable[UpgradeResult],
) -> str:
    """Build the plain-text report that is copied to the clipboard."""
    percent = _percent(compatibility_fraction(supported, total))
    return (
        "Extension Manager - Upgrade Assistant Report\n\n"
        f"Currently on: GNOME {_text(current_version)}\n"
        f"Upgrading to: GNOME {target_version}\n\n"
        f"On upgrading to GNOME {target_version}, {supported} out of {total} currently\n"
        f"installed extensions will be compatible ({percent}%).\n\n"
        "User-Installed Extensions:\n\n"
        f"{_describe(user_results, target_version)}"
        "\nSystem Extensions:\n\n"
        f"{_describe(system_results, target_version)}"
    )