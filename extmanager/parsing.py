"""Decoding of extension properties as sent by the shell's extension service."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from extmanager.extension import Extension, ExtensionState, ExtensionType

logger = logging.getLogger(__name__)


class InvalidExtensionError(ValueError):
    """Raised when the shell's extension list holds an unusable entry."""


def _state_from(value: Any) -> ExtensionState | int:
    number = int(value)
    try:
        return ExtensionState(number)
    except ValueError:
        logger.debug("Unknown extension state %d", number)
        return number


def _session_modes(value: Iterable[Any]) -> list[str]:
    return [str(mode) for mode in value]


def _donations(value: Mapping[str, Any]) -> dict[str, str]:
    return {str(key): str(item) for key, item in value.items()}


def parse_extension(
    uuid: str,
    properties: Mapping[str, Any],
    extension: Extension | None = None,
) -> tuple[Extension, bool]:
    """Apply one extension's property map to an extension.

    Updates ``extension`` in place, or creates a new one when it is None.
    Returns the extension and whether the properties describe an uninstall.
    Raises InvalidExtensionError when the UUIDs disagree.
    """
    if extension is None:
        extension = Extension(uuid=uuid)
    elif extension.uuid != uuid:
        raise InvalidExtensionError(
            f"Extension '{extension.uuid}' does not match '{uuid}'"
        )

    logger.debug("Found extension '%s' with properties:", uuid)

    name = description = url = version = version_name = error = None
    state: ExtensionState | int = ExtensionState.INITIALIZED
    enabled = has_prefs = has_update = False
    can_change = True
    ext_type = ExtensionType.SYSTEM
    session_modes: list[str] = []
    donations: dict[str, str] = {}

    for key, value in properties.items():
        logger.debug(" - Property: %s=%r", key, value)
        if key == "uuid":
            if value != uuid:
                raise InvalidExtensionError(
                    f"Property uuid '{value}' does not match '{uuid}'"
                )
        elif key == "name":
            name = value
        elif key == "description":
            description = value
        elif key == "state":
            state = _state_from(value)
        elif key == "enabled":
            enabled = bool(value)
        elif key == "url":
            url = value
        elif key == "version":
            version = str(int(value))
        elif key == "version-name":
            version_name = value
        elif key == "error":
            error = value
        elif key == "hasPrefs":
            has_prefs = bool(value)
        elif key == "hasUpdate":
            has_update = bool(value)
        elif key == "canChange":
            can_change = bool(value)
        elif key == "type":
            ext_type = int(value)
        elif key == "sessionModes":
            session_modes = _session_modes(value)
        elif key == "donations":
            donations = _donations(value)

    if version_name:
        version = f"{version} ({version_name})" if version is not None else version_name

    extension.name = name
    extension.description = description
    extension.state = state
    extension.enabled = enabled
    extension.url = url
    extension.version = version
    extension.error = error
    extension.has_prefs = has_prefs
    extension.has_update = has_update
    extension.can_change = can_change
    extension.is_user = ext_type == ExtensionType.PER_USER
    extension.session_modes = session_modes
    extension.donations = donations

    return extension, state == ExtensionState.UNINSTALLED


def parse_extension_list(
    extensions: Mapping[str, Mapping[str, Any]],
) -> list[Extension]:
    """Build extensions from a mapping of UUID to property map, in order.

    Raises InvalidExtensionError if any entry is being uninstalled.
    """
    result = []
    for uuid, properties in extensions.items():
        extension, is_uninstall = parse_extension(uuid, properties)
        if is_uninstall:
            raise InvalidExtensionError(
                f"Invalid extension: '{uuid}' is being uninstalled."
            )
        result.append(extension)
    return result