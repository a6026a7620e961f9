"""Management of installed extensions through the shell's extension service."""

from __future__ import annotations

import bisect
import itertools
import logging
from abc import ABC, abstractmethod
from collections import defaultdict
from collections.abc import Callable, Mapping
from enum import Enum, auto
from typing import Any

from extmanager.extension import Extension, compare_extension, is_extension_equal
from extmanager.parsing import parse_extension, parse_extension_list

logger = logging.getLogger(__name__)

StateChangedCallback = Callable[[str, Mapping[str, Any]], None]


class InstallButtonState(Enum):
    """State an install button should show after an install attempt."""

    DEFAULT = auto()
    INSTALLED = auto()
    UNSUPPORTED = auto()


class ShellExtensionsProxy(ABC):
    """Connection to the shell's extension service.

    Failed calls raise an exception whose text describes the failure.
    """

    shell_version: str | None = None
    user_extensions_enabled: bool = False

    @abstractmethod
    def list_extensions(self) -> Mapping[str, Mapping[str, Any]]:
        """Return a mapping of UUID to that extension's property map."""

    @abstractmethod
    def enable_extension(self, uuid: str) -> bool:
        """Enable an extension; return whether the shell reports success."""

    @abstractmethod
    def disable_extension(self, uuid: str) -> bool:
        """Disable an extension; return whether the shell reports success."""

    @abstractmethod
    def uninstall_extension(self, uuid: str) -> bool:
        """Uninstall an extension; return whether the shell reports success."""

    @abstractmethod
    def launch_extension_prefs(self, uuid: str) -> None:
        """Open the preferences of an extension."""

    @abstractmethod
    def install_remote_extension(self, uuid: str) -> str:
        """Install an extension from the website; return the shell's answer."""

    @abstractmethod
    def check_for_updates(self) -> None:
        """Ask the shell to look for extension updates."""

    @abstractmethod
    def connect_state_changed(self, callback: StateChangedCallback) -> None:
        """Call ``callback(uuid, properties)`` whenever an extension changes."""


class Manager:
    """Keeps the list of installed extensions and acts on them.

    Signals, connected with :meth:`connect`:

    - ``updates-available(count)``
    - ``error-occurred(message)``
    - ``install-status(state)``
    - ``extensions-changed()`` when the whole list is replaced
    - ``items-changed(position, removed, added)`` when part of it changes
    """

    SIGNALS = frozenset(
        {
            "updates-available",
            "error-occurred",
            "install-status",
            "extensions-changed",
            "items-changed",
        }
    )

    def __init__(self, proxy: ShellExtensionsProxy) -> None:
        self._proxy = proxy
        self._extensions: list[Extension] = []
        self._handlers: dict[str, dict[int, Callable[..., Any]]] = defaultdict(dict)
        self._handler_ids = itertools.count(1)
        self._update_pending = False

        self.refresh()
        proxy.connect_state_changed(self.on_state_changed)

    # Signals

    def connect(self, signal: str, callback: Callable[..., Any]) -> int:
        """Register ``callback`` for ``signal`` and return a handler id."""
        if signal not in self.SIGNALS:
            raise ValueError(f"Unknown signal: {signal}")
        handler_id = next(self._handler_ids)
        self._handlers[signal][handler_id] = callback
        return handler_id

    def _emit(self, signal: str, *args: Any) -> None:
        for callback in list(self._handlers[signal].values()):
            callback(*args)

    def _notify_error(self, message: str) -> None:
        logger.critical("%s", message)
        self._emit("error-occurred", message)

    # Properties

    @property
    def extensions(self) -> list[Extension]:
        """The installed extensions."""
        return self._extensions

    @property
    def shell_version(self) -> str | None:
        """Version of the running shell."""
        return self._proxy.shell_version

    @property
    def extensions_enabled(self) -> bool:
        """Whether user extensions are enabled in the shell."""
        return bool(self._proxy.user_extensions_enabled)

    @extensions_enabled.setter
    def extensions_enabled(self, value: bool) -> None:
        self._proxy.user_extensions_enabled = bool(value)

    # Extension list

    def refresh(self) -> None:
        """Reload the whole extension list from the shell."""
        try:
            listing = self._proxy.list_extensions()
        except Exception as error:  # noqa: BLE001 - any service failure is reported
            self._notify_error(f"Could not list extensions: {error}")
            return

        self._extensions = parse_extension_list(listing)
        self._emit("extensions-changed")
        self._queue_update_notification()

    def get_by_uuid(self, uuid: str) -> Extension | None:
        """Return the installed extension with this UUID, or None."""
        return next((ext for ext in self._extensions if ext.uuid == uuid), None)

    def is_installed_uuid(self, uuid: str) -> bool:
        """Return True if an extension with this UUID is installed."""
        return self.get_by_uuid(uuid) is not None

    def _position_of(self, extension: Extension) -> int | None:
        return next(
            (
                position
                for position, item in enumerate(self._extensions)
                if is_extension_equal(item, extension)
            ),
            None,
        )

    def _insert_sorted(self, extension: Extension) -> int:
        keys = [_SortKey(item) for item in self._extensions]
        position = bisect.bisect_right(keys, _SortKey(extension))
        self._extensions.insert(position, extension)
        return position

    def on_state_changed(self, uuid: str, state: Mapping[str, Any]) -> None:
        """Apply a state change the shell reported for one extension."""
        logger.debug("State Changed for extension '%s'", uuid)

        existing = self.get_by_uuid(uuid)
        extension, is_uninstall = parse_extension(uuid, state, existing)

        if existing is None:
            position = self._insert_sorted(extension)
            self._emit("items-changed", position, 0, 1)
            return

        position = self._position_of(extension)

        if is_uninstall:
            if position is not None:
                del self._extensions[position]
                self._emit("items-changed", position, 1, 0)
            return

        if position is not None:
            self._emit("items-changed", position, 0, 0)

        if extension.has_update:
            self._queue_update_notification()

    # Update notification

    def _queue_update_notification(self) -> None:
        self._update_pending = True

    def flush_update_notification(self) -> int | None:
        """Run a queued update count.

        Emits ``updates-available`` when there are updates and returns the
        count, or returns None when nothing was queued.
        """
        if not self._update_pending:
            return None
        self._update_pending = False

        n_updates = sum(1 for ext in self._extensions if ext.has_update)
        logger.info("There are %d new updates available.", n_updates)
        if n_updates > 0:
            self._emit("updates-available", n_updates)
        return n_updates

    # Actions

    def _run_action(
        self, action: Callable[[str], bool], verb: str, extension: Extension
    ) -> None:
        uuid = extension.uuid
        try:
            success = action(uuid)
        except Exception as error:  # noqa: BLE001 - any service failure is reported
            self._notify_error(f"Could not {verb} extension '{uuid}': {error}")
            return
        if not success:
            self._notify_error(f"Could not {verb} extension '{uuid}': unknown failure")

    def enable_extension(self, extension: Extension) -> None:
        """Enable an extension, reporting failures as ``error-occurred``."""
        self._run_action(self._proxy.enable_extension, "enable", extension)

    def disable_extension(self, extension: Extension) -> None:
        """Disable an extension, reporting failures as ``error-occurred``."""
        self._run_action(self._proxy.disable_extension, "disable", extension)

    def remove_extension(self, extension: Extension) -> None:
        """Uninstall an extension, reporting failures as ``error-occurred``."""
        self._run_action(self._proxy.uninstall_extension, "remove", extension)

    def open_prefs(self, extension: Extension) -> None:
        """Open an extension's preferences; failures are only logged."""
        try:
            self._proxy.launch_extension_prefs(extension.uuid)
        except Exception as error:  # noqa: BLE001 - the shell gives no usable window handle
            logger.debug("Could not open extension '%s' preferences: %s", extension.uuid, error)

    def check_for_updates(self) -> None:
        """Ask the shell for updates and queue an update count."""
        try:
            self._proxy.check_for_updates()
        except Exception as error:  # noqa: BLE001 - any service failure is reported
            self._notify_error(f"Could not check for updates: {error}")
        self._queue_update_notification()

    def install(self, uuid: str) -> bool:
        """Install an extension from the website.

        Emits ``install-status`` with the outcome and returns whether the
        install went through; a cancelled install counts as a failure.
        """
        try:
            answer = self._proxy.install_remote_extension(uuid)
        except Exception as error:  # noqa: BLE001 - any service failure is reported
            logger.critical("%s", error)
            success = False
        else:
            success = answer != "cancelled"

        self._emit(
            "install-status",
            InstallButtonState.INSTALLED if success else InstallButtonState.DEFAULT,
        )
        return success


class _SortKey:
    __slots__ = ("extension",)

    def __init__(self, extension: Extension) -> None:
        self.extension = extension

    def __lt__(self, other: _SortKey) -> bool:
        return compare_extension(self.extension, other.extension) < 0