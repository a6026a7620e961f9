# extmanager

A library for working with the GNOME Shell extensions installed on a system.

- `extmanager.extension`: the `Extension` dataclass (UUID, name, description,
  `ExtensionState`, enabled flag, URL, version, error, preferences and update flags,
  user or system install, session modes, donation links), plus `compare_extension`
  and `is_extension_equal`, which order and compare extensions by UUID.
- `extmanager.parsing`: `parse_extension` applies one property map, as GNOME Shell
  reports it, to a new or existing `Extension` and tells whether it describes an
  uninstall; `parse_extension_list` builds extensions from a mapping of UUID to
  property map. Both raise `InvalidExtensionError` for unusable entries.
- `extmanager.manager`: `Manager` keeps the list of installed extensions up to date
  through a `ShellExtensionsProxy` you implement, enables, disables, removes and
  installs extensions, opens their preferences and asks for updates. Handlers are
  registered with `Manager.connect` for the signals `updates-available`,
  `error-occurred`, `install-status` (an `InstallButtonState`), `extensions-changed`
  and `items-changed`. Update counts are queued and delivered by
  `Manager.flush_update_notification`. State changes reported by the shell go
  through `Manager.on_state_changed`, which keeps the list sorted by UUID.
- `extmanager.upgrade_result`: `WebData` (what the extensions website lists for an
  extension, with `supports_shell_version`) and `UpgradeResult`, which pairs it with
  the installed `Extension`.
- `extmanager.upgrade_report`: `SupportStatus`, `support_status`,
  `guess_current_gnome_version`, `available_versions`, `compatibility_fraction`,
  `progress_style`, `summary_text` and `build_report`, the figures and texts of a
  compatibility check.
- `extmanager.upgrade`: `UpgradeAssistant` checks every installed extension against
  a target version using a `DataProvider` you implement; `fraction()`, `percent()`,
  `style()`, `summary()` and `report()` describe the result.
- `extmanager.markup`: `convert_html` turns an HTML description into markup that
  keeps only `<b>`, `<i>`, `<u>` and line breaks, escaping text; it raises
  `EmptyDocumentError` for an empty document.
- `extmanager.zoom`: `ZoomPicture` keeps the zoom level (0.5 to 5.0) and pan offset
  of a picture, follows pinch and drag gestures, and `compute_layout` returns a
  `Layout` giving where and how large to draw it.

## Installing

```
pip install .
```

Python 3.10 or later is needed. There are no dependencies outside the standard
library.

## Examples

Parse what GNOME Shell reports about an extension:

```python
from extmanager.parsing import parse_extension

ext, uninstalling = parse_extension(
    "example@example.com",
    {"name": "Example", "state": 1.0, "enabled": True, "type": 2.0, "version": 4.0},
)
print(ext.name, ext.version, ext.is_user, uninstalling)  # Example 4 True False
```

Convert an HTML description to markup:

```python
from extmanager.markup import convert_html

print(convert_html("<p>Hello <b>world</b><br>again</p>"))
```

List the GNOME versions an upgrade check can target:

```python
import datetime
from extmanager.upgrade_report import available_versions, guess_current_gnome_version

today = datetime.date.today()
print(guess_current_gnome_version(today), available_versions(today))
```

Check compatibility:

```python
from extmanager.manager import Manager
from extmanager.upgrade import UpgradeAssistant

manager = Manager(my_proxy)              # a ShellExtensionsProxy subclass
assistant = UpgradeAssistant(manager, my_provider)  # a DataProvider subclass
assistant.run("47")
print(assistant.percent(), assistant.summary())
print(assistant.report())
```

A `DataProvider.get` raises `ExtensionNotFound` for extensions the website does not
list; those are reported with an unknown status. Any other exception it raises ends
the check.

## What it does not do

The package has no connection to GNOME Shell and no client for the extensions
website: `ShellExtensionsProxy` and `DataProvider` are abstract classes for you to
implement. It has no graphical interface and no command-line program.

## Running the tests

```
pip install .[test]
pytest
```