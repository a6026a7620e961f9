import pytest

from extmanager.extension import Extension, ExtensionState
from extmanager.parsing import (
    InvalidExtensionError,
    parse_extension,
    parse_extension_list,
)

UUID = "demo@example.com"


def full_properties():
    return {
        "uuid": UUID,
        "name": "Demo",
        "description": "A demo extension",
        "state": 1.0,
        "enabled": True,
        "url": "https://example.com/demo",
        "version": 7.0,
        "error": "",
        "hasPrefs": True,
        "hasUpdate": True,
        "canChange": False,
        "type": 2.0,
        "sessionModes": ["user", "unlock-dialog"],
        "donations": {"custom": "https://example.com/donate"},
    }


def test_parse_full_properties():
    extension, uninstall = parse_extension(UUID, full_properties())
    assert uninstall is False
    assert extension.uuid == UUID
    assert extension.name == "Demo"
    assert extension.description == "A demo extension"
    assert extension.state is ExtensionState.ENABLED
    assert extension.enabled is True
    assert extension.url == "https://example.com/demo"
    assert extension.version == "7"
    assert extension.has_prefs is True
    assert extension.has_update is True
    assert extension.can_change is False
    assert extension.is_user is True
    assert extension.session_modes == ["user", "unlock-dialog"]
    assert extension.donations == {"custom": "https://example.com/donate"}


def test_defaults_for_empty_properties():
    extension, uninstall = parse_extension(UUID, {})
    assert uninstall is False
    assert extension.state is ExtensionState.INITIALIZED
    assert extension.can_change is True
    assert extension.is_user is False
    assert extension.name is None
    assert extension.session_modes == []
    assert extension.donations == {}


def test_version_name_is_appended():
    props = {"version": 3.0, "version-name": "beta"}
    extension, _ = parse_extension(UUID, props)
    assert extension.version == "3 (beta)"


def test_system_type_is_not_user():
    extension, _ = parse_extension(UUID, {"type": 1.0})
    assert extension.is_user is False


def test_uninstalled_state_is_reported():
    extension, uninstall = parse_extension(UUID, {"state": 99.0})
    assert uninstall is True
    assert extension.state is ExtensionState.UNINSTALLED


def test_updates_existing_extension_in_place():
    existing = Extension(uuid=UUID, name="Old")
    extension, _ = parse_extension(UUID, {"name": "New"}, existing)
    assert extension is existing
    assert existing.name == "New"


def test_existing_extension_with_other_uuid_is_rejected():
    with pytest.raises(InvalidExtensionError):
        parse_extension(UUID, {}, Extension(uuid="other@example.com"))


def test_mismatched_uuid_property_is_rejected():
    with pytest.raises(InvalidExtensionError):
        parse_extension(UUID, {"uuid": "other@example.com"})


def test_list_keeps_order():
    data = {
        "b@example.com": {"name": "B"},
        "a@example.com": {"name": "A"},
    }
    extensions = parse_extension_list(data)
    assert [e.uuid for e in extensions] == ["b@example.com", "a@example.com"]
    assert [e.name for e in extensions] == ["B", "A"]


def test_list_with_uninstall_is_rejected():
    data = {
        "a@example.com": {"name": "A"},
        "b@example.com": {"state": 99.0},
    }
    with pytest.raises(InvalidExtensionError):
        parse_extension_list(data)


def test_empty_list():
    assert parse_extension_list({}) == []