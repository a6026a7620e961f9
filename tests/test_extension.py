import pytest

from extmanager.extension import (
    Extension,
    ExtensionState,
    ExtensionType,
    compare_extension,
    is_extension_equal,
)


def test_defaults_match_property_defaults():
    ext = Extension("a@example.com")
    assert ext.uuid == "a@example.com"
    assert ext.state is ExtensionState.INITIALIZED
    assert ext.enabled is False
    assert ext.can_change is False
    assert ext.is_user is False
    assert ext.name is None
    assert ext.session_modes == []
    assert ext.donations == {}


def test_mutable_defaults_are_not_shared():
    first = Extension("one")
    second = Extension("two")
    first.session_modes.append("user")
    first.donations["paypal"] = "someone"
    assert second.session_modes == []
    assert second.donations == {}


def test_uninstalled_state_value():
    assert ExtensionState(99) is ExtensionState.UNINSTALLED
    assert ExtensionType(2) is ExtensionType.PER_USER


@pytest.mark.parametrize(
    "left, right, sign",
    [
        ("alpha", "beta", -1),
        ("beta", "alpha", 1),
        ("same", "same", 0),
        (None, "x", -1),
        ("x", None, 1),
        (None, None, 0),
    ],
)
def test_compare_extension_sign(left, right, sign):
    result = compare_extension(Extension(left), Extension(right))
    assert (result > 0) - (result < 0) == sign


def test_compare_is_antisymmetric():
    a, b = Extension("dash@example.com"), Extension("arc@example.com")
    assert compare_extension(a, b) == -compare_extension(b, a)


def test_equal_by_uuid_only():
    a = Extension("same", name="One", enabled=True)
    b = Extension("same", name="Two")
    assert is_extension_equal(a, b)
    assert not is_extension_equal(a, Extension("other"))


def test_sorting_with_comparator():
    from functools import cmp_to_key

    items = [Extension("c"), Extension("a"), Extension("b")]
    ordered = sorted(items, key=cmp_to_key(compare_extension))
    assert [e.uuid for e in ordered] == ["a", "b", "c"]