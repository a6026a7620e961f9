import pytest

from extmanager.extension import Extension
from extmanager.upgrade_result import UpgradeResult, WebData


@pytest.fixture
def local():
    return Extension(uuid="local@example.com", name="Local Name")


@pytest.fixture
def web():
    return WebData(
        uuid="web@example.com",
        name="Web Name",
        creator="someone",
        shell_versions=frozenset({"44", "45"}),
    )


def test_name_prefers_web_data(local, web):
    result = UpgradeResult(local_data=local, web_data=web)
    assert result.name == "Web Name"


def test_name_falls_back_to_local(local):
    result = UpgradeResult(local_data=local)
    assert result.name == "Local Name"


def test_empty_result_has_no_fields():
    result = UpgradeResult()
    assert (result.name, result.creator, result.uuid) == (None, None, None)


def test_creator_only_from_web(local, web):
    assert UpgradeResult(local_data=local).creator is None
    assert UpgradeResult(local_data=local, web_data=web).creator == "someone"


def test_uuid_prefers_web_data(local, web):
    assert UpgradeResult(local_data=local, web_data=web).uuid == "web@example.com"
    assert UpgradeResult(local_data=local).uuid == "local@example.com"


def test_supports_shell_version(web):
    assert web.supports_shell_version("45")
    assert not web.supports_shell_version("46")
    assert not web.supports_shell_version(None)


def test_shell_versions_accepts_any_iterable():
    data = WebData(shell_versions=["40", "41"])
    assert data.shell_versions == frozenset({"40", "41"})
    assert data.supports_shell_version("41")


def test_single_string_version_is_one_entry():
    data = WebData(shell_versions="45")
    assert data.supports_shell_version("45")
    assert not data.supports_shell_version("4")