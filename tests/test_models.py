import pytest

from app_dirs.models import ApplicationIdentity, DirectoryKind, PathResult


def test_identity_author_falls_back_to_name():
    assert ApplicationIdentity(name="app").resolved_author == "app"
    assert ApplicationIdentity(name="app", author="acme").resolved_author == "acme"
    assert ApplicationIdentity().resolved_author is None


def test_identity_is_immutable():
    identity = ApplicationIdentity(name="app")

    with pytest.raises(AttributeError):
        identity.name = "other"


def test_directory_kind_method_names():
    assert [kind.method_name for kind in DirectoryKind] == [
        "user_data_dir",
        "user_config_dir",
        "user_cache_dir",
        "site_data_dir",
        "site_config_dir",
        "user_log_dir",
    ]
    assert DirectoryKind("site_data") is DirectoryKind.SITE_DATA


def test_directory_kind_flags():
    assert {k for k in DirectoryKind if k.supports_roaming} == {
        DirectoryKind.USER_DATA,
        DirectoryKind.USER_CONFIG,
    }
    assert {k for k in DirectoryKind if k.supports_multipath} == {
        DirectoryKind.SITE_DATA,
        DirectoryKind.SITE_CONFIG,
    }


def test_path_result_value_shapes():
    single = PathResult.candidates(["/a", "/b"], multipath=False)
    multi = PathResult.candidates(["/a", "/b"], multipath=True)

    assert single.value == "/a"
    assert single.first == "/a"
    assert multi.value == ["/a", "/b"]
    assert list(multi) == ["/a", "/b"]
    assert len(multi) == 2


def test_path_result_requires_a_path():
    with pytest.raises(ValueError):
        PathResult(paths=())
