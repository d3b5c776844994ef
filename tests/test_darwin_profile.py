import pytest

from app_dirs.profiles import DarwinProfile

HOME = "/Users/fake-home"


@pytest.fixture
def darwin():
    return DarwinProfile({"HOME": HOME})


@pytest.mark.parametrize(
    ("method", "base"),
    [
        ("user_data_dir", f"{HOME}/Library/Application Support"),
        ("user_config_dir", f"{HOME}/Library/Application Support"),
        ("user_cache_dir", f"{HOME}/Library/Caches"),
        ("site_data_dir", "/Library/Application Support"),
        ("site_config_dir", "/Library/Application Support"),
        ("user_log_dir", f"{HOME}/Library/Logs"),
    ],
)
def test_appname_and_version_rules(darwin, method, base):
    resolve = getattr(darwin, method)

    assert resolve().first == base
    assert resolve("someApp").first == f"{base}/someApp"
    assert resolve("someApp", None, "3.1").first == f"{base}/someApp/3.1"
    assert resolve(None, None, "3.1").first == base


def test_user_log_dir():
    darwin = DarwinProfile({"HOME": "/Users/u"})

    assert darwin.user_log_dir().first == "/Users/u/Library/Logs"
    assert darwin.user_log_dir("X", version="1.0").first == "/Users/u/Library/Logs/X/1.0"


def test_config_aliases_data(darwin):
    assert darwin.user_config_dir("someApp", roaming=True) == darwin.user_data_dir("someApp")
    assert darwin.site_config_dir("someApp", multipath=True) == darwin.site_data_dir("someApp", multipath=True)


@pytest.mark.parametrize("method", ["site_data_dir", "site_config_dir"])
def test_multipath_wraps_single_directory(darwin, method):
    result = getattr(darwin, method)("someApp", None, "3.1", multipath=True)

    assert result.value == ["/Library/Application Support/someApp/3.1"]


def test_xdg_variables_are_ignored():
    darwin = DarwinProfile({"HOME": HOME, "XDG_DATA_HOME": "/xdg", "XDG_DATA_DIRS": "/a:/b"})

    assert darwin.user_data_dir().first == f"{HOME}/Library/Application Support"
    assert darwin.site_data_dir(multipath=True).value == ["/Library/Application Support"]


def test_absolute_appname_and_version_are_appended(darwin):
    assert darwin.user_log_dir("/X", None, "/1.0").first == f"{HOME}/Library/Logs/X/1.0"
    assert darwin.site_data_dir("/X").first == "/Library/Application Support/X"


def test_separators_inside_appname_pass_through(darwin):
    assert darwin.user_cache_dir("acme/tool").first == f"{HOME}/Library/Caches/acme/tool"
