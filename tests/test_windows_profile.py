import pytest

from app_dirs.profiles import WindowsProfile

LOCAL = "C:\\Users\\fakeuser\\AppData\\Local"
ROAMING = "C:\\Users\\fakeuser\\AppData\\Roaming"
PROGRAM_DATA = "C:\\ProgramData"


@pytest.fixture
def windows():
    return WindowsProfile(
        {
            "LOCALAPPDATA": LOCAL,
            "APPDATA": ROAMING,
            "ALLUSERSPROFILE": PROGRAM_DATA,
        }
    )


@pytest.mark.parametrize(
    ("method", "base"),
    [
        ("user_data_dir", LOCAL),
        ("user_config_dir", LOCAL),
        ("user_cache_dir", LOCAL),
        ("site_data_dir", PROGRAM_DATA),
        ("site_config_dir", PROGRAM_DATA),
        ("user_log_dir", PROGRAM_DATA),
    ],
)
def test_appname_and_version_rules(windows, method, base):
    resolve = getattr(windows, method)

    assert resolve().first == base
    assert resolve("someApp").first == f"{base}\\someApp"
    assert resolve("someApp", None, "3.1").first == f"{base}\\someApp\\3.1"
    assert resolve(None, None, "3.1").first == base


@pytest.mark.parametrize("method", ["user_data_dir", "user_config_dir"])
def test_roaming_switches_to_appdata(windows, method):
    resolve = getattr(windows, method)

    assert resolve(roaming=True).first == ROAMING
    assert resolve("someApp", None, "3.1", roaming=True).first == f"{ROAMING}\\someApp\\3.1"
    assert resolve(roaming=False).first == LOCAL


def test_appauthor_is_not_part_of_the_path(windows):
    assert windows.user_data_dir("someApp", "someAuthor").first == f"{LOCAL}\\someApp"


@pytest.mark.parametrize("method", ["site_data_dir", "site_config_dir"])
def test_multipath_wraps_single_directory(windows, method):
    result = getattr(windows, method)("someApp", None, "3.1", multipath=True)

    assert result.value == [f"{PROGRAM_DATA}\\someApp\\3.1"]


def test_missing_variable_gives_empty_base():
    windows = WindowsProfile({})

    assert windows.user_cache_dir().first == ""
    assert windows.user_cache_dir("someApp").first == "someApp"


def test_drive_prefixed_appname_is_appended(windows):
    assert windows.user_data_dir("D:X").first == f"{LOCAL}\\D:X"


def test_absolute_appname_and_version_are_appended(windows):
    assert windows.user_cache_dir("\\X", None, "/1.0").first == f"{LOCAL}\\X\\1.0"
    assert windows.site_data_dir("/X", multipath=True).value == [f"{PROGRAM_DATA}\\X"]


def test_forward_slashes_inside_appname_are_normalised(windows):
    assert windows.user_data_dir("acme/tool").first == f"{LOCAL}\\acme\\tool"
