"""Browser user-agent strings."""

from __future__ import annotations

from fakesmith.dates import date
from fakesmith.letters import rand_string
from fakesmith.randomness import get_rand_value, rand_int_range

_MOBILE_DEVICES = ("iPhone; CPU iPhone OS", "iPad; CPU OS")


def _linux_platform_token() -> str:
    return "X11; Linux " + get_rand_value("computer", "linux_processor")


def _mac_platform_token() -> str:
    processor = get_rand_value("computer", "mac_processor")
    return (
        f"Macintosh; {processor} Mac OS X 10_"
        f"{rand_int_range(5, 9)}_{rand_int_range(0, 10)}"
    )


def _windows_platform_token() -> str:
    return get_rand_value("computer", "windows_platform")


def _random_platform() -> str:
    platforms = [
        _linux_platform_token(),
        _mac_platform_token(),
        _windows_platform_token(),
    ]
    return rand_string(platforms)


def user_agent() -> str:
    """Return a random browser user agent."""
    choice = rand_int_range(0, 4)
    if choice == 1:
        return firefox_user_agent()
    if choice == 2:
        return safari_user_agent()
    if choice == 3:
        return opera_user_agent()
    return chrome_user_agent()


def chrome_user_agent() -> str:
    """Return a random Chrome user agent."""
    webkit = f"{rand_int_range(531, 536)}{rand_int_range(0, 2)}"
    major = rand_int_range(36, 40)
    build = rand_int_range(800, 899)
    return (
        f"Mozilla/5.0 ({_random_platform()}) AppleWebKit/{webkit}"
        f" (KHTML, like Gecko) Chrome/{major}.0.{build}.0 Mobile Safari/{webkit}"
    )


def firefox_user_agent() -> str:
    """Return a random Firefox user agent."""
    gecko_date = date().strftime("%Y-%d-%m")
    version = f"Gecko/{gecko_date} Firefox/{rand_int_range(35, 37)}.0"
    windows = _windows_platform_token()
    windows_rv = rand_int_range(0, 3)
    linux = _linux_platform_token()
    linux_rv = rand_int_range(5, 8)
    mac = _mac_platform_token()
    mac_rv = rand_int_range(2, 7)
    platforms = [
        f"({windows}; en-US; rv:1.9.{windows_rv}.20) {version}",
        f"({linux}; rv:{linux_rv}.0) {version}",
        f"({mac} rv:{mac_rv}.0) {version}",
    ]
    return "Mozilla/5.0 " + rand_string(platforms)


def safari_user_agent() -> str:
    """Return a random Safari user agent."""
    webkit = f"{rand_int_range(531, 536)}.{rand_int_range(1, 51)}.{rand_int_range(1, 8)}"
    version = f"{rand_int_range(4, 6)}.{rand_int_range(0, 2)}"

    windows = _windows_platform_token()
    desktop_windows = (
        f"(Windows; U; {windows}) AppleWebKit/{webkit}"
        f" (KHTML, like Gecko) Version/{version} Safari/{webkit}"
    )

    mac = _mac_platform_token()
    mac_rv = rand_int_range(4, 7)
    desktop_mac = (
        f"({mac} rv:{mac_rv}.0; en-US) AppleWebKit/{webkit}"
        f" (KHTML, like Gecko) Version/{version} Safari/{webkit}"
    )

    device = rand_string(_MOBILE_DEVICES)
    os_major = rand_int_range(7, 9)
    os_minor = rand_int_range(0, 3)
    os_patch = rand_int_range(1, 3)
    mobile_version = rand_int_range(3, 5)
    mobile_build = rand_int_range(111, 120)
    mobile = (
        f"({device} {os_major}_{os_minor}_{os_patch} like Mac OS X; en-US)"
        f" AppleWebKit/{webkit} (KHTML, like Gecko) Version/{mobile_version}.0.5"
        f" Mobile/8B{mobile_build} Safari/6{webkit}"
    )

    return "Mozilla/5.0 " + rand_string([desktop_windows, desktop_mac, mobile])


def opera_user_agent() -> str:
    """Return a random Opera user agent."""
    platform = _random_platform()
    presto_minor = rand_int_range(8, 13)
    presto_patch = rand_int_range(160, 355)
    version = rand_int_range(10, 13)
    details = (
        f"({platform}; en-US) Presto/2.{presto_minor}.{presto_patch} Version/{version}.00"
    )
    return f"Opera/{rand_int_range(8, 10)}.{rand_int_range(10, 99)} {details}"