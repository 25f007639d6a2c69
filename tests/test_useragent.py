import re

from fakesmith import useragent
from fakesmith.data import COMPUTER
from fakesmith.randomness import seed

CHROME = re.compile(
    r"^Mozilla/5\.0 \((?P<platform>.+)\) AppleWebKit/(?P<webkit>53[1-6][0-2])"
    r" \(KHTML, like Gecko\) Chrome/(3[6-9]|40)\.0\.8\d\d\.0 Mobile Safari/(?P=webkit)$"
)
FIREFOX_TAIL = re.compile(
    r"Gecko/(?P<year>\d{4})-(?P<day>\d{2})-(?P<month>\d{2}) Firefox/3[5-7]\.0$"
)
OPERA = re.compile(
    r"^Opera/(8|9|10)\.\d{2} \((?P<platform>.+); en-US\) Presto/2\.(8|9|1[0-3])"
    r"\.\d{3} Version/1[0-3]\.00$"
)
LINUX = re.compile(r"^X11; Linux (i686|x86_64)$")
MAC = re.compile(r"^Macintosh; (Intel|PPC|U; Intel|U; PPC) Mac OS X 10_[5-9]_(\d|10)$")


def _is_platform(token):
    return bool(
        LINUX.match(token)
        or MAC.match(token)
        or token in COMPUTER["windows_platform"]
    )


def test_chrome_user_agent_shape():
    seed(11)
    for _ in range(100):
        agent = useragent.chrome_user_agent()
        match = CHROME.match(agent)
        assert match, agent
        assert _is_platform(match.group("platform"))


def test_firefox_user_agent_shape():
    seed(11)
    for _ in range(100):
        agent = useragent.firefox_user_agent()
        assert agent.startswith("Mozilla/5.0 (")
        match = FIREFOX_TAIL.search(agent)
        assert match, agent
        assert 1 <= int(match.group("day")) <= 31
        assert 1 <= int(match.group("month")) <= 12
        assert 1899 <= int(match.group("year"))


def test_safari_user_agent_shape():
    seed(11)
    for _ in range(100):
        agent = useragent.safari_user_agent()
        assert agent.startswith("Mozilla/5.0 (")
        assert re.search(r"AppleWebKit/53[1-6]\.\d{1,2}\.[1-8] \(KHTML, like Gecko\)", agent)
        assert re.search(r"Safari/6?53[1-6]\.\d{1,2}\.[1-8]$", agent)


def test_opera_user_agent_shape():
    seed(11)
    for _ in range(100):
        agent = useragent.opera_user_agent()
        match = OPERA.match(agent)
        assert match, agent
        assert _is_platform(match.group("platform"))


def test_user_agent_covers_all_browsers():
    seed(11)
    agents = [useragent.user_agent() for _ in range(300)]
    assert all(a.startswith(("Mozilla/5.0 ", "Opera/")) for a in agents)
    assert any("Chrome/" in a for a in agents)
    assert any("Firefox/" in a for a in agents)
    assert any("Version/" in a and "Safari/" in a and "Chrome/" not in a for a in agents)
    assert any(a.startswith("Opera/") for a in agents)


def test_user_agent_repeatable_with_seed():
    seed(11)
    first = [useragent.user_agent() for _ in range(5)]
    seed(11)
    assert [useragent.user_agent() for _ in range(5)] == first