import pytest
from selenium.common.exceptions import NoSuchElementException


class FakeElement:
    def __init__(self):
        self.clicks = 0

    def click(self):
        self.clicks += 1


class FakeDriver:
    """
    Stand-in for a WebDriver session.

    urls: successive values of current_url; the last one repeats.
    sign_in_links: successive answers to find_element, an element or None.
    """

    def __init__(self, urls=("https://www.youtube.com/",), sign_in_links=(None,), cookies=()):
        self.urls = list(urls)
        self.sign_in_links = list(sign_in_links)
        self.cookies = [dict(cookie) for cookie in cookies]
        self.visited = []
        self.lookups = []

    @property
    def current_url(self):
        if len(self.urls) > 1:
            return self.urls.pop(0)
        return self.urls[0]

    def get(self, url):
        self.visited.append(url)

    def find_element(self, by, value):
        self.lookups.append((by, value))
        link = self.sign_in_links.pop(0) if len(self.sign_in_links) > 1 else self.sign_in_links[0]
        if link is None:
            raise NoSuchElementException(f"no element {value!r}")
        return link

    def get_cookies(self):
        return [dict(cookie) for cookie in self.cookies]


class RecordingSleep:
    def __init__(self):
        self.calls = []

    def __call__(self, seconds):
        self.calls.append(seconds)


@pytest.fixture
def fake_sleep():
    return RecordingSleep()


@pytest.fixture
def make_driver():
    return FakeDriver


@pytest.fixture
def make_element():
    return FakeElement
