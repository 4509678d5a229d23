import json
import threading
import time

import django
import pytest
import requests
from django.conf import settings as django_settings

from extractorapp.api.config import ExtractorSettings

if not django_settings.configured:
    django_settings.configure(
        DEBUG=True,
        SECRET_KEY="test-secret-key",
        ALLOWED_HOSTS=["*"],
        ROOT_URLCONF="extractorapp.urls",
        INSTALLED_APPS=["extractorapp"],
    )
    django.setup()


class FakeResponse:
    def __init__(self, content, status_code=200):
        self.content = content.encode("utf-8") if isinstance(content, str) else content
        self.status_code = status_code


class FakeSite:
    """
    Pengganti requests.get: URL -> (body, status) atau exception.
    delays membuat URL tertentu selesai lebih lambat.
    """

    def __init__(self):
        self.pages = {}
        self.errors = {}
        self.delays = {}
        self.calls = []
        self._lock = threading.Lock()

    def add(self, url, body, status=200, delay=0):
        self.pages[url] = (body, status)
        if delay:
            self.delays[url] = delay

    def fail(self, url, exc=None):
        self.errors[url] = exc or requests.ConnectionError(f"connection refused: {url}")

    def get(self, url, headers=None, timeout=None, allow_redirects=True):
        with self._lock:
            self.calls.append({"url": url, "headers": headers, "timeout": timeout})
        if url in self.delays:
            time.sleep(self.delays[url])
        if url in self.errors:
            raise self.errors[url]
        if url not in self.pages:
            raise requests.ConnectionError(f"unknown host: {url}")
        body, status = self.pages[url]
        return FakeResponse(body, status)

    def requested(self):
        return [call["url"] for call in self.calls]


@pytest.fixture
def fake_site(monkeypatch):
    site = FakeSite()
    monkeypatch.setattr(requests, "get", site.get)
    return site


def next_data_page(page_props, body=""):
    next_data = {"props": {"pageProps": page_props}, "page": "/detail/[slug]"}
    return (
        "<html><head><title>x</title></head><body>"
        f"{body}"
        f'<script id="__NEXT_DATA__" type="application/json">{json.dumps(next_data)}</script>'
        "</body></html>"
    )


def nav_block(css_class, links):
    anchors = "".join(
        f'<a href="{href}" class="{extra}">{name}</a>' for name, href, extra in links
    )
    return f'<div class="{css_class} flex">{anchors}</div>'


def episode_props(name, quality="1080P"):
    return {
        "name": name,
        "mediaInfoList": [
            {"currentDefinition": quality, "mediaUrl": f"https://cdn.site.test/{name}/{quality}.mp4"},
            {"currentDefinition": "480P", "mediaUrl": f"https://cdn.site.test/{name}/480P.mp4"},
        ],
        "episodeVo": [
            {
                "subtitlingList": [
                    {"language": "en", "languageName": "English",
                     "subtitlingUrl": f"https://cdn.site.test/{name}/en.srt"},
                ]
            }
        ],
    }


@pytest.fixture
def make_page():
    return next_data_page


@pytest.fixture
def make_nav():
    return nav_block


@pytest.fixture
def make_episode_props():
    return episode_props


@pytest.fixture
def settings():
    return ExtractorSettings()


MAIN_URL = "https://site.test/detail/dark-show?id=77"
SEASON_URLS = {
    "Season 1": "https://site.test/detail/dark-show-s1",
    "Season 2": "https://site.test/detail/dark-show-s2",
}


@pytest.fixture
def series_site(fake_site):
    """
    Series 2 season x 2 episode. Episode S2E1 gagal di-fetch, S1E1 paling lambat.
    """
    root_body = nav_block("season-wrap", [
        ("Season 1", "/detail/dark-show-s1", "active"),
        ("Season 2", "dark-show-s2", ""),
    ])
    fake_site.add(MAIN_URL, next_data_page({"name": "Dark Show"}, root_body))

    fake_site.add(SEASON_URLS["Season 1"], next_data_page({"name": "Dark Show S1"}, nav_block("episode-wrap", [
        ("Episode 1", "ep/s1e1", "active"),
        ("Episode 2", "ep/s1e2", ""),
    ])))
    fake_site.add(SEASON_URLS["Season 2"], next_data_page({"name": "Dark Show S2"}, nav_block("episode-wrap", [
        ("Episode 1", "/detail/ep/s2e1", ""),
        ("Episode 2", "./ep/../ep/s2e2", ""),
    ])))

    fake_site.add("https://site.test/detail/ep/s1e1", next_data_page(episode_props("s1e1")), delay=0.2)
    fake_site.add("https://site.test/detail/ep/s1e2", next_data_page(episode_props("s1e2")))
    fake_site.fail("https://site.test/detail/ep/s2e1", requests.Timeout("read timed out"))
    fake_site.add("https://site.test/detail/ep/s2e2", next_data_page(episode_props("s2e2")))
    return fake_site
