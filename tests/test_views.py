import json

import pytest
from asgiref.sync import async_to_sync
from django.test import RequestFactory
from django.urls import resolve

from conftest import MAIN_URL

from extractorapp import views

MOVIE_URL = "https://site.test/detail/interstellar"


@pytest.fixture
def rf():
    return RequestFactory()


def call(view, request):
    return async_to_sync(view)(request)


def test_urls_are_routed():
    assert resolve("/player/").func is views.player
    assert resolve("/extract/").func is views.extract_view


def test_extract_view_returns_envelope(rf, series_site):
    res = call(views.extract_view, rf.get("/extract/", {"i": MAIN_URL}))
    assert res.status_code == 200
    payload = json.loads(res.content)
    assert payload["status"] == "success"
    assert payload["data"]["type"] == "series"


def test_extract_view_missing_url_is_200_error(rf, fake_site):
    res = call(views.extract_view, rf.get("/extract/"))
    assert res.status_code == 200
    assert json.loads(res.content)["status"] == "error"


def test_player_json_error(rf, fake_site):
    res = call(views.player, rf.get("/player/", {"json": "1"}))
    assert res.status_code == 200
    assert json.loads(res.content) == {
        "status": "error",
        "message": views.error_message(views.InputError("x")),
        "data": None,
    }


def test_player_html_error_page(rf, fake_site, make_page):
    fake_site.add(MOVIE_URL, make_page({"name": "Gone"}), status=404)
    res = call(views.player, rf.get("/player/", {"i": MOVIE_URL}))
    assert res.status_code == 502
    assert res["Content-Type"].startswith("text/html")
    assert b"HTTP 404" in res.content


def test_player_html_error_for_missing_url(rf, fake_site):
    res = call(views.player, rf.get("/player/"))
    assert res.status_code == 400
    assert b"<h1>" in res.content


def test_player_success_is_json(rf, series_site):
    res = call(views.player, rf.get("/player/", {"i": MAIN_URL}))
    payload = json.loads(res.content)
    assert res.status_code == 200
    assert payload["status"] == "success"
    assert [s["isActive"] for s in payload["data"]["seasons"]] == [True, False]
