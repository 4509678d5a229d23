import json
import logging
from dataclasses import dataclass

from ..config import NEXT_DATA_SCRIPT_ID
from ..errors import ExtractError, ExtractErrorKind
from ..models import StreamLink, SubtitleLink
from .html_query import HtmlQuery

logger = logging.getLogger(__name__)


def _text(value, default):
    """Nilai string dengan default jika field tidak ada (null/absent)."""
    if value is None:
        return default
    return value if isinstance(value, str) else str(value)


def _list(value):
    return value if isinstance(value, list) else []


def _dict(value):
    return value if isinstance(value, dict) else {}


# --- Struktur pageProps yang dipakai (semua field opsional) ---

@dataclass(frozen=True)
class MediaInfo:
    current_definition: str | None = None
    media_url: str | None = None

    @classmethod
    def from_json(cls, data):
        data = _dict(data)
        return cls(data.get("currentDefinition"), data.get("mediaUrl"))


@dataclass(frozen=True)
class SubtitleInfo:
    language: str | None = None
    language_name: str | None = None
    subtitling_url: str | None = None

    @classmethod
    def from_json(cls, data):
        data = _dict(data)
        return cls(data.get("language"), data.get("languageName"), data.get("subtitlingUrl"))


@dataclass(frozen=True)
class EpisodeVo:
    subtitling_list: tuple = ()

    @classmethod
    def from_json(cls, data):
        data = _dict(data)
        return cls(tuple(SubtitleInfo.from_json(s) for s in _list(data.get("subtitlingList"))))


@dataclass(frozen=True)
class PageProps:
    name: str | None = None
    media_info_list: tuple = ()
    episode_vo: tuple = ()

    @classmethod
    def from_json(cls, data):
        data = _dict(data)
        return cls(
            name=_text(data.get("name"), None),
            media_info_list=tuple(MediaInfo.from_json(m) for m in _list(data.get("mediaInfoList"))),
            episode_vo=tuple(EpisodeVo.from_json(e) for e in _list(data.get("episodeVo"))),
        )

    @property
    def title(self):
        return self.name if self.name is not None else "N/A"


def _as_page_props(page_props):
    if isinstance(page_props, PageProps):
        return page_props
    return PageProps.from_json(page_props)


def extract_page_data(html):
    """
    Mengambil dan men-decode blok JSON __NEXT_DATA__ dari HTML, lalu
    mengembalikan bagian props.pageProps sebagai PageProps.

    :raises ExtractError: blok tidak ada, JSON rusak, atau pageProps tidak ada.
    """
    query = html if isinstance(html, HtmlQuery) else HtmlQuery(html)
    script = query.find_by_id("script", NEXT_DATA_SCRIPT_ID)
    if script is None:
        raise ExtractError(ExtractErrorKind.MISSING_DATA_BLOCK)

    try:
        next_data = json.loads(script.get_text())
    except (ValueError, RecursionError) as e:
        logger.debug("JSON __NEXT_DATA__ rusak: %s", e)
        raise ExtractError(ExtractErrorKind.INVALID_JSON) from e

    page_props = _dict(_dict(next_data).get("props")).get("pageProps")
    if not isinstance(page_props, dict):
        raise ExtractError(ExtractErrorKind.MISSING_PAGE_PROPS)

    return PageProps.from_json(page_props)


def extract_streams(page_props):
    """Daftar StreamLink dari mediaInfoList (kosong jika tidak ada)."""
    page_props = _as_page_props(page_props)
    return [
        StreamLink(
            quality=_text(media.current_definition, "N/A"),
            url=_text(media.media_url, "#"),
        )
        for media in page_props.media_info_list
    ]


def extract_subtitles(page_props):
    """Daftar SubtitleLink dari episodeVo[0].subtitlingList (kosong jika tidak ada di level mana pun)."""
    page_props = _as_page_props(page_props)
    if not page_props.episode_vo:
        return []
    return [
        SubtitleLink(
            language=_text(sub.language, "N/A"),
            label=_text(sub.language_name, "Unknown"),
            url=_text(sub.subtitling_url, "#"),
        )
        for sub in page_props.episode_vo[0].subtitling_list
    ]
