"""
Titik masuk ekstraksi: validasi URL, fetch halaman utama, deteksi movie/series,
lalu susun hasil akhirnya. Dipakai oleh endpoint FastAPI maupun view Django.
"""
import logging
import re
from urllib.parse import urlparse

from .classifier.content_type import classify
from .config import EPISODE_WRAP_CLASS, SEASON_WRAP_CLASS, load_settings
from .errors import ExtractError, ExtractorError, FetchError, FetchErrorKind, InputError
from .fetcher.fetch_page import fetch_page_content
from .models import ContentType, Movie, NavigationResult
from .page_data.html_query import HtmlQuery
from .page_data.next_data import extract_page_data, extract_streams, extract_subtitles
from .series.series_crawler import crawl_series
from .url_resolver.resolve_url import resolve_url

logger = logging.getLogger(__name__)

# Karakter yang diizinkan di URL (sama dengan FILTER_SANITIZE_URL)
_URL_UNSAFE = re.compile(r"[^A-Za-z0-9$\-_.+!*'(),{}|\\^~\[\]`<>#%\";/?:@&=]")

MSG_SUCCESS = "Data berhasil diekstrak."
MSG_INPUT = "Akses ditolak, parameter URL yang valid diperlukan."
MSG_FETCH = "Tidak bisa mengambil konten dari URL utama."
MSG_UNEXPECTED = "Terjadi kesalahan saat memproses halaman."


def sanitize_url(raw_url):
    """
    Membersihkan URL input dan memastikan URL http(s) dengan host.

    :raises InputError: URL kosong atau tidak valid.
    """
    if not raw_url or not raw_url.strip():
        raise InputError(MSG_INPUT)
    url = _URL_UNSAFE.sub("", raw_url.strip())
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InputError(MSG_INPUT)
    return url


def _fetch_root(url, settings, strict_status):
    html = fetch_page_content(
        url,
        timeout=settings.timeout,
        strict_status=strict_status,
        headers=settings.headers,
    )
    if not html:
        raise FetchError(url, FetchErrorKind.NETWORK, detail="body kosong")
    return HtmlQuery(html)


def extract(raw_url, settings=None):
    """
    Ekstraksi lengkap satu URL: Movie untuk film, Series (sudah di-crawl) untuk serial.
    """
    settings = settings or load_settings()
    url = sanitize_url(raw_url)

    logger.info("⚙️  Langkah 1: Mengambil halaman utama: %s", url)
    query = _fetch_root(url, settings, strict_status=False)
    page_props = extract_page_data(query)

    if classify(query) is ContentType.SERIES:
        logger.info("✅ Terdeteksi sebagai series, mulai crawl...")
        return crawl_series(query, url, page_props, settings)

    logger.info("✅ Terdeteksi sebagai movie.")
    return Movie(
        title=page_props.title,
        streams=tuple(extract_streams(page_props)),
        subtitles=tuple(extract_subtitles(page_props)),
    )


def extract_navigation(raw_url, settings=None):
    """
    Proyeksi satu level (tanpa crawl): isi halaman ini beserta daftar
    season dan episode apa adanya, untuk UI paging.
    """
    settings = settings or load_settings()
    url = sanitize_url(raw_url)

    query = _fetch_root(url, settings, strict_status=True)
    page_props = extract_page_data(query)

    return NavigationResult(
        type=classify(query),
        title=page_props.title,
        streams=tuple(extract_streams(page_props)),
        subtitles=tuple(extract_subtitles(page_props)),
        seasons=tuple(query.nav_refs_under(SEASON_WRAP_CLASS, url, resolve_url)),
        episodes=tuple(query.nav_refs_under(EPISODE_WRAP_CLASS, url, resolve_url)),
    )


def success_response(result):
    return {"status": "success", "message": MSG_SUCCESS, "data": result.to_dict()}


def error_response(message):
    return {"status": "error", "message": message, "data": None}


def error_message(exc):
    """Pesan yang aman untuk ditampilkan ke client."""
    if isinstance(exc, InputError):
        return MSG_INPUT
    if isinstance(exc, FetchError):
        if exc.kind is FetchErrorKind.HTTP_STATUS:
            return f"{MSG_FETCH} (HTTP {exc.status_code})"
        return MSG_FETCH
    if isinstance(exc, ExtractError):
        return str(exc)
    return MSG_UNEXPECTED


def run_extraction(extract_func, raw_url, settings=None):
    """
    Menjalankan extract_func dan membungkus hasilnya ke format respons standar
    {status, message, data}. Error fatal tidak pernah membawa data parsial.
    """
    try:
        result = extract_func(raw_url, settings)
    except ExtractorError as e:
        logger.warning("❌ Ekstraksi gagal untuk %r: %s", raw_url, e)
        return error_response(error_message(e))
    except Exception:
        logger.exception("❌ Error tak terduga saat memproses %r", raw_url)
        return error_response(MSG_UNEXPECTED)
    return success_response(result)
