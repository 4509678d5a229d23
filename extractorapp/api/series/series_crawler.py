"""
Crawl series: season -> daftar episode per season -> detail episode (paralel).

Alurnya tiga tahap:
  1. Ambil daftar season dari halaman utama (sudah di-fetch).
  2. Ambil halaman tiap season secara berurutan untuk mendapat daftar episode
     (hasilnya jadi daftar URL untuk tahap 3).
  3. Ambil semua halaman episode sekaligus secara paralel, lalu isi streams/subtitles
     ke placeholder episode yang sesuai.

Urutan season/episode selalu mengikuti urutan dokumen sumber, bukan urutan
selesainya request paralel. Penggabungan hasil dilakukan di satu thread
setelah semua fetch selesai.
"""
import logging
from dataclasses import dataclass, field

from ..config import EPISODE_WRAP_CLASS, SEASON_WRAP_CLASS, ExtractorSettings
from ..errors import ExtractError, FetchError
from ..fetcher.fetch_page import fetch_multiple_pages, fetch_page_content
from ..models import Episode, Season, Series
from ..page_data.html_query import HtmlQuery
from ..page_data.next_data import extract_page_data, extract_streams, extract_subtitles
from ..url_resolver.resolve_url import resolve_url

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EpisodeJob:
    season_name: str
    episode_name: str


@dataclass
class _Placeholder:
    name: str
    url: str
    streams: list = field(default_factory=list)
    subtitles: list = field(default_factory=list)


def discover_seasons(query, main_url):
    """Tahap 1: daftar NavRef season dari anchor di bawah "season-wrap"."""
    return query.nav_refs_under(SEASON_WRAP_CLASS, main_url, resolve_url)


def discover_episodes(seasons, settings):
    """
    Tahap 2: fetch halaman tiap season (berurutan).

    :return: (jobs, season_map) - jobs = {episode_url: EpisodeJob},
        season_map = {season_name: [_Placeholder, ...]} sesuai urutan dokumen.
    """
    jobs = {}
    season_map = {}

    for season in seasons:
        logger.info("⚙️  Mengambil daftar episode: %s (%s)", season.name, season.url)
        try:
            season_html = fetch_page_content(
                season.url,
                timeout=settings.timeout,
                headers=settings.headers,
            )
        except FetchError as e:
            logger.warning("❌ Season '%s' dilewati: %s", season.name, e)
            continue
        if not season_html:
            logger.warning("❌ Season '%s' dilewati (body kosong): %s", season.name, season.url)
            continue

        episodes = HtmlQuery(season_html).nav_refs_under(EPISODE_WRAP_CLASS, season.url, resolve_url)
        placeholders = []
        for ep in episodes:
            jobs[ep.url] = EpisodeJob(season_name=season.name, episode_name=ep.name)
            placeholders.append(_Placeholder(name=ep.name, url=ep.url))

        # Nama season yang sama menimpa isi sebelumnya, posisinya tetap
        season_map[season.name] = placeholders
        logger.info("  -> %d episode ditemukan di %s", len(placeholders), season.name)

    return jobs, season_map


def _find_placeholder(placeholders, url, job, match_by):
    for placeholder in placeholders:
        if match_by == "url":
            if placeholder.url == url:
                return placeholder
        elif placeholder.name == job.episode_name:
            return placeholder
    return None


def resolve_episodes(jobs, season_map, settings):
    """
    Tahap 3: fetch semua episode secara paralel, lalu gabungkan hasilnya.
    Episode yang gagal tetap ada dengan streams/subtitles kosong.
    """
    bodies = fetch_multiple_pages(
        jobs.keys(),
        timeout=settings.bulk_timeout,
        max_workers=settings.max_workers,
        headers=settings.headers,
    )

    # Iterasi mengikuti urutan jobs, bukan urutan selesai fetch
    for url, job in jobs.items():
        html = bodies.get(url)
        if html is None:
            continue
        try:
            page_props = extract_page_data(html)
        except ExtractError as e:
            logger.warning("❌ Episode '%s' (%s): %s", job.episode_name, url, e)
            continue

        placeholder = _find_placeholder(season_map.get(job.season_name, []), url, job, settings.episode_match)
        if placeholder is None:
            continue
        placeholder.streams = extract_streams(page_props)
        placeholder.subtitles = extract_subtitles(page_props)

    return [
        Season(
            name=season_name,
            episodes=tuple(
                Episode(name=p.name, streams=tuple(p.streams), subtitles=tuple(p.subtitles))
                for p in placeholders
            ),
        )
        for season_name, placeholders in season_map.items()
    ]


def crawl_series(query, main_url, page_props, settings=None):
    """
    Crawl lengkap sebuah series dan kembalikan objek Series.

    :param query: HtmlQuery dari halaman utama
    :param main_url: URL halaman utama (basis untuk resolve link season)
    :param page_props: PageProps halaman utama (untuk judul)
    """
    settings = settings or ExtractorSettings()

    seasons = discover_seasons(query, main_url)
    logger.info("✅ %d season ditemukan.", len(seasons))

    jobs, season_map = discover_episodes(seasons, settings)
    logger.info("⚙️  Memproses %d episode secara paralel...", len(jobs))

    return Series(
        title=page_props.title,
        seasons=tuple(resolve_episodes(jobs, season_map, settings)),
    )
