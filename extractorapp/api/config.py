import logging
import os
from dataclasses import dataclass

# --- Default konfigurasi ---
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/127.0.0.0 Safari/537.36"
)
DEFAULT_TIMEOUT = 15  # detik, untuk satu halaman
DEFAULT_BULK_TIMEOUT = 20  # detik, per halaman saat fetch paralel
DEFAULT_MAX_WORKERS = 0  # 0 = tanpa batas (satu thread per URL)
EPISODE_MATCH_MODES = ("name", "url")
DEFAULT_EPISODE_MATCH = "name"
DEFAULT_LOG_LEVEL = "INFO"

NEXT_DATA_SCRIPT_ID = "__NEXT_DATA__"
SEASON_WRAP_CLASS = "season-wrap"
EPISODE_WRAP_CLASS = "episode-wrap"


@dataclass(frozen=True)
class ExtractorSettings:
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = DEFAULT_TIMEOUT
    bulk_timeout: float = DEFAULT_BULK_TIMEOUT
    max_workers: int | None = None
    episode_match: str = DEFAULT_EPISODE_MATCH
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def headers(self):
        return {"User-Agent": self.user_agent}


def load_settings(environ=None):
    """
    Membaca konfigurasi dari environment variable.
    Nilai yang tidak valid diganti dengan nilai default.
    """
    get = (os.environ if environ is None else environ).get

    try:
        timeout = float(get("EXTRACTOR_TIMEOUT", DEFAULT_TIMEOUT))
    except ValueError:
        timeout = DEFAULT_TIMEOUT
    try:
        bulk_timeout = float(get("EXTRACTOR_BULK_TIMEOUT", DEFAULT_BULK_TIMEOUT))
    except ValueError:
        bulk_timeout = DEFAULT_BULK_TIMEOUT
    try:
        max_workers = int(get("EXTRACTOR_MAX_WORKERS", DEFAULT_MAX_WORKERS))
    except ValueError:
        max_workers = DEFAULT_MAX_WORKERS

    episode_match = get("EXTRACTOR_EPISODE_MATCH", DEFAULT_EPISODE_MATCH).strip().lower()
    if episode_match not in EPISODE_MATCH_MODES:
        episode_match = DEFAULT_EPISODE_MATCH

    log_level = get("EXTRACTOR_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        log_level = DEFAULT_LOG_LEVEL

    return ExtractorSettings(
        user_agent=get("EXTRACTOR_USER_AGENT", "").strip() or DEFAULT_USER_AGENT,
        timeout=timeout if timeout > 0 else DEFAULT_TIMEOUT,
        bulk_timeout=bulk_timeout if bulk_timeout > 0 else DEFAULT_BULK_TIMEOUT,
        max_workers=max_workers if max_workers > 0 else None,
        episode_match=episode_match,
        log_level=log_level,
    )


def configure_logging(settings=None):
    settings = settings or load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    # urllib3 terlalu "berisik" saat fetch paralel
    logging.getLogger("urllib3").setLevel(logging.WARNING)
