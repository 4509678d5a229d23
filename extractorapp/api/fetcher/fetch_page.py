import logging
from concurrent.futures import ThreadPoolExecutor, as_completed

import requests

from ..config import DEFAULT_BULK_TIMEOUT, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from ..errors import FetchError, FetchErrorKind, InputError

logger = logging.getLogger(__name__)

HEADERS = {"User-Agent": DEFAULT_USER_AGENT}


def fetch_page_content(url, timeout=DEFAULT_TIMEOUT, strict_status=False, headers=None):
    """
    Mengambil isi satu halaman (bytes). Redirect diikuti, tanpa retry.

    :param strict_status: jika True, status non-2xx dianggap gagal (varian player).
        Jika False, body apa pun yang diterima dianggap bisa dipakai (varian crawler).
    :raises FetchError: koneksi gagal/timeout, atau status non-2xx saat strict_status.
    """
    if not url:
        raise InputError("URL tidak boleh kosong.")

    try:
        res = requests.get(
            url,
            headers=headers or HEADERS,
            timeout=timeout,
            allow_redirects=True,
        )
    except requests.RequestException as e:
        raise FetchError(url, FetchErrorKind.NETWORK, detail=str(e)) from e

    if strict_status and not 200 <= res.status_code < 300:
        raise FetchError(url, FetchErrorKind.HTTP_STATUS, status_code=res.status_code)

    return res.content


def fetch_multiple_pages(urls, timeout=DEFAULT_BULK_TIMEOUT, max_workers=None, headers=None):
    """
    Mengambil banyak halaman secara paralel dan menunggu semuanya selesai.

    Hasilnya dict {url: bytes}; URL yang gagal (atau body kosong) tidak ada di dict.
    max_workers=None berarti satu thread per URL (tanpa batas).
    """
    targets = list(dict.fromkeys(u for u in urls if u))
    results = {}
    if not targets:
        return results

    workers = min(max_workers, len(targets)) if max_workers else len(targets)
    logger.info("⚙️  Mengambil %d halaman secara paralel (%d worker)...", len(targets), workers)

    with ThreadPoolExecutor(max_workers=workers) as executor:
        future_to_url = {
            executor.submit(fetch_page_content, url, timeout, False, headers): url
            for url in targets
        }
        for future in as_completed(future_to_url):
            url = future_to_url[future]
            try:
                body = future.result()
            except FetchError as e:
                logger.warning("❌ Dilewati: %s", e)
                continue
            if body:
                results[url] = body
            else:
                logger.warning("❌ Dilewati (body kosong): %s", url)

    logger.info("✅ %d/%d halaman berhasil diambil.", len(results), len(targets))
    return results
