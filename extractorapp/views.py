import asyncio
import logging
from html import escape

from django.http import HttpResponse, JsonResponse

from .api.config import load_settings
from .api.errors import ExtractError, ExtractorError, FetchError, InputError
from .api.extractor import (
    MSG_UNEXPECTED,
    error_message,
    error_response,
    extract,
    extract_navigation,
    run_extraction,
    success_response,
)

logger = logging.getLogger(__name__)

settings = load_settings()

ERROR_PAGE = """<!DOCTYPE html>
<html lang="id">
<head><meta charset="utf-8"><title>Error</title></head>
<body>
<h1>❌ Terjadi kesalahan</h1>
<p>{message}</p>
</body>
</html>"""


def _json(payload):
    # Error logis tetap HTTP 200, client membaca field "status"
    return JsonResponse(payload, json_dumps_params={"ensure_ascii": False})


def _error_status(exc):
    if isinstance(exc, InputError):
        return 400
    if isinstance(exc, FetchError):
        return 502
    if isinstance(exc, ExtractError):
        return 422
    return 500


async def extract_view(request):
    """
    View untuk ekstraksi lengkap (movie atau series dengan semua episode).
    """
    payload = await asyncio.to_thread(run_extraction, extract, request.GET.get("i"), settings)
    return _json(payload)


async def player(request):
    """
    View varian player: navigasi satu level dengan validasi status HTTP ketat.
    Dengan json=1 error dikirim sebagai JSON, tanpa itu ditampilkan sebagai halaman HTML.
    """
    raw_url = request.GET.get("i")
    want_json = request.GET.get("json") == "1"

    try:
        result = await asyncio.to_thread(extract_navigation, raw_url, settings)
    except ExtractorError as e:
        logger.warning("❌ Player gagal untuk %r: %s", raw_url, e)
        message, status = error_message(e), _error_status(e)
    except Exception:
        logger.exception("❌ Error tak terduga di player untuk %r", raw_url)
        message, status = MSG_UNEXPECTED, 500
    else:
        return _json(success_response(result))

    if want_json:
        return _json(error_response(message))
    return HttpResponse(ERROR_PAGE.format(message=escape(message)), status=status)
