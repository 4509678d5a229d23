from enum import Enum


class ExtractorError(Exception):
    """Error dasar untuk semua kegagalan ekstraksi."""


class InputError(ExtractorError):
    """Parameter URL tidak ada atau tidak valid. Dicek sebelum request jaringan apa pun."""


class FetchErrorKind(Enum):
    NETWORK = "network"
    HTTP_STATUS = "http_status"


class FetchError(ExtractorError):
    def __init__(self, url, kind, status_code=None, detail=None):
        self.url = url
        self.kind = kind
        self.status_code = status_code
        self.detail = detail
        if kind is FetchErrorKind.HTTP_STATUS:
            message = f"Status HTTP {status_code} dari {url}"
        else:
            message = f"Gagal terhubung ke {url}"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class ExtractErrorKind(Enum):
    MISSING_DATA_BLOCK = "missing_data_block"
    INVALID_JSON = "invalid_json"
    MISSING_PAGE_PROPS = "missing_page_props"


_EXTRACT_MESSAGES = {
    ExtractErrorKind.MISSING_DATA_BLOCK: "Blok data JSON (__NEXT_DATA__) tidak ditemukan di halaman.",
    ExtractErrorKind.INVALID_JSON: "Blok data JSON (__NEXT_DATA__) tidak bisa di-decode.",
    ExtractErrorKind.MISSING_PAGE_PROPS: "Blok data JSON tidak memiliki props.pageProps.",
}


class ExtractError(ExtractorError):
    def __init__(self, kind):
        self.kind = kind
        super().__init__(_EXTRACT_MESSAGES[kind])
