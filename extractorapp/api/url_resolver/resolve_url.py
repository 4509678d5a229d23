import posixpath
import re
from urllib.parse import urlparse


def _split_suffix(path):
    """Pisahkan path dari query/fragment ('?' atau '#' pertama)."""
    match = re.search(r"[?#]", path)
    if not match:
        return path, ""
    return path[:match.start()], path[match.start():]


def collapse_segments(path):
    """
    Merapikan segmen path: segmen kosong dan '.' dibuang, '..' menghapus
    segmen sebelumnya. '..' saat stack kosong diabaikan saja.
    """
    stack = []
    for segment in path.split("/"):
        if segment in ("", "."):
            continue
        if segment == "..":
            if stack:
                stack.pop()
            continue
        stack.append(segment)

    collapsed = "/" + "/".join(stack)
    # Trailing slash dipertahankan ("season-2/" tetap direktori)
    if stack and (path.endswith("/") or path.endswith("/.") or path.endswith("/..")):
        collapsed += "/"
    return collapsed


def resolve_url(base_url, href):
    """
    Mengubah href (relatif atau absolut) menjadi URL absolut berdasarkan base_url.

    :raises ValueError: href kosong atau base_url tidak punya scheme/host.
    """
    if not href:
        raise ValueError("href tidak boleh kosong")

    if urlparse(href).scheme:
        return href

    base = urlparse(base_url)
    if not base.scheme or not base.netloc:
        raise ValueError(f"base URL tidak valid: {base_url!r}")
    host = f"{base.scheme}://{base.netloc}"

    # Scheme-relative: //cdn.example.com/x
    if href.startswith("//"):
        return f"{base.scheme}:{href}"

    if href.startswith("/"):
        return host + href

    directory = posixpath.dirname(base.path).rstrip("/") + "/"
    path, suffix = _split_suffix(directory + href)
    return host + collapse_segments(path) + suffix
