"""Static asset helpers for the bootcamp site.

The asset root (``web/`` by default) is walked once and every file is read into
memory. Lookups afterwards are plain dictionary hits keyed by the relative,
``/``-separated path, so nothing outside the root can ever be returned.

Content types come from the explicit table below rather than ``mimetypes``,
which varies between platforms (``.js`` in particular).
"""
from pathlib import Path
from types import MappingProxyType
from typing import NamedTuple
from werkzeug.security import safe_join
import os

DEFAULT_WEB_DIR = Path(__file__).parent / 'web'

INDEX_FILE = 'index.html'
NOT_FOUND_FILE = '404.html'

DEFAULT_CONTENT_TYPE = 'application/octet-stream'
HTML_CONTENT_TYPE = 'text/html; charset=utf-8'

CONTENT_TYPES = MappingProxyType({
    '.html': HTML_CONTENT_TYPE,
    '.htm': HTML_CONTENT_TYPE,
    '.css': 'text/css; charset=utf-8',
    '.js': 'application/javascript; charset=utf-8',
    '.json': 'application/json',
    '.txt': 'text/plain; charset=utf-8',
    '.svg': 'image/svg+xml',
    '.png': 'image/png',
    '.jpg': 'image/jpeg',
    '.jpeg': 'image/jpeg',
    '.gif': 'image/gif',
    '.ico': 'image/x-icon',
})

# used when the asset root ships no 404.html
BUILTIN_NOT_FOUND = (
    b'<!DOCTYPE html>\n<html lang="en">\n<head><meta charset="UTF-8"><title>Page Not Found</title></head>\n'
    b'<body><h1>404</h1><p>Page not found.</p><a href="/">Back to home</a></body>\n</html>\n'
)


class Asset(NamedTuple):
    path: str
    content: bytes
    content_type: str


def get_web_dir() -> Path:
    return Path(os.environ.get('SITE_WEB_DIR', DEFAULT_WEB_DIR))


def content_type_for(name: str) -> str:
    return CONTENT_TYPES.get(Path(name).suffix.lower(), DEFAULT_CONTENT_TYPE)


def normalize_key(path: str) -> str | None:
    """Turn a request path into a lookup key, or None if it can't name an asset.

    Dot segments are collapsed by ``safe_join``; anything that would climb
    above the root is rejected. Backslashes and NUL bytes are refused too,
    since ``safe_join`` only checks the platform's own separators.
    """
    if not isinstance(path, str):
        return None
    key = path.lstrip('/')
    if not key or '\\' in key or '\x00' in key:
        return None
    joined = safe_join('/', key)
    if joined is None:
        return None
    return joined.lstrip('/') or None


def _is_hidden(rel: Path) -> bool:
    return any(part.startswith('.') for part in rel.parts)


def load_assets(root: Path | str | None = None) -> dict:
    """Read every servable file under ``root`` into a dict of key -> Asset."""
    root = Path(root if root is not None else get_web_dir()).resolve()
    if not root.is_dir():
        raise FileNotFoundError(f"asset root not found: {root}")
    found = {}
    for f in sorted(root.rglob('*')):
        if not f.is_file():
            continue
        rel = f.relative_to(root)
        if _is_hidden(rel):
            continue
        # symlinks pointing out of the root are skipped
        try:
            f.resolve().relative_to(root)
        except ValueError:
            continue
        key = rel.as_posix()
        found[key] = Asset(key, f.read_bytes(), content_type_for(key))
    return found


class AssetStore:
    """Read-only view over the assets loaded from one root directory."""

    def __init__(self, root: Path | str | None = None):
        self.root = Path(root if root is not None else get_web_dir()).resolve()
        self._assets = MappingProxyType(load_assets(self.root))
        fallback = self._assets.get(NOT_FOUND_FILE)
        if fallback is None:
            fallback = Asset(NOT_FOUND_FILE, BUILTIN_NOT_FOUND, HTML_CONTENT_TYPE)
        # the 404 page is always served as html, whatever its extension
        self.not_found = fallback._replace(content_type=HTML_CONTENT_TYPE)

    def __len__(self):
        return len(self._assets)

    def __iter__(self):
        return iter(self._assets.values())

    def __contains__(self, path):
        return self.get(path) is not None

    @property
    def assets(self):
        return self._assets

    @property
    def index(self) -> Asset | None:
        return self._assets.get(INDEX_FILE)

    def get(self, path: str) -> Asset | None:
        """Exact, case-sensitive lookup. Returns None for anything unresolvable."""
        key = normalize_key(path)
        if key is None:
            return None
        return self._assets.get(key)
