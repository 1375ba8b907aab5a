import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

from app import create_app  # noqa: E402

SECRET = b'top secret, outside the asset root'


@pytest.fixture
def default_app():
    return create_app()


@pytest.fixture
def client(default_app):
    return default_app.test_client()


@pytest.fixture
def site_dir(tmp_path):
    """A small asset root with a secret file sitting next to it."""
    root = tmp_path / 'site'
    (root / 'docs').mkdir(parents=True)
    (root / 'index.html').write_text('<!DOCTYPE html><html><body>home</body></html>', encoding='utf-8')
    (root / '404.html').write_text('<!DOCTYPE html><html><body>missing</body></html>', encoding='utf-8')
    (root / 'styles.css').write_text('body { color: red; }', encoding='utf-8')
    (root / 'script.js').write_text('console.log("hi");', encoding='utf-8')
    (root / 'docs' / 'Guide.txt').write_text('guide', encoding='utf-8')
    (root / 'logo.PNG').write_bytes(b'\x89PNG\r\n\x1a\n')
    (root / 'data.bin').write_bytes(b'\x00\x01\x02')
    (root / '.env').write_text('TOKEN=abc', encoding='utf-8')
    (tmp_path / 'server-config').write_bytes(SECRET)
    (tmp_path / 'secret').write_bytes(SECRET)
    return root


@pytest.fixture
def site_app_for(site_dir):
    return create_app(site_dir)


@pytest.fixture
def site_client(site_app_for):
    return site_app_for.test_client()
