# tests\conftest.py
import pytest
import structlog

from pathfixer.core.domain.models import RewriteConfig
from pathfixer.core.domain.rules import build_rules
from pathfixer.shared.config import DEFAULT_INTERNAL_PATHS, Settings

SAMPLE_PAGE = """<!DOCTYPE html>
<html>
<head>
  <link href="sb/app.css" rel="stylesheet">
  <link href="uSkinned/theme.css" rel="stylesheet">
  <link href="/assets/favicon.ico" rel="icon">
  <script src="../api.pushio.com/webpush/sdk/wpIndex_min.js"></script>
</head>
<body>
  <a href="/" class="logo"><img src="assets/logo.png"></a>
  <a href="/ve-chung-toi/">Ve chung toi</a>
  <a href="/lien-he/">Lien he</a>
  <form action="/search/" method="get"></form>
  <a href="/">Home</a>
  <script>window.location.href = "/tim-diem-thanh-toan-giai-ngan/";</script>
</body>
</html>
"""


@pytest.fixture(autouse=True)
def reset_structlog():
    """Drops the CLI's logging configuration so later tests log to the current streams."""
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def rewrite_config():
    """The production deployment layout."""
    return RewriteConfig(
        base_path="/fecredit",
        www_path="/fecredit/www.fecredit.com.vn",
        internal_paths=tuple(DEFAULT_INTERNAL_PATHS),
    )


@pytest.fixture
def rules(rewrite_config):
    return build_rules(rewrite_config)


@pytest.fixture
def sample_page():
    return SAMPLE_PAGE


@pytest.fixture
def page_file(tmp_path, sample_page):
    """Writes the sample page to disk (LF line endings) and returns its path."""
    path = tmp_path / "index.html"
    path.write_bytes(sample_page.encode("utf-8"))
    return path


@pytest.fixture
def test_settings(tmp_path):
    """Settings pinned to defaults, independent of the caller's environment."""
    return Settings(
        DEFAULT_FILE=str(tmp_path / "www.fecredit.com.vn" / "index.html"),
        LOG_LEVEL="CRITICAL",
        _env_file=None,
    )
