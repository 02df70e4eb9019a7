import logging
import shutil
from pathlib import Path

import pytest

from app.core.config import settings
from app.core.logging_setup import configure_error_log, get_error_logger

PROJECT_ROOT = Path(__file__).resolve().parents[1]

@pytest.fixture(autouse=True)
def error_log(tmp_path):
    """Point the error sink at a temporary file for each test"""
    log_path = tmp_path / "errors.log"
    configure_error_log(str(log_path))

    yield log_path

    for handler in list(get_error_logger().handlers):
        if isinstance(handler, logging.FileHandler):
            get_error_logger().removeHandler(handler)
            handler.close()

def read_error_log(path: Path) -> list:
    """Error sink lines without the timestamp prefix"""
    if not path.exists():
        return []
    lines = path.read_text(encoding="utf-8").splitlines()
    return [line.split(" ", 2)[-1] for line in lines if line.strip()]

@pytest.fixture
def error_lines(error_log):
    """Callable returning what has been written to the error sink so far"""
    return lambda: read_error_log(error_log)

@pytest.fixture
def site(tmp_path, monkeypatch):
    """Static root with the real page template, a stylesheet and a subdirectory"""
    root = tmp_path / "public"
    root.mkdir()
    shutil.copy(PROJECT_ROOT / "public" / "template.html", root / "template.html")
    (root / "index.css").write_text("body { color: red; }\n", encoding="utf-8")
    (root / "css").mkdir()
    (root / "css" / "site.css").write_text("h1 { margin: 0; }\n", encoding="utf-8")
    (root / "logo.unknownext").write_bytes(b"\x00\x01\x02")
    (tmp_path / "secret.txt").write_text("top secret", encoding="utf-8")

    monkeypatch.setattr(settings, "STATIC_ROOT", str(root))
    monkeypatch.setattr(settings, "TEMPLATE_PATH", str(root / "template.html"))
    monkeypatch.setattr(settings, "NEWS_URL", "http://news.test/feed")
    monkeypatch.setattr(settings, "PHRASE_URL", "http://phrases.test/feed")
    monkeypatch.setattr(settings, "NEWS_TIMEOUT_MS", 1000)
    monkeypatch.setattr(settings, "PHRASE_TIMEOUT_MS", 1000)
    monkeypatch.setattr(settings, "DISPLAY_TIMEZONE", "Europe/Moscow")
    monkeypatch.setattr(settings, "BOLD_WORDS", ["привет", "privet"])

    return root
