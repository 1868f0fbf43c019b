from collections.abc import Callable
from unittest.mock import MagicMock

import pymupdf
import pytest
from fastapi.testclient import TestClient

from main import create_app
from pdf_extractor.api.dependencies import get_fetcher
from pdf_extractor.core.config import Settings


def build_pdf(page_texts: list[str]) -> bytes:
    """Build an in-memory PDF with one page per entry; empty strings give blank pages."""
    doc = pymupdf.open()
    for text in page_texts:
        page = doc.new_page()
        if text:
            page.insert_text((72, 72), text, fontsize=11)
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def make_pdf() -> Callable[[list[str]], bytes]:
    return build_pdf


@pytest.fixture
def test_settings() -> Settings:
    return Settings(FETCH_TIMEOUT_SECONDS=2.0, MAX_BODY_BYTES=1024 * 1024)


@pytest.fixture
def app(test_settings):
    application = create_app(test_settings)
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def fake_fetcher(app) -> MagicMock:
    """Replace the network layer; set ``return_value`` to the PDF bytes to serve."""
    fetcher = MagicMock(name="fetcher")
    app.dependency_overrides[get_fetcher] = lambda: fetcher
    return fetcher


def mock_http_response(
    status_code: int = 200,
    chunks: list[bytes] | None = None,
) -> MagicMock:
    response = MagicMock(name="response")
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    response.iter_content.return_value = chunks or []
    response.__enter__.return_value = response
    response.__exit__.return_value = False
    return response
