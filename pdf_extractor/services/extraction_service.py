import logging
from collections.abc import Callable

from pdf_extractor.core.config import Settings, settings
from pdf_extractor.schema.extraction import ExtractionResult
from pdf_extractor.services.errors import (
    ExtractionServiceError,
    InternalError,
    ValidationError,
)
from pdf_extractor.services.fetch_service import download_pdf
from pdf_extractor.services.pdf.document import PdfBackend
from pdf_extractor.services.pdf.pymupdf_backend import PyMuPDFBackend

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], bytes]


def needs_ocr(text: str, min_length: int) -> bool:
    return len(text.strip()) < min_length


def default_fetcher(config: Settings) -> Fetcher:
    def fetch(url: str) -> bytes:
        return download_pdf(
            url,
            timeout=config.FETCH_TIMEOUT_SECONDS,
            max_bytes=config.MAX_PDF_BYTES,
            chunk_size=config.FETCH_CHUNK_SIZE,
        )

    return fetch


def extract_pages(
    data: bytes,
    backend: PdfBackend,
    ocr_min_length: int,
) -> ExtractionResult:
    pages: list[str] = []
    flagged: list[int] = []

    with backend.open_document(data) as document:
        # Sequential on purpose: page order is the output order
        for index in range(document.page_count):
            text = document.get_page_text(index).strip()
            pages.append(text)
            if needs_ocr(text, ocr_min_length):
                flagged.append(index)

    return ExtractionResult(
        pages=pages,
        page_count=len(pages),
        needs_ocr=flagged,
    )


def extract(
    url: str | None,
    *,
    fetcher: Fetcher | None = None,
    backend: PdfBackend | None = None,
    config: Settings = settings,
) -> ExtractionResult:
    """Download the PDF at ``url`` and return its per-page text.

    Raises an ``ExtractionServiceError`` subclass on failure; nothing is
    retried and no partial result is returned.
    """
    if not url or not isinstance(url, str):
        raise ValidationError()

    fetcher = fetcher or default_fetcher(config)
    backend = backend or PyMuPDFBackend()

    logger.info("Extracting text from PDF: %s", url)
    try:
        data = fetcher(url)
        result = extract_pages(data, backend, config.OCR_MIN_TEXT_LENGTH)
    except ExtractionServiceError:
        raise
    except MemoryError as e:
        logger.exception("Ran out of memory while extracting %s", url)
        raise InternalError("out of memory while extracting pdf") from e
    except Exception as e:
        logger.exception("Unexpected error while extracting %s", url)
        raise InternalError(str(e) or type(e).__name__) from e

    logger.info(
        "Extracted %d pages from %s (%d flagged for OCR)",
        result.page_count,
        url,
        len(result.needs_ocr),
    )
    return result
