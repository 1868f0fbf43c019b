from fastapi import Depends, Request

from pdf_extractor.core.config import Settings
from pdf_extractor.services.extraction_service import Fetcher, default_fetcher
from pdf_extractor.services.pdf.document import PdfBackend
from pdf_extractor.services.pdf.pymupdf_backend import PyMuPDFBackend


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_fetcher(config: Settings = Depends(get_settings)) -> Fetcher:
    return default_fetcher(config)


def get_pdf_backend() -> PdfBackend:
    return PyMuPDFBackend()
