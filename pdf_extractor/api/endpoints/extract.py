import logging
from http import HTTPStatus

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from pdf_extractor.api.dependencies import (
    get_fetcher,
    get_pdf_backend,
    get_settings,
)
from pdf_extractor.core.config import Settings
from pdf_extractor.schema.common import ErrorResponse
from pdf_extractor.schema.extraction import ExtractionRequest
from pdf_extractor.services.errors import ExtractionServiceError
from pdf_extractor.services.extraction_service import Fetcher, extract
from pdf_extractor.services.pdf.document import PdfBackend

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/extract")
def extract_text(
    payload: ExtractionRequest | None = Body(default=None),
    fetcher: Fetcher = Depends(get_fetcher),
    backend: PdfBackend = Depends(get_pdf_backend),
    config: Settings = Depends(get_settings),
) -> JSONResponse:
    url = payload.url if payload else None
    try:
        result = extract(url, fetcher=fetcher, backend=backend, config=config)
        return JSONResponse(
            status_code=HTTPStatus.OK,
            content=result.model_dump(by_alias=True),
        )

    except ExtractionServiceError as e:
        if e.status_code >= HTTPStatus.INTERNAL_SERVER_ERROR:
            logger.error("PDF extraction failed: %s", e.message)
        return JSONResponse(
            status_code=e.status_code,
            content=ErrorResponse(error=e.message).model_dump(),
        )

    except Exception as e:
        logger.exception("Unexpected server error during PDF extraction")
        return JSONResponse(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error=str(e) or "internal error").model_dump(),
        )
