import logging

import pymupdf

from pdf_extractor.services.errors import ParseError

logger = logging.getLogger(__name__)


class PyMuPDFDocument:
    def __init__(self, doc: pymupdf.Document) -> None:
        self._doc = doc

    @property
    def page_count(self) -> int:
        return self._doc.page_count

    def get_page_text(self, index: int) -> str:
        """Join every text span on the page with single spaces."""
        page = self._doc.load_page(index)
        content = page.get_text("dict")
        runs = []
        for block in content.get("blocks", []):
            # Image blocks have no "lines"
            for line in block.get("lines", []):
                for span in line.get("spans", []):
                    runs.append(span.get("text", ""))
        return " ".join(runs)

    def close(self) -> None:
        self._doc.close()

    def __enter__(self) -> "PyMuPDFDocument":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class PyMuPDFBackend:
    def open_document(self, data: bytes) -> PyMuPDFDocument:
        if not data:
            raise ParseError("empty document")
        try:
            doc = pymupdf.open(stream=data, filetype="pdf")
        # pymupdf.FileDataError and EmptyFileError derive from RuntimeError
        except RuntimeError as e:
            logger.warning("PyMuPDF could not open document: %s", e)
            raise ParseError(str(e)) from e

        # MuPDF sniffs content and will open HTML or images as other formats
        if not doc.is_pdf:
            doc.close()
            raise ParseError("not a pdf document")

        if doc.needs_pass:
            doc.close()
            raise ParseError("document is encrypted")

        return PyMuPDFDocument(doc)
