from typing import Protocol


class PdfDocument(Protocol):
    @property
    def page_count(self) -> int: ...

    def get_page_text(self, index: int) -> str: ...

    def close(self) -> None: ...

    def __enter__(self) -> "PdfDocument": ...

    def __exit__(self, *exc_info: object) -> None: ...


class PdfBackend(Protocol):
    def open_document(self, data: bytes) -> PdfDocument: ...
