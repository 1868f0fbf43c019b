from pydantic import BaseModel, ConfigDict, Field


class ExtractionRequest(BaseModel):
    url: str | None = None


class ExtractionResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    pages: list[str] = Field(
        default_factory=list,
        description="Extracted text, one entry per page in document order",
    )
    page_count: int = Field(
        default=0,
        ge=0,
        alias="pageCount",
        description="Total number of pages in the document",
    )
    needs_ocr: list[int] = Field(
        default_factory=list,
        alias="needsOcr",
        description="Zero-based indices of pages with too little text",
    )
