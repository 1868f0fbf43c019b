from fastapi import APIRouter, Depends

from pdf_extractor.api.dependencies import get_settings
from pdf_extractor.core.config import Settings

router = APIRouter()


@router.get("/")
def read_root(config: Settings = Depends(get_settings)) -> dict:
    return {"status": "ok", "service": config.APP_NAME}
