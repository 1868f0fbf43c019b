import logging
import time

import requests

from pdf_extractor.core.config import settings
from pdf_extractor.services.errors import FetchError, InternalError

logger = logging.getLogger(__name__)


def download_pdf(
    url: str,
    timeout: float = settings.FETCH_TIMEOUT_SECONDS,
    max_bytes: int | None = settings.MAX_PDF_BYTES,
    chunk_size: int = settings.FETCH_CHUNK_SIZE,
) -> bytes:
    """Download ``url`` into memory within ``timeout`` seconds.

    The requests timeout only bounds the connect and each socket read, so the
    body is read in chunks against an overall deadline as well.
    """
    deadline = time.monotonic() + timeout
    try:
        with requests.get(
            url,
            stream=True,
            timeout=(timeout, timeout),
        ) as response:
            if not response.ok:
                logger.warning(
                    "Remote server returned %s for %s",
                    response.status_code,
                    url,
                )
                raise FetchError()

            buffer = bytearray()
            for chunk in response.iter_content(chunk_size=chunk_size):
                buffer.extend(chunk)
                if max_bytes is not None and len(buffer) > max_bytes:
                    logger.warning(
                        "PDF at %s exceeds %d bytes, aborting download",
                        url,
                        max_bytes,
                    )
                    raise InternalError(
                        f"pdf exceeds the {max_bytes} byte download limit",
                    )
                if time.monotonic() > deadline:
                    logger.warning(
                        "Download of %s exceeded %.1fs deadline",
                        url,
                        timeout,
                    )
                    raise FetchError()
    except requests.exceptions.RequestException as e:
        logger.warning("Failed to download %s: %s", url, e)
        raise FetchError() from e

    logger.info("Downloaded %d bytes from %s", len(buffer), url)
    return bytes(buffer)
