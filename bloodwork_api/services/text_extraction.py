import logging
import os
import tempfile
import time
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeoutError

from pypdf import PdfReader

from bloodwork_api.config import settings
from bloodwork_api.services.errors import ExtractionError, UnsupportedFormatError

logger = logging.getLogger(__name__)

DOCUMENT_EXTENSIONS = {"pdf"}
IMAGE_EXTENSIONS = {"jpg", "jpeg", "png", "gif", "bmp", "tiff", "webp", "heic"}
STAGED_NAME_LENGTH = 100


def _extension(file_name: str) -> str:
    base = os.path.basename(file_name)
    if "." not in base:
        return ""
    return base.rsplit(".", 1)[-1].lower()


def read_pdf_text(path: str) -> str:
    reader = PdfReader(path)
    return "\n".join(page.extract_text() or "" for page in reader.pages)


def _run_with_timeout(func, path: str, timeout: float) -> str:
    # A hung parser thread is abandoned rather than joined.
    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="bloodwork-extract")
    future = executor.submit(func, path)
    try:
        return future.result(timeout=timeout)
    except FuturesTimeoutError as exc:
        raise ExtractionError(f"text extraction timed out after {timeout:g} seconds") from exc
    finally:
        executor.shutdown(wait=False, cancel_futures=True)


def extract_text(file_bytes: bytes, file_name: str, timeout: float | None = None) -> str:
    """Return the text content of an uploaded report.

    The upload is staged to a uniquely named temporary file that is removed
    on every exit path. PDFs are read with pypdf under ``timeout`` seconds,
    images are rejected and anything else is decoded as UTF-8.
    """
    extension = _extension(file_name)
    limit = timeout if timeout is not None else settings.extraction_timeout_seconds
    with tempfile.NamedTemporaryFile(
        prefix=f"bloodwork-{int(time.time() * 1000)}-",
        suffix=f"-{os.path.basename(file_name)[-STAGED_NAME_LENGTH:]}",
        dir=settings.upload_tmp_dir,
    ) as tmp:
        tmp.write(file_bytes)
        tmp.flush()

        if extension in IMAGE_EXTENSIONS:
            raise UnsupportedFormatError()

        if extension in DOCUMENT_EXTENSIONS:
            try:
                text = _run_with_timeout(read_pdf_text, tmp.name, limit)
            except ExtractionError:
                logger.error("Timed out extracting text from %s", file_name)
                raise
            except Exception as exc:
                logger.exception("Error extracting text from %s", file_name)
                raise ExtractionError(str(exc) or exc.__class__.__name__) from exc
        else:
            text = file_bytes.decode("utf-8", errors="replace")

    logger.info("Extracted %d characters from %s", len(text), file_name)
    return text
