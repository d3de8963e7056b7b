"""Document scanning endpoints (camera snapshot and file upload)"""
import asyncio
import logging
import time
import uuid
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Depends, File, UploadFile
from pydantic import BaseModel, ConfigDict, Field

from aura.config import Settings, get_settings
from aura.exceptions import MalformedUploadError
from aura.services.runtime import get_document_scanner
from aura.services.scan.document_scan import DocumentScanStub, decode_image_payload
from aura.utils.datetime_helper import utc_timestamp
from .envelope import failure_envelope, scan_payload

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/scan", tags=["scan"])

IMAGE_FAILURE_VOICE = (
    "I had trouble analyzing that image. Please ensure the document is clearly visible and well-lit."
)
DOCUMENT_FAILURE_VOICE = (
    "I encountered an issue while scanning the document. "
    "Please try again with better lighting or a clearer image."
)


class ImageScanRequest(BaseModel):
    image_data: Optional[str] = Field(default=None, alias="imageData")
    image_type: str = Field(default="base64", alias="imageType")

    model_config = ConfigDict(populate_by_name=True)


async def delete_upload_later(path: Path, delay_seconds: float):
    """Remove an uploaded file after a delay"""
    if delay_seconds > 0:
        await asyncio.sleep(delay_seconds)
    try:
        path.unlink()
        logger.info(f"Upload cleaned up: {path.name}")
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.error(f"File cleanup error for {path}: {e}")


@router.post("/image")
async def scan_image(
    request: ImageScanRequest,
    scanner: DocumentScanStub = Depends(get_document_scanner),
):
    """Scan a base64 camera snapshot"""
    started = time.perf_counter()
    try:
        image_bytes = decode_image_payload(request.image_data)
        logger.info(f"Image received for scanning ({len(image_bytes)} bytes, {request.image_type})")
        result = scanner.scan(image_bytes)
    except MalformedUploadError as e:
        logger.warning(f"Rejected image scan: {e}")
        return failure_envelope(str(e), IMAGE_FAILURE_VOICE)
    except Exception as e:
        logger.error(f"Image processing error: {e}")
        return failure_envelope("Failed to process image", IMAGE_FAILURE_VOICE)

    scan = scan_payload(result)
    scan["processingTime"] = f"{time.perf_counter() - started:.1f} seconds"
    scan["ocrAccuracy"] = f"{result.confidence_percent}%"
    return {
        "success": True,
        "scan": scan,
        "timestamp": utc_timestamp(),
        "inputType": "camera_scan",
    }


@router.post("/document")
async def scan_document(
    background_tasks: BackgroundTasks,
    document: Optional[UploadFile] = File(None),
    scanner: DocumentScanStub = Depends(get_document_scanner),
    settings: Settings = Depends(get_settings),
):
    """
    Scan an uploaded document image.

    The upload is stored under the upload directory and deleted after
    `upload_cleanup_delay` seconds.
    """
    try:
        if document is None:
            raise MalformedUploadError("No document image provided")

        too_large = f"Uploaded document exceeds {settings.max_upload_bytes} byte limit"
        if document.size is not None and document.size > settings.max_upload_bytes:
            raise MalformedUploadError(too_large)

        # Never buffer more than one byte past the limit
        content = await document.read(settings.max_upload_bytes + 1)
        if not content:
            raise MalformedUploadError("Uploaded document is empty")
        if len(content) > settings.max_upload_bytes:
            raise MalformedUploadError(too_large)

        upload_dir = Path(settings.upload_dir)
        upload_dir.mkdir(parents=True, exist_ok=True)
        stored_path = upload_dir / uuid.uuid4().hex
        stored_path.write_bytes(content)
        background_tasks.add_task(delete_upload_later, stored_path, settings.upload_cleanup_delay)
        logger.info(f"Document uploaded for scanning: {document.filename} -> {stored_path.name}")

        result = scanner.scan(content)
    except MalformedUploadError as e:
        logger.warning(f"Rejected document scan: {e}")
        return failure_envelope(str(e), DOCUMENT_FAILURE_VOICE)
    except Exception as e:
        logger.error(f"Document processing error: {e}")
        return failure_envelope("Failed to process document", DOCUMENT_FAILURE_VOICE)

    scan = scan_payload(result)
    scan["visualData"] = {
        "documentType": result.document_type,
        "keyPoints": list(result.key_points),
        "confidence": result.confidence_percent,
    }
    return {
        "success": True,
        "scan": scan,
        "timestamp": utc_timestamp(),
        "inputType": "document_scan",
    }
