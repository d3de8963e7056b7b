"""Document scanning placeholder.

DocumentScanStub accepts any image payload and returns a ScanResult drawn at
random from a small fixed catalog. No recognition happens: the input bytes are
only checked for presence. A real OCR engine can replace it by implementing
the same `scan(image_bytes) -> ScanResult` method.
"""
import base64
import binascii
import logging
import random
from typing import List, Optional

from pydantic import BaseModel

from aura.exceptions import MalformedUploadError

logger = logging.getLogger(__name__)

MIN_CONFIDENCE = 70
MAX_CONFIDENCE = 100
VOICE_EXCERPT_CHARS = 200


class DocumentProfile(BaseModel):
    """Canned analysis for one kind of document"""
    document_type: str
    body_text: str
    key_points: List[str]


class ScanResult(BaseModel):
    """Structured result of a document scan"""
    document_type: str
    body_text: str
    key_points: List[str]
    confidence_percent: int

    @property
    def summary(self) -> str:
        return f"I've analyzed this {self.document_type.lower()}. {self.body_text}"

    @property
    def voice_response(self) -> str:
        return (
            f"I can see this is a {self.document_type.lower()}. "
            f"Let me tell you what I found: {self.body_text[:VOICE_EXCERPT_CHARS]}..."
        )


DOCUMENT_CATALOG: List[DocumentProfile] = [
    DocumentProfile(
        document_type="Research Paper",
        body_text=(
            "This appears to be a research paper about machine learning and artificial "
            "intelligence. Key topics include neural networks, deep learning algorithms, "
            "and their applications in computer vision."
        ),
        key_points=[
            "Machine learning fundamentals",
            "Neural network architectures",
            "Deep learning applications",
            "Computer vision techniques",
        ],
    ),
    DocumentProfile(
        document_type="Textbook Chapter",
        body_text=(
            "This is a textbook chapter covering programming concepts. It discusses "
            "variables, functions, loops, and object-oriented programming principles."
        ),
        key_points=[
            "Variables and data types",
            "Control structures and loops",
            "Functions and methods",
            "Object-oriented programming",
        ],
    ),
    DocumentProfile(
        document_type="Assignment/Notes",
        body_text=(
            "These appear to be study notes or assignment content covering various "
            "academic topics with bullet points and explanations."
        ),
        key_points=[
            "Key concepts highlighted",
            "Important definitions",
            "Examples and explanations",
            "Summary points",
        ],
    ),
]


class DocumentScanStub:
    """Returns a random canned ScanResult for any non-empty image."""

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def scan(self, image_bytes: bytes) -> ScanResult:
        if not image_bytes:
            raise MalformedUploadError("No image data provided")

        profile = self._rng.choice(DOCUMENT_CATALOG)
        confidence = self._rng.randint(MIN_CONFIDENCE, MAX_CONFIDENCE)
        logger.info(f"Scanned {len(image_bytes)} bytes as {profile.document_type} ({confidence}%)")
        return ScanResult(
            document_type=profile.document_type,
            body_text=profile.body_text,
            key_points=list(profile.key_points),
            confidence_percent=confidence,
        )


def decode_image_payload(image_data: Optional[str]) -> bytes:
    """
    Decode a base64 image sent by the camera client.

    Args:
        image_data: Base64 string, optionally a "data:image/...;base64," URL

    Returns:
        Raw image bytes

    Raises:
        MalformedUploadError: payload is missing, empty or not valid base64
    """
    if not image_data:
        raise MalformedUploadError("No image data provided")

    encoded = image_data
    if encoded.startswith("data:"):
        _, _, encoded = encoded.partition(",")

    try:
        decoded = base64.b64decode(encoded.strip(), validate=True)
    except (binascii.Error, ValueError) as e:
        raise MalformedUploadError(f"Image data is not valid base64: {e}") from e

    if not decoded:
        raise MalformedUploadError("Image data is empty")
    return decoded
