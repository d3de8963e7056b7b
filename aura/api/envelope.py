"""Shared JSON envelopes for API responses.

Domain failures are reported as HTTP 200 with `success: false`; the
browser client only looks at the body.
"""
from typing import Any, Dict, Optional

from aura.services.commands.voice import generate_voice_response
from aura.services.scan.document_scan import ScanResult
from aura.utils.datetime_helper import utc_timestamp

APOLOGY_VOICE_MESSAGE = "I apologize, but I encountered an issue processing your request. Please try again."


def failure_envelope(error: str, voice_message: Optional[str] = None) -> Dict[str, Any]:
    return {
        "success": False,
        "error": error,
        "voiceMessage": voice_message or APOLOGY_VOICE_MESSAGE,
        "timestamp": utc_timestamp(),
    }


def scan_payload(result: ScanResult) -> Dict[str, Any]:
    """ScanResult plus the summary and voice fields the client displays/speaks"""
    return {
        "success": True,
        "documentType": result.document_type,
        "bodyText": result.body_text,
        "content": result.body_text,
        "keyPoints": list(result.key_points),
        "confidencePercent": result.confidence_percent,
        "confidence": result.confidence_percent,
        "summary": result.summary,
        "voiceResponse": result.voice_response,
        "voiceMessage": generate_voice_response(result.voice_response, "scan"),
    }
