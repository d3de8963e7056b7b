"""Service status endpoints"""
from fastapi import APIRouter, Depends

from aura.services.llm.orchestrator import ResponseOrchestrator
from aura.services.runtime import get_response_orchestrator
from aura.utils.datetime_helper import utc_timestamp

router = APIRouter(prefix="/api", tags=["status"])

FEATURES = ["Voice Assistant", "Document Scanning", "40-min Timer", "AI Clone", "Safe Mode"]

ENDPOINTS = [
    "POST /api/voice/process - Voice commands",
    "POST /api/scan/document - Document upload scanning",
    "POST /api/scan/image - Camera image scanning",
    "POST /api/aura/process - Text conversation",
    "GET /api/status - Provider and feature status",
]


@router.get("")
async def service_info(orchestrator: ResponseOrchestrator = Depends(get_response_orchestrator)):
    """Service banner"""
    return {
        "message": "AURA Mind Backend is running!",
        "features": FEATURES,
        "endpoints": ENDPOINTS,
        "activeAPI": orchestrator.current_provider,
        "status": "online",
        "timestamp": utc_timestamp(),
    }


@router.get("/status")
async def get_status(orchestrator: ResponseOrchestrator = Depends(get_response_orchestrator)):
    """Which providers have credentials and which one is tried first"""
    return {
        "currentActiveAPI": orchestrator.current_provider,
        "availableAPIs": orchestrator.available_providers(),
        "systemStatus": "operational",
        "features": {
            "aiConversation": True,
            "timerSystem": True,
            "safeMode": True,
            "aiClone": True,
            "documentScan": True,
            "autoAPISwitch": True,
        },
        "timestamp": utc_timestamp(),
    }
