"""Voice command endpoint"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from aura.services.commands.router import CommandRouter
from aura.services.runtime import get_command_router
from aura.utils.datetime_helper import utc_timestamp
from .envelope import failure_envelope

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/voice", tags=["voice"])


class VoiceCommandRequest(BaseModel):
    command: str
    # Transcription happens in the browser; raw audio is accepted but unused
    audio_data: Optional[str] = Field(default=None, alias="audioData")

    model_config = ConfigDict(populate_by_name=True)


@router.post("/process")
async def process_voice_command(
    request: VoiceCommandRequest,
    command_router: CommandRouter = Depends(get_command_router),
):
    """Process a voice transcript and return a reply phrased for speech"""
    logger.info(f"Voice command received: {request.command}")

    try:
        response = await command_router.route_voice(request.command)
    except Exception as e:
        logger.error(f"Voice processing error: {e}")
        return failure_envelope("Failed to process voice command")

    return {
        "success": True,
        "response": response.payload(),
        "timestamp": utc_timestamp(),
        "inputType": "voice",
    }
