"""Text command endpoint"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from aura.services.commands.router import CommandRouter
from aura.services.runtime import get_command_router
from aura.utils.datetime_helper import utc_timestamp
from .envelope import failure_envelope

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/aura", tags=["aura"])


class ProcessCommandRequest(BaseModel):
    command: str
    mode: str = "normal"
    user_id: Optional[str] = Field(default=None, alias="userId")

    model_config = ConfigDict(populate_by_name=True)


@router.post("/process")
async def process_command(
    request: ProcessCommandRequest,
    command_router: CommandRouter = Depends(get_command_router),
):
    """
    Process a typed (or client-transcribed) command.

    Built-in commands (timer, safe mode, clone, scan, modes) are answered
    internally; anything else goes to the AI providers.
    """
    logger.info(f"Processing command: \"{request.command}\" in {request.mode} mode")

    try:
        routed = await command_router.route(request.command, request.user_id)
    except Exception as e:
        logger.error(f"Command processing error: {e}")
        return failure_envelope("Failed to process command")

    return {
        "success": True,
        "response": routed.response.payload(),
        "api_used": routed.api_used,
        "timestamp": utc_timestamp(),
        "commandType": routed.command_type,
    }
