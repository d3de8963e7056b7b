from fastapi import APIRouter
from aura.api import commands, scan, status, voice

api_router = APIRouter()

# Include all sub-routers
api_router.include_router(commands.router)
api_router.include_router(voice.router)
api_router.include_router(scan.router)
api_router.include_router(status.router)
