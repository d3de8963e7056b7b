import logging
import os

# Log configuration (before other imports)
# ruff: noqa: E402
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    force=True
)

from fastapi import FastAPI  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402
from fastapi.staticfiles import StaticFiles  # noqa: E402
from aura.api.base import api_router  # noqa: E402
from aura.config import get_settings  # noqa: E402

logger = logging.getLogger(__name__)

app = FastAPI(
    title="AURA Backend API",
    description="Backend API for AURA - voice study assistant with AI provider fallback",
    version="1.0.0"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Specify your frontend URL in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include all API routes
app.include_router(api_router)

_static_dir = get_settings().static_dir
if _static_dir and os.path.isdir(_static_dir):
    # Browser client (index.html, script.js); mounted last so /api/* wins
    app.mount("/", StaticFiles(directory=_static_dir, html=True), name="frontend")
    logger.info(f"Serving frontend from {_static_dir}")
else:
    @app.get("/")
    def read_root():
        return {
            "message": "AURA Backend API",
            "docs": "/docs",
            "version": "1.0.0"
        }
