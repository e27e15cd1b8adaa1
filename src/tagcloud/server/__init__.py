"""FastAPI server for previewing tag clouds in a browser.

The server is organized into:
- models.py: Pydantic models for API responses
- state.py: Global state management
- endpoints.py: HTTP endpoints
"""

from fastapi import FastAPI

from ..config import CloudConfig
from . import state
from .endpoints import router
from .models import CloudResponse, ServerState, WordEntry

app = FastAPI(title="Tag Cloud Preview")
app.include_router(router)


def configure(source: str | None = None, config: CloudConfig | None = None) -> None:
    """Configure the server with an input and settings."""
    state.configure(source_path=source, cloud_config=config)


__all__ = [
    "app",
    "configure",
    "CloudResponse",
    "ServerState",
    "WordEntry",
]
