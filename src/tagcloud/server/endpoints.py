"""HTTP endpoints for the preview server."""

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import HTMLResponse

from ..core.errors import InvalidWordCountError, TagCloudIOError
from ..core.scale import font_size
from ..pipeline import CloudResult, build_cloud, load_counts
from . import state
from .models import CloudResponse, ServerState, WordEntry

# Words shown when no count is requested
DEFAULT_WORD_COUNT = 25

router = APIRouter()


def _get_counts() -> dict[str, int]:
    """Count words of the configured source, caching the result."""
    if not state.source:
        raise HTTPException(404, "No input configured")
    if state.counts is None:
        try:
            state.counts = load_counts(state.source, state.config)
        except TagCloudIOError as e:
            raise HTTPException(404, str(e)) from e
    return state.counts


def _build(n: int | None) -> CloudResult:
    """Build the cloud for the configured source."""
    counts = _get_counts()
    if n is None:
        n = min(DEFAULT_WORD_COUNT, len(counts))
    try:
        return build_cloud(state.source or "", n, state.config, counts=counts)
    except InvalidWordCountError as e:
        raise HTTPException(400, str(e)) from e


@router.get("/", response_class=HTMLResponse)
def index(n: int | None = Query(None)) -> HTMLResponse:
    """Render the tag cloud page."""
    return HTMLResponse(_build(n).html)


@router.get("/api/cloud")
def get_cloud(n: int | None = Query(None)) -> CloudResponse:
    """Return the selected words with counts and font sizes."""
    result = _build(n)
    selection = result.selection
    low, high = state.config.font_range
    words = [
        WordEntry(
            word=word,
            count=count,
            font_size=font_size(count, selection.min_count, selection.max_count, low, high),
        )
        for word, count in selection
    ]
    return CloudResponse(
        source=result.source,
        n=len(selection),
        total_unique=len(result.counts),
        min_count=selection.min_count,
        max_count=selection.max_count,
        words=words,
    )


@router.get("/api/state")
def get_state() -> ServerState:
    """Get current server state."""
    return ServerState(source=state.source, stylesheet=state.config.stylesheet)
