"""Landing Page — static HTML front page and /public assets.

Invariants:
    - GET / always serves static/index.html
    - /public/* serves files from the same static directory
"""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

STATIC_DIR = Path(__file__).resolve().parent.parent.parent / "static"

router = APIRouter(tags=["landing"])


@router.get("/", include_in_schema=False)
async def landing_page():
    return FileResponse(STATIC_DIR / "index.html")
