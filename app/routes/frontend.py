# app/routes/frontend.py

from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse

from app.core.context import AppContext, get_context

router = APIRouter()


def resolve_asset(static_dir: str, full_path: str):
    """Map a request path to a file in the bundle, falling back to index.html.

    Returns None when neither exists.
    """
    root = Path(static_dir).resolve()
    if full_path:
        # Anything outside the bundle, or a name the OS rejects, is unmatched
        try:
            candidate = (root / full_path).resolve()
            if candidate.is_relative_to(root) and candidate.is_file():
                return candidate
        except (OSError, ValueError):
            pass

    index = root / "index.html"
    if index.is_file():
        return index
    return None


@router.get("/{full_path:path}", include_in_schema=False)
async def serve_frontend(full_path: str, context: AppContext = Depends(get_context)):
    # Unknown API paths must not fall through to the single-page app
    if full_path.startswith("api"):
        raise HTTPException(status_code=404, detail="Not Found")

    asset = resolve_asset(context.settings.STATIC_DIR, full_path)
    if asset is None:
        raise HTTPException(status_code=404, detail="Frontend bundle not found")
    return FileResponse(asset)
