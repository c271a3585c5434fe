"""
Saved content endpoint.

Routes: GET /content/{filename}

Dependencies: fastapi, tunesmith.boundary.storage
System role: Serves saved audio and cover files
"""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse

from tunesmith.api.deps import get_content_store
from tunesmith.boundary.storage.content_store import ContentStore
from tunesmith.core.filenames import is_safe_audio_filename

router = APIRouter(prefix="/content", tags=["content"])


@router.get("/{filename}")
async def get_content(
    filename: str,
    content_store: ContentStore = Depends(get_content_store),
) -> FileResponse:
    """
    Serve a saved ``.mp3`` or ``.png`` file.

    Unsafe and unknown filenames both answer 404.
    """
    if not content_store.exists(filename):
        raise HTTPException(status_code=404, detail="File not found")
    media_type = "audio/mpeg" if is_safe_audio_filename(filename) else "image/png"
    return FileResponse(content_store.path_for(filename), media_type=media_type)
