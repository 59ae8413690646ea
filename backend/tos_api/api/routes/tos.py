"""ToS Routes — download a Terms-of-Service file and read the current version.

Invariants:
    - GET /tos/download returns text/plain; charset=utf-8 with the exact file content
    - Missing and out-of-sandbox files both return 404 NOT_FOUND
    - GET /tos/version always returns the same record

Design Decisions:
    - Store injected via Depends(get_document_store): tests override it with a
      store rooted in tmp_path
    - Blocking file read dispatched to the threadpool so the event loop stays free
"""

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse
from starlette.concurrency import run_in_threadpool

from tos_api.config import get_settings
from tos_api.core.tos_version import CURRENT_TOS_VERSION
from tos_api.schemas.tos import ErrorBody, TosVersionResponse
from tos_api.services.tos_documents import TosDocumentStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/tos", tags=["Terms of Service"])


def get_document_store() -> TosDocumentStore:
    """Dependency — document store rooted at the configured data directory."""
    return TosDocumentStore(get_settings().tos_data_dir)


@router.get(
    "/download",
    summary="Download Terms of Service file",
    response_class=PlainTextResponse,
    responses={
        200: {"description": "File content as plain text"},
        404: {"model": ErrorBody, "description": "File not found"},
    },
)
async def download_tos(
    file: str = Query(..., description="File path relative to data directory"),
    store: TosDocumentStore = Depends(get_document_store),
):
    content = await run_in_threadpool(store.read_document, file)
    return PlainTextResponse(content, media_type="text/plain; charset=utf-8")


@router.get(
    "/version",
    summary="Get current ToS version information",
    response_model=TosVersionResponse,
)
async def get_tos_version():
    return TosVersionResponse.from_version_info(CURRENT_TOS_VERSION)
