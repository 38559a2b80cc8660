"""GET /api/documents/{file} — summary of a remote design file."""

from __future__ import annotations

import logging
from collections.abc import Callable

from fastapi import APIRouter, Depends, HTTPException

from app.dependencies import get_document_client_factory
from app.figma.client import DocumentClient, extract_info
from app.figma.errors import (
    DocumentAuthError,
    DocumentConfigError,
    DocumentError,
    DocumentNetworkError,
    DocumentNotFound,
)
from app.figma.urls import resolve_file_key
from app.models.requests import DocumentQuery
from app.models.responses import DocumentSummary

router = APIRouter(prefix="/documents")
logger = logging.getLogger(__name__)


def _status_for(error: DocumentError) -> int:
    if isinstance(error, DocumentAuthError):
        return 401
    if isinstance(error, DocumentNotFound):
        return 404
    if isinstance(error, DocumentConfigError):
        return 500
    if isinstance(error, DocumentNetworkError):
        return 504
    return 502


@router.get("/{file:path}", response_model=DocumentSummary)
async def get_document(
    file: str,
    query: DocumentQuery = Depends(),
    make_client: Callable[[], DocumentClient] = Depends(get_document_client_factory),
) -> DocumentSummary:
    file_key = resolve_file_key(file)
    try:
        async with make_client() as client:
            data = await client.read_file(file_key, **query.model_dump())
    except DocumentError as e:
        logger.warning("Document %s: %s", file_key, e)
        raise HTTPException(status_code=_status_for(e), detail=str(e)) from e
    return extract_info(data)
