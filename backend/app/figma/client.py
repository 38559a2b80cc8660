"""HTTP client for the remote design-document API."""

from __future__ import annotations

import json
import logging
import re
import time
from pathlib import Path
from typing import Any

import httpx

from app.figma.errors import (
    DocumentApiError,
    DocumentAuthError,
    DocumentConfigError,
    DocumentNetworkError,
    DocumentNotFound,
)
from app.models.responses import DocumentMetadata, DocumentSummary, PageInfo

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.figma.com/v1"
DEFAULT_TIMEOUT = 30.0

_UNSAFE_NAME_RE = re.compile(r"[^a-zA-Z0-9]")


def _error_from_response(response: httpx.Response) -> DocumentApiError:
    try:
        payload = response.json()
    except json.JSONDecodeError:
        payload = {}
    message = payload.get("message") or payload.get("err") or response.reason_phrase

    if response.status_code == 403:
        return DocumentAuthError(403, "Invalid or expired access token")
    if response.status_code == 404:
        return DocumentNotFound(404, "File not found or not accessible")
    return DocumentApiError(response.status_code, message)


def build_params(
    *,
    version: str | None = None,
    ids: str | None = None,
    depth: int | None = None,
    geometry: str | None = None,
    plugin_data: str | None = None,
    branch_data: bool = False,
) -> dict[str, str]:
    """Query parameters for a file read; unset options are omitted."""
    params: dict[str, str] = {}
    if version:
        params["version"] = version
    if ids:
        params["ids"] = ids
    if depth:
        params["depth"] = str(depth)
    if geometry:
        params["geometry"] = geometry
    if plugin_data:
        params["plugin_data"] = plugin_data
    if branch_data:
        params["branch_data"] = "true"
    return params


class DocumentClient:
    """Async client that reads design files by key."""

    def __init__(
        self,
        token: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        output_dir: str | Path = "output",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not token:
            raise DocumentConfigError("FIGMA_TOKEN environment variable is required")
        self.output_dir = Path(output_dir)
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"X-FIGMA-TOKEN": token, "Content-Type": "application/json"},
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "DocumentClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def read_file(self, file_key: str, **options: Any) -> dict[str, Any]:
        params = build_params(**options)
        logger.info("Reading file %s %s", file_key, params or "")
        try:
            response = await self._client.get(f"/files/{file_key}", params=params)
        except httpx.TransportError as e:
            raise DocumentNetworkError(f"No response received from API: {e}") from e

        if not 200 <= response.status_code < 300:
            error = _error_from_response(response)
            logger.warning("Read of %s failed: %s", file_key, error)
            raise error

        data = response.json()
        logger.info(
            "Read file %r (version %s, last modified %s)",
            data.get("name"),
            data.get("version"),
            data.get("lastModified"),
        )
        return data

    def save_to_file(self, file_data: dict[str, Any], output_path: str | Path | None = None) -> Path:
        if output_path is None:
            safe_name = _UNSAFE_NAME_RE.sub("_", str(file_data.get("name", "untitled")))
            output_path = self.output_dir / f"{safe_name}_{int(time.time() * 1000)}.json"
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(file_data, indent=2), encoding="utf-8")
        logger.info("Saved file to %s", path)
        return path


def extract_info(file_data: dict[str, Any]) -> DocumentSummary:
    """Summarize metadata, pages and library counts of a file."""
    document = file_data.get("document") or {}
    pages = [
        PageInfo(
            id=child.get("id", ""),
            name=child.get("name", ""),
            child_count=len(child.get("children") or []),
        )
        for child in document.get("children") or []
        if child.get("type") == "CANVAS"
    ]
    return DocumentSummary(
        metadata=DocumentMetadata(
            name=file_data.get("name"),
            version=file_data.get("version"),
            last_modified=file_data.get("lastModified"),
            editor_type=file_data.get("editorType"),
        ),
        pages=pages,
        components=len(file_data.get("components") or {}),
        component_sets=len(file_data.get("componentSets") or {}),
        styles=len(file_data.get("styles") or {}),
    )
