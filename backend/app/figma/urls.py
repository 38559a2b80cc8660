"""Parse pasted design links into a file key, node id and display name."""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import unquote

_KEY_PATTERNS = (
    re.compile(r"figma\.com/(?:file|design)/([a-zA-Z0-9]+)"),
    re.compile(r"figma\.com/[^/]+/([a-zA-Z0-9]+)"),
)
_BARE_KEY_RE = re.compile(r"[a-zA-Z0-9]+")
_VALID_KEY_RE = re.compile(r"[a-zA-Z0-9]{15,}")
_NODE_ID_RE = re.compile(r"node-id=([^&]+)")
_FILE_NAME_RE = re.compile(r"figma\.com/(?:file|design)/[^/]+/([^/?]+)")

# A bare string must be longer than this to be taken as a key
_MIN_BARE_KEY_LEN = 10


@dataclass(frozen=True)
class ParsedUrl:
    original_url: str | None
    file_key: str | None = None
    node_id: str | None = None
    file_name: str | None = None

    @property
    def is_valid(self) -> bool:
        return self.file_key is not None


def extract_file_key(url: str | None) -> str | None:
    if not url or not isinstance(url, str):
        return None
    for pattern in _KEY_PATTERNS:
        m = pattern.search(url)
        if m:
            return m.group(1)
    if _BARE_KEY_RE.fullmatch(url) and len(url) > _MIN_BARE_KEY_LEN:
        return url
    return None


def is_valid_file_key(key: str | None) -> bool:
    if not key or not isinstance(key, str):
        return False
    return _VALID_KEY_RE.fullmatch(key) is not None


def extract_node_id(url: str | None) -> str | None:
    if not url or not isinstance(url, str):
        return None
    m = _NODE_ID_RE.search(url)
    return unquote(m.group(1)) if m else None


def parse_url(url: str | None) -> ParsedUrl:
    if not url or not isinstance(url, str):
        return ParsedUrl(original_url=url)

    file_name = None
    m = _FILE_NAME_RE.search(url)
    if m:
        file_name = unquote(m.group(1).replace("-", " "))

    return ParsedUrl(
        original_url=url,
        file_key=extract_file_key(url),
        node_id=extract_node_id(url),
        file_name=file_name,
    )


def resolve_file_key(value: str) -> str:
    """Key from a link when one can be extracted, otherwise the input as-is."""
    parsed = parse_url(value)
    return parsed.file_key if parsed.file_key else value
