"""Font loading capability injected into the shape factory.

The factory only needs ``load(font)``; it awaits the result when it is
awaitable, so a plain synchronous loader works as well as an async one.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Iterable
from typing import Protocol

from app.engine.descriptors import FontName
from app.engine.errors import ResourceUnavailable

logger = logging.getLogger(__name__)

DEFAULT_FONT = FontName(family="Inter", style="Regular")


class FontLoader(Protocol):
    def load(self, font: FontName) -> Awaitable[None] | None: ...


def parse_font_name(value: str) -> FontName:
    """``"Open Sans Bold"`` → FontName("Open Sans", "Bold").

    The last word is always the style, so entries must be written as
    "Family Style"; a bare family name is rejected.
    """
    family, _, style = value.strip().rpartition(" ")
    if not family or not style:
        raise ValueError(f"font {value!r} must be written as 'Family Style'")
    return FontName(family=family, style=style)


class StaticFontLoader:
    """Synchronous loader backed by a fixed set of known fonts."""

    def __init__(self, available: Iterable[FontName]) -> None:
        self._available = frozenset(available)
        self.loaded: list[FontName] = []

    def load(self, font: FontName) -> None:
        if font not in self._available:
            raise ResourceUnavailable(str(font), "font not installed")
        self.loaded.append(font)


class HostFontLoader:
    """Async loader the host uses; caches fonts once loaded."""

    def __init__(self, available: Iterable[str], latency: float = 0.0) -> None:
        self._available = frozenset(parse_font_name(f) for f in available)
        self._loaded: set[FontName] = set()
        self._latency = latency

    async def load(self, font: FontName) -> None:
        if font in self._loaded:
            return
        if font not in self._available:
            raise ResourceUnavailable(str(font), "font not available to host")
        if self._latency:
            await asyncio.sleep(self._latency)
        self._loaded.add(font)
        logger.info("Loaded font %s", font)

    @property
    def loaded(self) -> frozenset[FontName]:
        return frozenset(self._loaded)
