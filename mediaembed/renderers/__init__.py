"""Renderer registry — routes URIs to the right media renderer."""

from __future__ import annotations

import logging
from typing import Optional

from ..errors import UnsupportedMediaError
from .base import MediaRenderer
from .pdf import PdfRenderer
from .video import VideoRenderer
from .youtube import YouTubeRenderer

logger = logging.getLogger(__name__)

# Order matters: first match wins.
RENDERERS: dict[str, MediaRenderer] = {
    YouTubeRenderer.TYPE: YouTubeRenderer(),
    VideoRenderer.TYPE: VideoRenderer(),
    PdfRenderer.TYPE: PdfRenderer(),
}


def get_renderer(media_type: str) -> MediaRenderer:
    """Return the renderer registered for *media_type*."""
    try:
        return RENDERERS[media_type]
    except KeyError:
        raise UnsupportedMediaError(f"No renderer for type '{media_type}'") from None


def find_renderer(uri: str) -> Optional[MediaRenderer]:
    """Return the first renderer that supports *uri*, or None."""
    for renderer in RENDERERS.values():
        if renderer.is_supported(uri):
            logger.debug("%s handles %s", renderer.get_name(), uri)
            return renderer
    return None


def detect_type(uri: str) -> Optional[str]:
    """Detect the media type tag for *uri*. Returns 'youtube', 'video', 'pdf' or None."""
    renderer = find_renderer(uri)
    return renderer.get_type(uri) if renderer else None


__all__ = [
    "RENDERERS",
    "MediaRenderer",
    "PdfRenderer",
    "VideoRenderer",
    "YouTubeRenderer",
    "detect_type",
    "find_renderer",
    "get_renderer",
]
