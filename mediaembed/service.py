"""mediaembed service — the entry point.

Callers hand over a URL (or a stored descriptor plus its type tag) and get
back a RenderResult: the HTML fragment plus everything a page needs around
it (thumbnail, icon, native link, sizing for the view it is shown in).
"""

from __future__ import annotations

import logging
from typing import Optional

from . import config
from .errors import UnsupportedMediaError
from .renderers import RENDERERS, find_renderer, get_renderer
from .renderers.base import MediaRenderer
from .schemas import AttrValue, MediaDescriptor, RenderOptions, RenderResult

logger = logging.getLogger(__name__)


def _styled_options(
    renderer: MediaRenderer,
    view_type: str,
    options: Optional[RenderOptions],
) -> RenderOptions:
    """View style underneath, caller-supplied style on top."""
    options = options or RenderOptions()
    style = {**renderer.get_style(view_type), **options.style}
    return RenderOptions(attrs=dict(options.attrs), style=style)


def _build_result(
    renderer: MediaRenderer,
    media: MediaDescriptor,
    html: str,
    style: dict[str, AttrValue],
    source_url: str,
) -> RenderResult:
    return RenderResult(
        type=renderer.TYPE,
        renderer=renderer.get_name(),
        media_id=media.location,
        html=html,
        embed_url=renderer.get_embed_url(media.location),
        native_url=renderer.get_native_url(media),
        thumbnail=renderer.get_thumbnail(source_url),
        icon=renderer.get_icon(renderer.TYPE),
        meta=renderer.get_meta(source_url),
        style=style,
    )


def embed(
    uri: str,
    view_type: Optional[str] = None,
    options: Optional[RenderOptions] = None,
) -> RenderResult:
    """Render a URL with whichever renderer recognizes it.

    Args:
        uri: Media URL or file path (YouTube link, .mp4, .pdf, ...)
        view_type: 'view', 'editor' or 'post'; unknown values fall back to 'view'
        options: Extra HTML attributes and CSS, layered over the view style

    Raises:
        UnsupportedMediaError: no renderer recognizes *uri*
        MediaIdError: the renderer could not resolve a media id
    """
    view_type = view_type or config.get("MEDIAEMBED_DEFAULT_VIEW")
    renderer = find_renderer(uri)
    if renderer is None:
        logger.info("No renderer supports %s", uri)
        raise UnsupportedMediaError(f"No renderer supports {uri}")

    media_id = renderer.get_media_id(uri)
    styled = _styled_options(renderer, view_type, options)
    html = renderer.render_by_url(uri, styled)
    logger.info("Rendered %s media %s for %s view", renderer.TYPE, media_id, view_type)

    return _build_result(
        renderer, MediaDescriptor(location=media_id), html, styled.style, source_url=uri,
    )


def embed_media(
    media_type: str,
    media: MediaDescriptor,
    view_type: Optional[str] = None,
    options: Optional[RenderOptions] = None,
) -> RenderResult:
    """Render a stored descriptor whose type tag is already known."""
    view_type = view_type or config.get("MEDIAEMBED_DEFAULT_VIEW")
    renderer = get_renderer(media_type)
    styled = _styled_options(renderer, view_type, options)
    html = renderer.render(media, styled)
    logger.info("Rendered stored %s media %s for %s view", media_type, media.location, view_type)
    # the native URL doubles as the source URL for thumbnail and meta lookups
    return _build_result(
        renderer, media, html, styled.style, source_url=renderer.get_native_url(media),
    )


def list_renderers() -> list[dict[str, object]]:
    """Describe the registered renderers (type, name, icon, extensions)."""
    return [
        {
            "type": media_type,
            "name": renderer.get_name(),
            "icon": renderer.get_icon(media_type),
            "extensions": renderer.get_supported_extensions(),
        }
        for media_type, renderer in RENDERERS.items()
    ]
