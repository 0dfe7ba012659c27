"""PDF renderer — ``<object>`` embeds for PDF documents."""

from __future__ import annotations

from types import MappingProxyType
from typing import Optional

from ..schemas import MediaDescriptor, RenderOptions
from .base import (
    FileMediaRenderer,
    get_attribute_str,
    get_style_attr_str,
    html_encode,
    open_tag,
    resolve_options,
)

FALLBACK_HTML = "<p>No plugin detected</p>"


class PdfRenderer(FileMediaRenderer):
    TYPE = "pdf"
    NAME = "PdfMediaRenderer"
    ICON = "file-pdf-o"

    SUPPORTED = MappingProxyType({
        "pdf": MappingProxyType({"mime": "application/pdf"}),
    })

    STYLES = MappingProxyType({
        "view": MappingProxyType({"max-width": "100%", "max-height": "500px"}),
        "editor": MappingProxyType({"width": "350px", "height": "350px"}),
        "post": MappingProxyType({"width": "350px", "height": "350px"}),
    })

    def render(self, media: MediaDescriptor, options: Optional[RenderOptions] = None) -> str:
        options = resolve_options(options)
        mime = self.get_mime(media)
        embed_url = self.get_embed_url(media.location)

        tag = open_tag(
            "object",
            get_attribute_str(options.attrs),
            get_style_attr_str(options.style),
            f'data="{html_encode(embed_url)}"',
            f'type="{html_encode(mime)}"' if mime else "",
        )
        return f"{tag}>{FALLBACK_HTML}</object>"
