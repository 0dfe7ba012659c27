"""Video renderer — HTML5 ``<video>`` embeds for video files."""

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


class VideoRenderer(FileMediaRenderer):
    TYPE = "video"
    NAME = "VideoMediaRenderer"
    ICON = "film"

    SUPPORTED = MappingProxyType({
        "mp4": MappingProxyType({"mime": "video/mp4"}),
        "ogg": MappingProxyType({"mime": "video/ogg"}),
        "ogv": MappingProxyType({"mime": "video/ogg"}),
        "webm": MappingProxyType({"mime": "video/webm"}),
    })

    STYLES = MappingProxyType({
        "view": MappingProxyType({"max-width": "100%", "max-height": "500px"}),
        "editor": MappingProxyType({"width": "560px", "height": "315px"}),
        "post": MappingProxyType({"width": "560px", "height": "315px"}),
    })

    def render(self, media: MediaDescriptor, options: Optional[RenderOptions] = None) -> str:
        """Render ``<video controls><source .../></video>`` for *media*.

        The ``type`` attribute is only emitted when a MIME can be resolved.
        """
        options = resolve_options(options)
        mime = self.get_mime(media)
        embed_url = self.get_embed_url(media.location)

        video = open_tag(
            "video",
            get_attribute_str(options.attrs),
            get_style_attr_str(options.style),
            "controls",
        )
        source = open_tag(
            "source",
            f'src="{html_encode(embed_url)}"',
            f'type="{html_encode(mime)}"' if mime else "",
        )
        return f"{video}>{source}/></video>"
