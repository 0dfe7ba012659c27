"""
mediaembed — media renderers for CMS content.

Usage:
    from mediaembed import embed, embed_media, MediaDescriptor, RenderOptions

    # Render a URL with whichever renderer recognizes it
    result = embed("https://youtu.be/dQw4w9WgXcQ", view_type="post")
    result.html        # '<iframe src="//www.youtube.com/embed/dQw4w9WgXcQ" ...'
    result.thumbnail   # 'http://img.youtube.com/vi/dQw4w9WgXcQ/0.jpg'

    # Render a stored descriptor of a known type
    result = embed_media("video", MediaDescriptor(location="/media/clip.mp4"))
"""

from .errors import MediaEmbedError, MediaIdError, UnsupportedMediaError
from .renderers import RENDERERS, detect_type, find_renderer, get_renderer
from .schemas import MediaDescriptor, RenderOptions, RenderResult
from .service import embed, embed_media, list_renderers

__all__ = [
    "RENDERERS",
    "MediaDescriptor",
    "MediaEmbedError",
    "MediaIdError",
    "RenderOptions",
    "RenderResult",
    "UnsupportedMediaError",
    "detect_type",
    "embed",
    "embed_media",
    "find_renderer",
    "get_renderer",
    "list_renderers",
]
