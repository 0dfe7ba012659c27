"""YouTube renderer — iframe embeds for youtube.com and youtu.be links.

Recognizes:
  https://www.youtube.com/watch?v=ID   (full site, ``v`` query parameter)
  https://youtu.be/ID                  (short link, last path segment)

The media id is the bare video id; embed, thumbnail and native URLs are all
rebuilt from it.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union
from urllib.parse import SplitResult, parse_qs, parse_qsl, quote, urlsplit

from ..errors import MediaIdError
from ..schemas import MediaDescriptor, RenderOptions
from .base import render_iframe_embed, resolve_options

logger = logging.getLogger(__name__)

EMBED_URL = "//www.youtube.com/embed/{media_id}"
THUMBNAIL_URL = "http://img.youtube.com/vi/{media_id}/0.jpg"
NATIVE_URL = "https://www.youtube.com/watch?v={media_id}"

UrlLike = Union[str, SplitResult]


def _split(url: UrlLike) -> SplitResult:
    return urlsplit(url) if isinstance(url, str) else url


def is_full_site(url: UrlLike) -> bool:
    """True if *url* is a youtube.com link carrying a ``v`` parameter."""
    parsed = _split(url)
    if "youtube.com" not in parsed.netloc:
        return False
    return bool(parse_qs(parsed.query).get("v", [""])[0])


def is_short_link(url: UrlLike) -> bool:
    """True if *url* is a youtu.be short link."""
    parsed = _split(url)
    return "youtu.be" in parsed.netloc and "/" in parsed.path


class YouTubeRenderer:
    TYPE = "youtube"

    STYLES: Mapping[str, Mapping[str, str]] = MappingProxyType({
        "view": MappingProxyType({"max-width": "100%"}),
        "editor": MappingProxyType({"width": "560px", "height": "315px"}),
        "post": MappingProxyType({"width": "560px", "height": "315px"}),
    })

    def get_supported_extensions(self) -> list[str]:
        return []

    def get_style(self, view_type: str) -> Mapping[str, str]:
        return self.STYLES.get(view_type) or self.STYLES["view"]

    def get_supported_types(self) -> dict[str, bool]:
        return {self.TYPE: True}

    def get_name(self) -> str:
        return "YouTubeMediaRenderer"

    def is_supported(self, url: str) -> bool:
        if not isinstance(url, str) or not url:
            return False
        try:
            parsed = urlsplit(url)
        except ValueError as exc:
            logger.debug("Unparseable URL %r: %s", url, exc)
            return False
        return is_full_site(parsed) or is_short_link(parsed)

    def get_type(self, url: str) -> Optional[str]:
        return self.TYPE if self.is_supported(url) else None

    def get_icon(self, media_type: str = "") -> str:
        return self.TYPE

    def get_media_id(self, url: str) -> str:
        """Return the video id from a full-site or short-link URL.

        Raises:
            MediaIdError: if *url* is neither form, or the id is empty.
        """
        try:
            parsed = urlsplit(url)
        except ValueError as exc:
            raise MediaIdError(url, "malformed URL") from exc

        if is_full_site(parsed):
            return parse_qs(parsed.query)["v"][0]
        if is_short_link(parsed):
            media_id = parsed.path[parsed.path.rfind("/") + 1:]
            if media_id:
                return media_id
        raise MediaIdError(url, "not a YouTube video URL")

    def render(self, media: MediaDescriptor, options: Optional[RenderOptions] = None) -> str:
        options = resolve_options(options)
        embed_url = self.get_embed_url(media.location)
        return render_iframe_embed(embed_url, options.attrs, options.style)

    def render_by_url(self, url: str, options: Optional[RenderOptions] = None) -> str:
        media_id = self.get_media_id(url)
        return self.render(MediaDescriptor(location=media_id), options)

    def get_embed_url(self, media_id: str) -> str:
        return EMBED_URL.format(media_id=media_id)

    def get_meta(self, url: str, is_file: bool = False) -> Optional[dict[str, Any]]:
        """Return the parsed query string of *url* (last value wins)."""
        try:
            return dict(parse_qsl(urlsplit(url).query, keep_blank_values=True))
        except ValueError:
            return {}

    def get_thumbnail(self, url: str) -> str:
        return THUMBNAIL_URL.format(media_id=self.get_media_id(url))

    def get_native_url(self, media: MediaDescriptor) -> str:
        # quoted so the id survives a round trip through the v parameter
        return NATIVE_URL.format(media_id=quote(media.location, safe=""))
