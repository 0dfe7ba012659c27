"""Renderer protocol and shared markup helpers.

Every renderer builds its HTML with these helpers so attribute and style
strings look the same across media types, and every interpolated value is
entity-encoded before it lands in markup.
"""

from __future__ import annotations

import html
import logging
import re
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Any, Mapping, Optional, Protocol, runtime_checkable
from urllib.parse import urlsplit

from .. import config
from ..schemas import MediaDescriptor, RenderOptions

logger = logging.getLogger(__name__)

# HTML attribute names: no whitespace, quotes, "<", ">", "/" or "="
_ATTR_NAME_RE = re.compile(r"^[^\s\"'<>/=]+$")
_CSS_PROPERTY_RE = re.compile(r"^-{0,2}[A-Za-z_][\w-]*$")


@runtime_checkable
class MediaRenderer(Protocol):
    TYPE: str

    def get_supported_extensions(self) -> list[str]: ...
    def get_style(self, view_type: str) -> Mapping[str, str]: ...
    def get_supported_types(self) -> dict[str, bool]: ...
    def get_name(self) -> str: ...
    def is_supported(self, url: str) -> bool: ...
    def get_type(self, url: str) -> Optional[str]: ...
    def get_icon(self, media_type: str = "") -> str: ...
    def get_media_id(self, url: str) -> str: ...
    def render(self, media: MediaDescriptor, options: Optional[RenderOptions] = None) -> str: ...
    def render_by_url(self, url: str, options: Optional[RenderOptions] = None) -> str: ...
    def get_embed_url(self, media_id: str) -> str: ...
    def get_meta(self, url: str, is_file: bool = False) -> Optional[dict[str, Any]]: ...
    def get_thumbnail(self, url: str) -> str: ...
    def get_native_url(self, media: MediaDescriptor) -> str: ...


# ── Encoding ─────────────────────────────────────────────────

def html_encode(value: Any) -> str:
    """Entity-encode a value for use inside a double-quoted attribute."""
    return html.escape(str(value), quote=True)


# ── Markup helpers ───────────────────────────────────────────

def get_attribute_str(attrs: Optional[Mapping[str, Any]]) -> str:
    """Build ``key="value"`` pairs from a mapping of HTML attributes.

    Names that are not valid HTML attribute names are dropped with a warning.
    """
    if not attrs:
        return ""
    pairs = []
    for key, val in attrs.items():
        if not _ATTR_NAME_RE.match(str(key)):
            logger.warning("Dropping invalid attribute name %r", key)
            continue
        pairs.append(f'{key}="{html_encode(val)}"')
    return " ".join(pairs)


def get_style_attr_str(style: Optional[Mapping[str, Any]]) -> str:
    """Build a ``style="k:v;"`` attribute from a mapping of CSS properties."""
    if not style:
        return ""
    rules = []
    for key, val in style.items():
        if not _CSS_PROPERTY_RE.match(str(key)):
            logger.warning("Dropping invalid CSS property %r", key)
            continue
        rules.append(f"{key}:{html_encode(val)};")
    if not rules:
        return ""
    return f'style="{"".join(rules)}"'

def open_tag(tag: str, *parts: str) -> str:
    """Join non-empty attribute fragments into an opening tag body (no ``>``)."""
    return "<" + " ".join([tag, *(p for p in parts if p)])


def render_iframe_embed(
    src: str,
    attrs: Optional[Mapping[str, Any]] = None,
    style: Optional[Mapping[str, Any]] = None,
) -> str:
    """Render a generic ``<iframe>`` embed pointing at *src*."""
    return open_tag(
        "iframe",
        f'src="{html_encode(src)}"',
        get_attribute_str(attrs),
        get_style_attr_str(style),
        'frameborder="0"',
        "allowfullscreen",
    ) + "></iframe>"


def get_embed_url(media_id: str) -> str:
    """Generic embed URL for file-backed media.

    Absolute URLs, protocol-relative URLs and root paths pass through.
    Bare relative ids get MEDIAEMBED_MEDIA_URL_PREFIX in front when set.
    """
    prefix = config.get("MEDIAEMBED_MEDIA_URL_PREFIX")
    if not prefix or media_id.startswith("/"):
        return media_id
    try:
        if urlsplit(media_id).scheme:
            return media_id
    except ValueError:
        return media_id
    return prefix.rstrip("/") + "/" + media_id


def get_extension(
    path: str,
    lower: bool = True,
    sep: Optional[str] = None,
    strip_query: bool = True,
) -> Optional[str]:
    """Return the file extension of *path* without the dot, or None.

    With *strip_query*, anything after ``?`` or ``#`` is ignored. When *sep*
    is given, a dot before the last separator does not count
    (``example.com/clip``).
    """
    if not path:
        return None
    if strip_query:
        for marker in ("?", "#"):
            path = path.split(marker, 1)[0]
    idx = path.rfind(".")
    if idx < 0:
        return None
    if sep and path.rfind(sep) > idx:
        return None
    ext = path[idx + 1:]
    if not ext:
        return None
    return ext.lower() if lower else ext


def resolve_options(options: Optional[RenderOptions]) -> RenderOptions:
    return options if options is not None else RenderOptions()


# ── File-backed renderers ────────────────────────────────────

class FileMediaRenderer(ABC):
    """Shared behaviour for renderers selected by file extension.

    Subclasses set TYPE, SUPPORTED (extension -> {"mime": ...}), STYLES and
    implement ``render``. The media id of a file is its location.
    """

    TYPE: str = ""
    NAME: str = ""
    ICON: str = ""
    SUPPORTED: Mapping[str, Mapping[str, str]] = MappingProxyType({})
    STYLES: Mapping[str, Mapping[str, str]] = MappingProxyType({})

    def _lookup(self, url: str) -> Optional[Mapping[str, str]]:
        """MIME record for *url*: the raw string's extension first, then the
        extension of the path with query and fragment removed."""
        if not isinstance(url, str):
            return None
        for strip_query in (False, True):
            record = self.SUPPORTED.get(
                get_extension(url, lower=True, sep="/", strip_query=strip_query) or ""
            )
            if record:
                return record
        return None

    def get_supported_extensions(self) -> list[str]:
        return list(self.SUPPORTED)

    def get_style(self, view_type: str) -> Mapping[str, str]:
        return self.STYLES.get(view_type) or self.STYLES["view"]

    def get_supported_types(self) -> dict[str, bool]:
        return {self.TYPE: True}

    def get_name(self) -> str:
        return self.NAME

    def is_supported(self, url: str) -> bool:
        return self._lookup(url) is not None

    def get_type(self, url: str) -> Optional[str]:
        return self.TYPE if self.is_supported(url) else None

    def get_icon(self, media_type: str = "") -> str:
        return self.ICON

    def get_media_id(self, url: str) -> str:
        return url

    @abstractmethod
    def render(self, media: MediaDescriptor, options: Optional[RenderOptions] = None) -> str:
        """Return the HTML fragment for *media*."""

    def render_by_url(self, url: str, options: Optional[RenderOptions] = None) -> str:
        media_id = self.get_media_id(url)
        return self.render(MediaDescriptor(location=media_id), options)

    def get_embed_url(self, media_id: str) -> str:
        return get_embed_url(media_id)

    def get_mime(self, media: MediaDescriptor) -> Optional[str]:
        """Explicit descriptor MIME, else the extension table, else None."""
        if media.mime:
            return media.mime
        record = self._lookup(media.location)
        return record["mime"] if record else None

    def get_meta(self, url: str, is_file: bool = False) -> Optional[dict[str, Any]]:
        """Return a copy of the extension's MIME record, or None."""
        record = self._lookup(url)
        return dict(record) if record else None

    def get_thumbnail(self, url: str) -> str:
        return ""

    def get_native_url(self, media: MediaDescriptor) -> str:
        return media.location
