"""mediaembed schema — descriptors, render options and render results."""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, Field

# attribute and CSS values; numbers are rendered with str()
AttrValue = Union[str, int, float]


class MediaDescriptor(BaseModel):
    location: str  # type-specific id: video id, file path or URL
    mime: Optional[str] = None


class RenderOptions(BaseModel):
    attrs: dict[str, AttrValue] = Field(default_factory=dict)  # excluding style
    style: dict[str, AttrValue] = Field(default_factory=dict)


class RenderResult(BaseModel):
    type: str
    renderer: str
    media_id: str
    html: str
    embed_url: str
    native_url: str
    thumbnail: str = ""
    icon: str = ""
    meta: Optional[dict[str, Any]] = None
    style: dict[str, AttrValue] = Field(default_factory=dict)
