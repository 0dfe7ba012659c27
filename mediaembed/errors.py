"""Exceptions raised by mediaembed."""

from __future__ import annotations


class MediaEmbedError(Exception):
    """Base class for all mediaembed errors."""


class MediaIdError(MediaEmbedError, ValueError):
    """A media id could not be resolved from the given URL."""

    def __init__(self, uri: str, reason: str = "no media id found") -> None:
        super().__init__(f"{reason}: {uri}")
        self.uri = uri


class UnsupportedMediaError(MediaEmbedError, LookupError):
    """No renderer is registered for the given URL or type tag."""
