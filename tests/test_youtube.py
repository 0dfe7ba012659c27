"""Tests for the YouTube renderer."""

import pytest

from mediaembed.errors import MediaIdError
from mediaembed.renderers.youtube import YouTubeRenderer, is_full_site, is_short_link
from mediaembed.schemas import MediaDescriptor, RenderOptions

yt = YouTubeRenderer()


def test_youtube_watch_url() -> None:
    url = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
    assert yt.is_supported(url)
    assert yt.get_type(url) == "youtube"
    assert yt.get_media_id(url) == "dQw4w9WgXcQ"
    assert yt.get_embed_url(yt.get_media_id(url)).endswith("/embed/dQw4w9WgXcQ")


def test_youtube_with_extra_params() -> None:
    url = "https://youtube.com/watch?feature=share&v=dQw4w9WgXcQ"
    assert yt.is_supported(url)
    assert yt.get_media_id(url) == "dQw4w9WgXcQ"


def test_youtube_short_url() -> None:
    url = "https://youtu.be/dQw4w9WgXcQ"
    assert yt.is_supported(url)
    assert yt.get_media_id(url) == "dQw4w9WgXcQ"
    assert yt.get_embed_url(yt.get_media_id(url)).endswith("/embed/dQw4w9WgXcQ")


def test_rejects_other_urls_without_raising() -> None:
    urls = [
        "https://www.youtube.com/",
        "https://www.youtube.com/watch?v=",
        "https://vimeo.com/12345",
        "clip.mp4",
        "",
        "http://[::1",
    ]
    for url in urls:
        assert not yt.is_supported(url), url
        assert yt.get_type(url) is None


def test_recognition_helpers_accept_strings() -> None:
    assert is_full_site("https://m.youtube.com/watch?v=abc")
    assert not is_full_site("https://youtu.be/abc")
    assert is_short_link("https://youtu.be/abc")
    assert not is_short_link("https://www.youtube.com/watch?v=abc")


def test_media_id_errors_for_unresolvable_urls() -> None:
    with pytest.raises(MediaIdError):
        yt.get_media_id("https://example.com/watch?v=abc")
    with pytest.raises(MediaIdError):
        yt.get_media_id("https://youtu.be/")


def test_render_builds_iframe() -> None:
    html = yt.render(MediaDescriptor(location="abc123"))
    assert html == (
        '<iframe src="//www.youtube.com/embed/abc123" '
        'frameborder="0" allowfullscreen></iframe>'
    )


def test_render_applies_attrs_and_style() -> None:
    options = RenderOptions(attrs={"class": "player"}, style={"width": "560px"})
    html = yt.render(MediaDescriptor(location="abc123"), options)
    assert 'class="player"' in html
    assert 'style="width:560px;"' in html


def test_render_by_url_resolves_id_first() -> None:
    html = yt.render_by_url("https://youtu.be/abc123")
    assert 'src="//www.youtube.com/embed/abc123"' in html


def test_render_by_url_forwards_id_errors(monkeypatch) -> None:
    error = MediaIdError("https://youtu.be/x", "lookup failed")
    calls: list = []

    def fail(url):
        raise error

    monkeypatch.setattr(yt, "get_media_id", fail)
    monkeypatch.setattr(yt, "render", lambda *args, **kwargs: calls.append(args))

    with pytest.raises(MediaIdError) as excinfo:
        yt.render_by_url("https://youtu.be/x")
    assert excinfo.value is error
    assert calls == []


def test_thumbnail_native_url_and_meta() -> None:
    url = "https://www.youtube.com/watch?v=abc123&t=42"
    assert yt.get_thumbnail(url) == "http://img.youtube.com/vi/abc123/0.jpg"
    assert yt.get_meta(url) == {"v": "abc123", "t": "42"}
    assert yt.get_native_url(MediaDescriptor(location="abc123")) == (
        "https://www.youtube.com/watch?v=abc123"
    )


def test_static_descriptors() -> None:
    assert yt.get_supported_extensions() == []
    assert yt.get_supported_types() == {"youtube": True}
    assert yt.get_name() == "YouTubeMediaRenderer"
    assert yt.get_icon("youtube") == "youtube"
    assert yt.get_style("editor") == {"width": "560px", "height": "315px"}
    assert yt.get_style("bogus") == yt.get_style("view") == {"max-width": "100%"}
