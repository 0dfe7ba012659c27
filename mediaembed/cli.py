"""mediaembed CLI — simple command-line interface.

Usage:
    mediaembed --uri "https://youtube.com/watch?v=abc" --view post
    mediaembed --uri "/media/clip.mp4" --attr class=player --style width=640px
    mediaembed --uri "/files/report.pdf" --raw
    mediaembed --list
"""

from __future__ import annotations

import json
import logging
import sys

import typer

from . import config
from .errors import MediaEmbedError
from .schemas import RenderOptions

app = typer.Typer(add_completion=False, pretty_exceptions_enable=False)


def _parse_pairs(pairs: list[str] | None, label: str) -> dict[str, str]:
    """Turn ['k=v', ...] into a dict; reject entries without '='."""
    values: dict[str, str] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise typer.BadParameter(f"expected KEY=VALUE, got '{pair}'", param_hint=label)
        values[key.strip()] = value.strip()
    return values


@app.command()
def main(
    uri: str = typer.Option(None, help="Media URL or file path to render (YouTube link, .mp4, .pdf, ...)"),
    view: str = typer.Option(None, help="View context: view, editor or post"),
    attr: list[str] = typer.Option(None, help="HTML attribute as KEY=VALUE (repeatable)"),
    style: list[str] = typer.Option(None, help="CSS property as KEY=VALUE (repeatable)"),
    list_renderers: bool = typer.Option(False, "--list", help="List the registered renderers"),
    raw: bool = typer.Option(False, "--raw", help="Output the full render result as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level"),
) -> None:
    """Render embeddable HTML for media URLs."""
    sys.stdout.reconfigure(encoding="utf-8")
    level = "DEBUG" if verbose else config.get("MEDIAEMBED_LOG_LEVEL").upper()
    logging.basicConfig(level=getattr(logging, level, logging.WARNING),
                        format="%(levelname)s %(name)s: %(message)s")

    if list_renderers:
        from .service import list_renderers as describe

        for entry in describe():
            exts = ", ".join(entry["extensions"]) or "URL pattern"
            typer.echo(f"  [{entry['type']}] {entry['name']} ({exts})")
        raise typer.Exit()

    if not uri:
        typer.echo("Error: --uri is required.\n"
                   "  mediaembed --uri 'https://youtu.be/abc' --view post\n"
                   "  mediaembed --list")
        raise typer.Exit(1)

    from .service import embed

    options = RenderOptions(attrs=_parse_pairs(attr, "--attr"), style=_parse_pairs(style, "--style"))
    try:
        result = embed(uri, view_type=view, options=options)
    except MediaEmbedError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    if raw:
        typer.echo(json.dumps(result.model_dump(), indent=2, ensure_ascii=False))
    else:
        typer.echo(result.html)


if __name__ == "__main__":
    app()
