"""mediaembed HTTP API — FastAPI endpoint for page builders.

Usage:
    uvicorn mediaembed.api:app --port 8080
"""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from .errors import MediaIdError, UnsupportedMediaError
from .schemas import AttrValue, RenderOptions, RenderResult

app = FastAPI(title="mediaembed", version="0.1.0")


class RenderRequest(BaseModel):
    uri: str
    view: Optional[str] = None
    attrs: dict[str, AttrValue] = Field(default_factory=dict)
    style: dict[str, AttrValue] = Field(default_factory=dict)


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/renderers")
def renderers():
    from .service import list_renderers

    return list_renderers()


@app.post("/render", response_model=RenderResult)
def render(req: RenderRequest):
    from .service import embed

    options = RenderOptions(attrs=req.attrs, style=req.style)
    try:
        return embed(req.uri, view_type=req.view, options=options)
    except UnsupportedMediaError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except MediaIdError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
