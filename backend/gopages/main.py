"""
GoPages — FastAPI Backend

Endpoints:
  POST /v1/pages/preview — Payload → resolved suffixes and page paths (no side effects)
  POST /v1/update        — Payload → write pages, commit / open PR in the served checkout
  GET  /health           — Health check
"""

import time
import uuid
from typing import Any

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from gopages.core.config import settings, validate_config
from gopages.env.environment import EnvironmentReader
from gopages.errors import GoPagesError
from gopages.git.operations import GitOperations
from gopages.github.client import GitHubClient
from gopages.pages.content import generate_file_paths, module_path_tail
from gopages.pages.suffix import ROOT_SUFFIX, resolve_import_suffixes
from gopages.pages.writer import FileWriter
from gopages.service.update import update
from gopages.utils.logging import logger
from gopages.utils.validate import parse_options, parse_payload

VERSION = "1.0.0"

app = FastAPI(
    title="GoPages API",
    description="Generate and publish Go vanity import redirect pages.",
    version=VERSION,
)


# ──────────────────────────────────────────────────────────
# Request/Response models
# ──────────────────────────────────────────────────────────

class PagesRequest(BaseModel):
    payload: dict[str, Any] = Field(
        ..., description="Payload JSON (owner, repoName, goModInfo)"
    )
    pages_dir: str = Field(default=".", description="Directory the pages are written under")


class UpdateRequest(PagesRequest):
    change_type: str = Field(default="commit", description="'commit' or 'pr'")


class PagePreview(BaseModel):
    suffix: str
    directory_path: str
    file_path: str


class PreviewResponse(BaseModel):
    module_path: str
    suffixes: list[str]
    pages: list[PagePreview]


# ──────────────────────────────────────────────────────────
# Endpoints
# ──────────────────────────────────────────────────────────

@app.get("/health")
async def health():
    return {"status": "ok", "service": "gopages-api", "version": VERSION}


@app.post("/v1/pages/preview", response_model=PreviewResponse)
async def preview_pages(req: PagesRequest):
    """Resolve the payload into the pages an update would write."""
    try:
        payload = parse_payload(req.payload)
        options = parse_options(req.pages_dir)
    except GoPagesError as exc:
        raise HTTPException(status_code=422, detail=exc.to_dict())

    mod = payload.go_mod_info
    suffixes = resolve_import_suffixes(mod.module.path, mod.imports)
    tail = module_path_tail(mod.module.path)
    pages = []
    for suffix in [*suffixes, ROOT_SUFFIX]:
        directory_path, file_path = generate_file_paths(options.pages_dir, tail, suffix)
        pages.append(PagePreview(
            suffix=suffix, directory_path=directory_path, file_path=file_path,
        ))
    return PreviewResponse(module_path=mod.module.path, suffixes=suffixes, pages=pages)


@app.post("/v1/update")
async def update_pages(req: UpdateRequest):
    """
    Write the redirect pages into the served checkout and publish them.

    The served process' working directory must be a git checkout of the
    pages repository with GITHUB_REPOSITORY and GITHUB_TOKEN set.
    """
    request_id = uuid.uuid4().hex[:12]
    start = time.perf_counter()
    logger.info("[%s] POST /v1/update — change_type=%s", request_id, req.change_type)

    try:
        payload = parse_payload(req.payload)
        options = parse_options(req.pages_dir, req.change_type)
        validate_config(settings)
        result = await update(
            options,
            payload,
            env=EnvironmentReader(),
            fs=FileWriter(),
            git=GitOperations(),
            github=GitHubClient(
                token=settings.github.token,
                base_url=settings.github.api_url,
                timeout=settings.github.timeout,
            ),
        )
    except GoPagesError as exc:
        logger.warning("[%s] GoPages error: %s", request_id, exc.code)
        raise HTTPException(status_code=422, detail=exc.to_dict())
    except Exception as exc:
        logger.exception("[%s] Update failed", request_id)
        raise HTTPException(status_code=500, detail=str(exc))

    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info("[%s] Complete — %s in %.0f ms", request_id, result.state.value, elapsed_ms)
    return result.model_dump()
