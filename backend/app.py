from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from .recommendations.catalog import GAME_WEIGHTS
from .recommendations.models import (
    RecommendationRequest,
    RecommendationResponse,
    RequestFormFactor,
    Resolution,
)
from .recommendations.scoring import NO_CANDIDATES_MESSAGE, recommend_gpu

logger = logging.getLogger(__name__)

app = FastAPI(title="GPU Upgrade Advisor API", version="1.0.0")

_STATIC_DIR = Path(__file__).resolve().parent / "static"

REQUIRED_FIELDS = {"budget", "currentGpu", "formFactor", "resolution"}
MISSING_FIELDS_MESSAGE = "Missing required fields"


def _is_missing(error: dict) -> bool:
    """Absent, empty or zero required values all count as missing."""
    if error["type"] == "missing":
        return True
    field = error["loc"][-1] if error["loc"] else None
    return field in REQUIRED_FIELDS and not error.get("input")


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()

    # An unparseable body is an unexpected failure, not a validation one.
    bad_json = next((e for e in errors if e["type"] == "json_invalid"), None)
    if bad_json:
        logger.warning("Rejected unparseable request body: %s", bad_json.get("msg"))
        return JSONResponse(status_code=500, content={"error": bad_json.get("msg", "Invalid JSON")})

    if any(_is_missing(e) for e in errors):
        return JSONResponse(status_code=400, content={"error": MISSING_FIELDS_MESSAGE})

    first = errors[0]
    field = ".".join(str(part) for part in first["loc"][1:]) or "body"
    return JSONResponse(
        status_code=400,
        content={"error": f"Invalid request: {field}: {first['msg']}"},
    )


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    return {
        "formFactors": [f.value for f in RequestFormFactor],
        "resolutions": [r.value for r in Resolution],
        "games": sorted(GAME_WEIGHTS),
    }


@app.post("/api/recommend", response_model=RecommendationResponse)
def recommend(body: RecommendationRequest) -> RecommendationResponse | JSONResponse:
    try:
        recommendation = recommend_gpu(body)
    except Exception as exc:
        logger.exception("GPU recommendation failed")
        return JSONResponse(status_code=500, content={"error": str(exc)})

    # No eligible GPU is a normal outcome, reported with a 200.
    if recommendation is None:
        return JSONResponse(content={"error": NO_CANDIDATES_MESSAGE})

    return RecommendationResponse(recommendation=recommendation)


# ── Static form ─────────────────────────────────────────────────────────


app.mount("/static", StaticFiles(directory=str(_STATIC_DIR)), name="static")


@app.get("/")
def root():
    return FileResponse(str(_STATIC_DIR / "index.html"))
