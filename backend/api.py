"""FastAPI application standing in for the remote Analysis Service."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from .analyzer import analyze_sentence

logger = logging.getLogger(__name__)


class AnalyzeRequest(BaseModel):
    sentence: str = Field(..., description="Arabic sentence to analyze.")


class WordPayload(BaseModel):
    word: str
    irab: str


class AnalyzeResponse(BaseModel):
    success: bool
    output: Optional[list[WordPayload]] = Field(None, description="Per-word analysis on success.")
    error: Optional[str] = Field(None, description="Reason the sentence was rejected.")


app = FastAPI(title="I'rab Analysis Stub", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/", include_in_schema=False)
def index() -> dict:
    return {"status": "ok", "routes": ["POST /analyze"]}


@app.post("/analyze", response_model=AnalyzeResponse, response_model_exclude_none=True)
def analyze(payload: AnalyzeRequest) -> dict:
    """Return a placeholder i'rab for each word of the sentence."""

    result = analyze_sentence(payload.sentence)
    if not result.success:
        logger.debug("Rejected sentence: %s", result.error)
    return result.to_dict()


@app.exception_handler(RequestValidationError)
async def _validation_exception_handler(request: Request, exc: RequestValidationError):
    """Answer malformed requests in the service's own failure shape."""

    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request.") if errors else "Invalid request."
    return JSONResponse(status_code=422, content={"success": False, "error": message})
