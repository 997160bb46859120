from __future__ import annotations

import logging

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware

from .models import ValidateRequest, ValidationResult
from .settings import load_settings
from .validator import validate_and_detect

settings = load_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
)

app = FastAPI(title="StoreProbe Agent", version="0.1.0")

# For local dev, this defaults to allowing http://localhost:3000.
# In production, set STOREPROBE_CORS_ORIGINS to your deployed frontend origins.
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/healthz")
def healthz():
    return {"ok": True}


@app.post("/validate", response_model=ValidationResult)
async def validate_endpoint(req: ValidateRequest):
    return await validate_and_detect(
        req.url,
        timeout_ms=req.timeout_ms or settings.timeout_ms,
        user_agent=req.user_agent or settings.user_agent,
    )


@app.get("/validate", response_model=ValidationResult)
async def validate_query_endpoint(url: str = Query(..., min_length=1)):
    return await validate_and_detect(url, timeout_ms=settings.timeout_ms, user_agent=settings.user_agent)
