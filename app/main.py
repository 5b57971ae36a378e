from __future__ import annotations

from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
import logging
from pydantic import BaseModel, Field

from config.settings import get_settings
from sheets.core.quotes import random_quote
from sheets.tools import build_sheet_tools
from sheets.tools.scouter_lookup import LookupTransportError, lookup


settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="[%(asctime)s] %(levelname)s - %(message)s",
)
logger = logging.getLogger("scouter_sheets")

app = FastAPI(title="Scouter Sheet Functions", version="1.0.0")

# CORS: allow Apps Script and local sheets during development
if settings.app_env.lower() in {"dev", "development", "local"}:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


class ScouterRequest(BaseModel):
    match: Any = Field(None, description="The match number")
    color: Any = Field(None, description="The driverstation color (Red/Blue)")
    driver_station: Any = Field(None, description="The driverstation number (1-3)")


class QuoteRequest(BaseModel):
    refresh_token: Any = Field(None, description="Ignored; lets the sheet force a refresh")


@app.post("/functions/GETSCOUTER")
def get_scouter(req: ScouterRequest) -> Dict[str, str]:
    logger.info(
        "Incoming GETSCOUTER: match=%r color=%r driver_station=%r",
        req.match,
        req.color,
        req.driver_station,
    )
    try:
        value = lookup(req.match, req.color, req.driver_station)
    except LookupTransportError as e:
        logger.exception("Scouter lookup failed: %s", e)
        raise HTTPException(status_code=502, detail=str(e))
    return {"value": value}


@app.post("/functions/GETMOTIVATIONALQUOTE")
def get_motivational_quote(req: QuoteRequest) -> Dict[str, str]:
    return {"value": random_quote(req.refresh_token)}


@app.get("/functions")
def list_functions() -> List[Dict[str, str]]:
    return [
        {"name": tool.name, "description": tool.description}
        for tool in build_sheet_tools()
    ]


@app.get("/health")
def health():
    return {"status": "ok"}
