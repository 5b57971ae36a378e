from __future__ import annotations

import json
import logging
from typing import Any, Optional

import httpx
from langchain_core.tools import StructuredTool
from pydantic import BaseModel, Field

from config.settings import get_settings
from sheets.core.query import LookupQuery, validate_lookup


logger = logging.getLogger("scouter_sheets")

# The sheet host sends string payloads with this content type.
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class LookupTransportError(RuntimeError):
    """The lookup endpoint could not be reached or did not answer."""


class ScouterLookupInput(BaseModel):
    match: Any = Field(None, description="The match number")
    color: Any = Field(None, description="The driverstation color (Red/Blue)")
    driver_station: Any = Field(None, description="The driverstation number (1-3)")


def build_lookup_payload(query: LookupQuery) -> str:
    return json.dumps(query.to_payload())


def _call_scouter_lookup(
    query: LookupQuery, transport: Optional[httpx.BaseTransport] = None
) -> str:
    settings = get_settings()
    endpoint = settings.scouter_lookup_url
    if not endpoint:
        raise RuntimeError("SCOUTER_LOOKUP_URL not configured")

    payload = build_lookup_payload(query)
    logger.info("Scouter lookup: endpoint=%s payload=%s", endpoint, payload)

    try:
        with httpx.Client(timeout=settings.scouter_lookup_timeout, transport=transport) as client:
            response = client.request(
                "GET",
                endpoint,
                content=payload,
                headers={"Content-Type": FORM_CONTENT_TYPE},
            )
            return response.text
    except httpx.HTTPError as exc:
        raise LookupTransportError(f"Scouter lookup call failed: {exc}") from exc


def lookup(
    match: Any,
    color: Any,
    driver_station: Any,
    transport: Optional[httpx.BaseTransport] = None,
) -> str:
    """Gets the scouters of a given match.

    Returns the lookup service's response text, or a validation message when
    one of the inputs is unusable.
    """
    result = validate_lookup(match, color, driver_station)
    if not result.ok:
        logger.info(
            "Rejected lookup: match=%r color=%r driver_station=%r (%s)",
            match,
            color,
            driver_station,
            result.error.name,
        )
        return result.error.value
    return _call_scouter_lookup(result.query, transport=transport)


def _scouter_lookup_tool(match: Any = None, color: Any = None, driver_station: Any = None) -> str:
    return lookup(match, color, driver_station)


def build_scouter_lookup_tool() -> StructuredTool:
    description = (
        "Gets the scouters of a given match. "
        "Input must be a JSON object with keys match, color (Red/Blue) and driver_station (1-3)."
    )
    return StructuredTool.from_function(
        func=_scouter_lookup_tool,
        name="GETSCOUTER",
        description=description,
        args_schema=ScouterLookupInput,
    )
