from __future__ import annotations

from typing import Any

from langchain_core.tools import StructuredTool
from pydantic import BaseModel, Field

from sheets.core.quotes import random_quote


class MotivationalQuoteInput(BaseModel):
    refresh_token: Any = Field(
        None,
        description="Anything; pass a commonly edited range so the cell refreshes",
    )


def _motivational_quote_tool(refresh_token: Any = None) -> str:
    return random_quote(refresh_token)


def build_motivational_quote_tool() -> StructuredTool:
    return StructuredTool.from_function(
        func=_motivational_quote_tool,
        name="GETMOTIVATIONALQUOTE",
        description="Gets a random motivational quote.",
        args_schema=MotivationalQuoteInput,
    )
