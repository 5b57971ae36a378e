from __future__ import annotations

from typing import List

from langchain_core.tools import StructuredTool

from sheets.tools.motivational_quote import build_motivational_quote_tool
from sheets.tools.scouter_lookup import build_scouter_lookup_tool


def build_sheet_tools() -> List[StructuredTool]:
    return [build_scouter_lookup_tool(), build_motivational_quote_tool()]


__all__ = [
    "build_motivational_quote_tool",
    "build_scouter_lookup_tool",
    "build_sheet_tools",
]
