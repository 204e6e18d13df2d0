"""Dependencies: infer what a JSX fragment needs from its surroundings.

Public API:
    extract_props(code) -> PropAnalysis
    extract_hook_returns(code) -> list[str]
    parse_fragment(code) -> ParseOutcome
"""

from __future__ import annotations

from react_extractor.dependencies.extractor import PropExtractor, merge_prop
from react_extractor.dependencies.hook_returns import extract_hook_returns
from react_extractor.dependencies.parser import ParseOutcome, parse_fragment
from react_extractor.dependencies.types import (
    ComplexExpression,
    DetectedProp,
    PropAnalysis,
    PropUsage,
)


def extract_props(code: str) -> PropAnalysis:
    """Extract props from a JSX fragment. Never raises."""
    return PropExtractor(code).extract()


__all__ = [
    "ComplexExpression",
    "DetectedProp",
    "ParseOutcome",
    "PropAnalysis",
    "PropExtractor",
    "PropUsage",
    "extract_hook_returns",
    "extract_props",
    "merge_prop",
    "parse_fragment",
]
