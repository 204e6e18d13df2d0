"""Detection: classify React fragments as components or hooks.

Public API:
    analyze(code) -> ClassificationResult
    quick_detect(code) -> Category
    is_extraction_worthy(code) -> bool
    get_extraction_recommendation(code) -> ExtractionRecommendation
    detect_export_type(code) -> Category   (legacy, unscored)
    scan(code) -> list[DetectedPattern]
"""

from __future__ import annotations

from react_extractor.detection.engine import DetectionEngine, detect_export_type
from react_extractor.detection.naming import suggest_name
from react_extractor.detection.scanner import scan
from react_extractor.detection.types import ClassificationResult, DetectedPattern
from react_extractor.models import Category, ExtractionRecommendation

_ENGINE = DetectionEngine()


def analyze(code: str) -> ClassificationResult:
    """Classify a fragment with the default configuration."""
    return _ENGINE.analyze(code)


def quick_detect(code: str) -> Category:
    """Category only, scored path."""
    return _ENGINE.quick_detect(code)


def is_extraction_worthy(code: str) -> bool:
    return _ENGINE.is_extraction_worthy(code)


def get_extraction_recommendation(code: str) -> ExtractionRecommendation:
    return _ENGINE.get_extraction_recommendation(code)


__all__ = [
    "ClassificationResult",
    "DetectedPattern",
    "DetectionEngine",
    "analyze",
    "detect_export_type",
    "get_extraction_recommendation",
    "is_extraction_worthy",
    "quick_detect",
    "scan",
    "suggest_name",
]
