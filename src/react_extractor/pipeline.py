"""End-to-end analysis: classify, extract dependencies, name the result."""

from __future__ import annotations

from dataclasses import dataclass

from react_extractor.config import Config
from react_extractor.dependencies import PropAnalysis, extract_hook_returns, extract_props
from react_extractor.detection.engine import DetectionEngine
from react_extractor.detection.types import ClassificationResult
from react_extractor.models import Category, ExtractionRecommendation


@dataclass(frozen=True, slots=True)
class ExtractionPlan:
    """Everything the templating step needs for one selection."""

    code: str
    result: ClassificationResult
    recommendation: ExtractionRecommendation
    props: PropAnalysis | None = None  # Components only
    hook_returns: tuple[str, ...] = ()  # Hooks only
    typed: bool = False

    @property
    def category(self) -> Category:
        return self.result.category


def plan_extraction(
    code: str,
    *,
    typed: bool = False,
    config: Config | None = None,
    category: Category | None = None,
) -> ExtractionPlan:
    """Run the whole pipeline on a selection.

    ``category`` forces component or hook handling regardless of the verdict
    (explicit extract commands); the classification is still reported.
    """
    engine = DetectionEngine(config)
    result = engine.analyze(code)
    recommendation = engine.recommend(code, result)

    target = category or result.category
    props = extract_props(code) if target == Category.COMPONENT else None
    hook_returns = tuple(extract_hook_returns(code)) if target == Category.HOOK else ()

    return ExtractionPlan(
        code=code,
        result=result,
        recommendation=recommendation,
        props=props,
        hook_returns=hook_returns,
        typed=typed,
    )
