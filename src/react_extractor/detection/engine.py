"""DetectionEngine: turn scanner matches into a scored component/hook verdict."""

from __future__ import annotations

from react_extractor.config import Config
from react_extractor.detection.naming import suggest_name
from react_extractor.detection.scanner import (
    has_hook_call,
    has_markup,
    scan_complexity,
    scan_hooks,
    scan_markup,
)
from react_extractor.detection.types import ClassificationResult, DetectedPattern
from react_extractor.models import Category, ExtractionRecommendation, PatternKind


def detect_export_type(code: str) -> Category:
    """Single-shot binary detection without scoring.

    Markup presence wins over hook presence; neither gives ``unknown``.
    """
    if has_markup(code):
        return Category.COMPONENT
    if has_hook_call(code):
        return Category.HOOK
    return Category.UNKNOWN


class DetectionEngine:
    """Score a fragment's markup and hook evidence and pick a category.

    The engine holds only read-only configuration, so one instance can serve
    concurrent callers.

    Usage:
        engine = DetectionEngine()
        result = engine.analyze(source)
    """

    def __init__(self, config: Config | None = None) -> None:
        self.config = config or Config()

    def analyze(self, code: str) -> ClassificationResult:
        """Classify a fragment. Never raises; no signal yields ``unknown``."""
        markup_patterns = scan_markup(code)
        hook_patterns = scan_hooks(code)
        complexity_patterns = scan_complexity(code)

        markup_score = sum(p.confidence for p in markup_patterns)
        hook_score = sum(p.confidence for p in hook_patterns)
        complexity = sum(p.weight for p in complexity_patterns)

        # Computed before the tie-break so it is independent of the winner
        mixed_content = markup_score > 0 and hook_score > 0

        if markup_score > hook_score and markup_score > 0:
            category = Category.COMPONENT
            confidence = min(markup_score / self.config.component_normalizer, 1.0)
        elif hook_score > 0:
            category = Category.HOOK
            confidence = min(hook_score / self.config.hook_normalizer, 1.0)
        else:
            category = Category.UNKNOWN
            confidence = 0.0

        patterns = (*markup_patterns, *hook_patterns, *complexity_patterns)
        suggestions = self._suggestions(category, complexity, patterns, mixed_content)

        return ClassificationResult(
            category=category,
            confidence=confidence,
            complexity=complexity,
            patterns=patterns,
            mixed_content=mixed_content,
            suggestions=tuple(suggestions),
        )

    def _suggestions(
        self,
        category: Category,
        complexity: int,
        patterns: tuple[DetectedPattern, ...],
        mixed_content: bool,
    ) -> list[str]:
        """Derive improvement hints from the verdict. Order is fixed."""
        kinds = [p.kind for p in patterns]
        suggestions: list[str] = []

        if mixed_content:
            suggestions.append(
                "Code contains both JSX and hooks. Consider extracting the hook logic "
                "into a custom hook and keeping the markup in the component."
            )

        if complexity > self.config.high_complexity_threshold:
            suggestions.append(
                f"High complexity ({complexity}). Consider breaking this code into "
                "smaller components or hooks."
            )

        if category == Category.COMPONENT:
            if PatternKind.EVENT_HANDLER in kinds and PatternKind.STATE in kinds:
                suggestions.append(
                    "Component mixes event handlers with state updates. Consider "
                    "extracting the handlers into a custom hook."
                )
            if kinds.count(PatternKind.JSX) > self.config.max_markup_patterns:
                suggestions.append(
                    "Large amount of JSX. Consider splitting it into smaller sub-components."
                )
        elif category == Category.HOOK:
            if PatternKind.EFFECT in kinds and PatternKind.STATE in kinds:
                suggestions.append(
                    "Hook combines effects with state updates. Make sure effect "
                    "dependency arrays list every value the effect reads."
                )
        else:
            suggestions.append(
                "Unable to determine whether this code is a component or a hook. "
                "Select code that contains JSX markup or React hook calls."
            )

        return suggestions

    def quick_detect(self, code: str) -> Category:
        """Category only, for callers that predate confidence scoring."""
        return self.analyze(code).category

    def is_extraction_worthy(self, code: str) -> bool:
        """True if the verdict is confident enough and backed by at least one pattern."""
        result = self.analyze(code)
        return result.confidence > self.config.min_extraction_confidence and bool(
            result.patterns
        )

    def get_extraction_recommendation(self, code: str) -> ExtractionRecommendation:
        """Decide whether to extract, and under which name."""
        result = self.analyze(code)
        return self.recommend(code, result)

    def recommend(self, code: str, result: ClassificationResult) -> ExtractionRecommendation:
        """Build the recommendation for an already-computed result."""
        if result.confidence < self.config.min_extraction_confidence:
            return ExtractionRecommendation(
                should_extract=False,
                category=result.category,
                confidence=result.confidence,
                reason=(
                    f"Low confidence ({result.confidence:.2f}) in detecting "
                    "a component or hook"
                ),
            )

        if not result.patterns:
            return ExtractionRecommendation(
                should_extract=False,
                category=result.category,
                confidence=result.confidence,
                reason="No extractable patterns found",
            )

        return ExtractionRecommendation(
            should_extract=True,
            category=result.category,
            confidence=result.confidence,
            suggested_name=suggest_name(code, result),
            reason=f"Detected {result.category} with {result.confidence:.2f} confidence",
        )
