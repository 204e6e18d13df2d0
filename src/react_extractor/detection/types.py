"""Internal data types for fragment classification.

Frozen dataclasses for scanner matches and the engine verdict. A result is
computed fresh per ``analyze`` call and never shared between calls.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from react_extractor.models import Category, PatternKind


@dataclass(frozen=True, slots=True)
class DetectedPattern:
    """One structural/lexical match within a fragment."""

    kind: PatternKind
    text: str  # Matched text, truncated for display
    confidence: float
    start: int  # Half-open [start, end) offsets into the fragment
    end: int
    weight: int = 0  # Complexity weight, 0 for markup/hook matches


@dataclass(frozen=True, slots=True)
class ClassificationResult:
    """Engine verdict for one fragment."""

    category: Category
    confidence: float  # 0.0 - 1.0, exactly 0 iff category is unknown
    complexity: int
    patterns: tuple[DetectedPattern, ...] = ()
    mixed_content: bool = False
    suggestions: tuple[str, ...] = field(default_factory=tuple)

    def has_kind(self, kind: PatternKind) -> bool:
        return any(p.kind == kind for p in self.patterns)

    def count_kind(self, kind: PatternKind) -> int:
        return sum(1 for p in self.patterns if p.kind == kind)
