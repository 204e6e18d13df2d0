"""Data types for prop (dependency) extraction."""

from __future__ import annotations

from dataclasses import dataclass, field

from react_extractor.models import PropType, UsageKind


@dataclass(frozen=True, slots=True)
class PropUsage:
    """One occurrence of a prop reference."""

    kind: UsageKind
    expression: str  # As written: "user.profile.email", "handleClick()"
    context: str  # jsx-expression | jsx-attribute | conditional-test | ...


@dataclass(frozen=True, slots=True)
class DetectedProp:
    """An external name the fragment references but does not declare."""

    name: str
    type: PropType
    inferred_type: str  # Annotation text: "any", "boolean", "() => void"
    required: bool = True  # No optionality inference
    usages: tuple[PropUsage, ...] = ()


@dataclass(frozen=True, slots=True)
class ComplexExpression:
    """A multi-segment expression worth surfacing apart from its root prop."""

    expression: str
    variables: tuple[str, ...]
    kind: UsageKind
    suggested_prop_name: str


@dataclass(frozen=True, slots=True)
class PropAnalysis:
    """Complete dependency extraction result for one fragment."""

    props: tuple[DetectedProp, ...]
    complex_expressions: tuple[ComplexExpression, ...]
    conditional_props: tuple[str, ...]
    total_complexity: int
    parse_error: str | None = None  # Set when the lexical fallback ran

    def get(self, name: str) -> DetectedProp | None:
        return next((p for p in self.props if p.name == name), None)

    @property
    def names(self) -> list[str]:
        return [p.name for p in self.props]


@dataclass(slots=True)
class PropEntry:
    """Mutable accumulator for one prop during a single extraction pass."""

    name: str
    type: PropType
    inferred_type: str
    usages: list[PropUsage] = field(default_factory=list)

    def freeze(self) -> DetectedProp:
        return DetectedProp(
            name=self.name,
            type=self.type,
            inferred_type=self.inferred_type,
            usages=tuple(self.usages),
        )
