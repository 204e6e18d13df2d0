"""Pattern scanner: apply the fixed regex catalog to a code fragment.

Three independent families run over the same text without short-circuiting:
markup (JSX elements), stateful logic (hook calls) and complexity indicators.
Every match becomes a DetectedPattern carrying a half-open span into the
original fragment.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from react_extractor.detection.types import DetectedPattern
from react_extractor.models import PatternKind

# ---------------------------------------------------------------------------
# Catalog, process-wide constants, never mutated
# ---------------------------------------------------------------------------

HOOK_PRIMITIVES: tuple[str, ...] = (
    "useState",
    "useEffect",
    "useContext",
    "useReducer",
    "useCallback",
    "useMemo",
    "useRef",
    "useImperativeHandle",
    "useLayoutEffect",
    "useDebugValue",
)

_PRIMARY_HOOKS: frozenset[str] = frozenset({"useState", "useEffect"})
_MEMO_HOOKS: frozenset[str] = frozenset({"useMemo", "useCallback"})

# Markup family
PAIRED_TAG_RE = re.compile(r"<([A-Za-z][A-Za-z0-9]*)\b[^>]*>(.*?)</\1>", re.DOTALL)
SELF_CLOSING_RE = re.compile(r"(?<![\w$.])<\w+[^>]*/>")
CAPITALIZED_TAG_RE = re.compile(r"(?<![\w$.])<([A-Z]\w*)")
FRAGMENT_RE = re.compile(r"<>(.*?)</>", re.DOTALL)

_MARKUP_REGEXES: tuple[re.Pattern[str], ...] = (
    PAIRED_TAG_RE,
    SELF_CLOSING_RE,
    CAPITALIZED_TAG_RE,
    FRAGMENT_RE,
)

_STYLED_MARKUP_RE = re.compile(
    r"\b(?:className|class|style|onClick|onDoubleClick|onPress)\s*="
)
_CONTAINER_TAG_RE = re.compile(r"<div\b")

# Stateful-logic family
# Optional TS type arguments between a hook name and its call paren, one level
# of nesting: useState<string>(...), useReducer<Map<K, V>>(...)
_TYPE_ARGS = r"\s*(?:<[^<>()]*(?:<[^<>()]*>[^<>()]*)*>)?\s*\("

BUILTIN_HOOK_CALL_RE = re.compile(r"\b(" + "|".join(HOOK_PRIMITIVES) + r")" + _TYPE_ARGS)
BUILTIN_HOOK_NAME_RE = re.compile(r"\b(?:" + "|".join(HOOK_PRIMITIVES) + r")\b")
CUSTOM_HOOK_CALL_RE = re.compile(r"\b(use[A-Z]\w*)" + _TYPE_ARGS)
HOOK_DESTRUCTURE_RE = re.compile(
    r"\b(?:const|let|var)\s*(?:\[[^\]]*\]|\{[^}]*\})\s*=\s*(use[A-Z]\w*)" + _TYPE_ARGS
)

COMPLEXITY_CONFIDENCE = 0.8
DISPLAY_LIMIT = 200


@dataclass(frozen=True, slots=True)
class ComplexityIndicator:
    """A weighted regex whose matches add to the complexity score."""

    kind: PatternKind
    weight: int
    regex: re.Pattern[str]


COMPLEXITY_INDICATORS: tuple[ComplexityIndicator, ...] = (
    # Ternary inside a {...} expression slot
    ComplexityIndicator(PatternKind.CONDITIONAL, 2, re.compile(r"\{[^{}]*?\s\?\s")),
    # && short-circuit inside a {...} expression slot
    ComplexityIndicator(PatternKind.CONDITIONAL, 2, re.compile(r"\{[^{}]*?&&")),
    ComplexityIndicator(
        PatternKind.LOOP,
        3,
        re.compile(r"\.(?:map|filter|reduce|forEach|find|findIndex|some|every|flatMap)\s*\("),
    ),
    ComplexityIndicator(PatternKind.EVENT_HANDLER, 1, re.compile(r"\bon[A-Z]\w*\s*=\s*\{")),
    ComplexityIndicator(
        PatternKind.STATE,
        2,
        re.compile(r"\bset(?!Timeout\b|Interval\b|Immediate\b)[A-Z]\w*\s*\("),
    ),
    ComplexityIndicator(
        PatternKind.EFFECT,
        3,
        re.compile(
            r"\buse(?:Layout)?Effect"
            + _TYPE_ARGS
            + r"\s*(?:async\s*)?(?:\([^)]*\)|\w+\s*=>|function\b)"
        ),
    ),
)


# ---------------------------------------------------------------------------
# Local confidence
# ---------------------------------------------------------------------------


def markup_confidence(text: str) -> float:
    """Weight a markup match: styled/clickable 3, bare div 2, nested component 4, else 1."""
    if _STYLED_MARKUP_RE.search(text):
        return 3.0
    if _CONTAINER_TAG_RE.match(text):
        return 2.0
    if len(text) > 1 and text[0] == "<" and text[1].isupper():
        return 4.0
    return 1.0


def hook_confidence(name: str) -> float:
    """Weight a hook call by the primitive it invokes."""
    if name in _PRIMARY_HOOKS:
        return 3.0
    if name in _MEMO_HOOKS or name not in HOOK_PRIMITIVES:
        return 2.0
    return 1.0


def _display(text: str) -> str:
    if len(text) <= DISPLAY_LIMIT:
        return text
    return text[:DISPLAY_LIMIT] + "..."


# ---------------------------------------------------------------------------
# Families
# ---------------------------------------------------------------------------


def scan_markup(text: str) -> list[DetectedPattern]:
    """Match JSX elements: paired tags, self-closing tags, capitalized tags, fragments."""
    patterns: list[DetectedPattern] = []
    for regex in _MARKUP_REGEXES:
        for match in regex.finditer(text):
            matched = match.group(0)
            patterns.append(
                DetectedPattern(
                    kind=PatternKind.JSX,
                    text=_display(matched),
                    confidence=markup_confidence(matched),
                    start=match.start(),
                    end=match.end(),
                )
            )
    return patterns


def scan_hooks(text: str) -> list[DetectedPattern]:
    """Match built-in hook calls, custom ``useXxx`` calls and destructured hook results."""
    patterns: list[DetectedPattern] = []

    for match in BUILTIN_HOOK_CALL_RE.finditer(text):
        patterns.append(_hook_pattern(match, match.group(1)))

    for match in CUSTOM_HOOK_CALL_RE.finditer(text):
        name = match.group(1)
        if name in HOOK_PRIMITIVES:
            continue
        patterns.append(_hook_pattern(match, name))

    for match in HOOK_DESTRUCTURE_RE.finditer(text):
        patterns.append(_hook_pattern(match, match.group(1)))

    return patterns


def _hook_pattern(match: re.Match[str], name: str) -> DetectedPattern:
    return DetectedPattern(
        kind=PatternKind.HOOK,
        text=_display(match.group(0)),
        confidence=hook_confidence(name),
        start=match.start(),
        end=match.end(),
    )


def scan_complexity(text: str) -> list[DetectedPattern]:
    """Match weighted complexity indicators (conditionals, loops, handlers, state, effects)."""
    patterns: list[DetectedPattern] = []
    for indicator in COMPLEXITY_INDICATORS:
        for match in indicator.regex.finditer(text):
            patterns.append(
                DetectedPattern(
                    kind=indicator.kind,
                    text=_display(match.group(0)),
                    confidence=COMPLEXITY_CONFIDENCE,
                    start=match.start(),
                    end=match.end(),
                    weight=indicator.weight,
                )
            )
    return patterns


def scan(text: str) -> list[DetectedPattern]:
    """Run all three families and return their matches in discovery order."""
    return [*scan_markup(text), *scan_hooks(text), *scan_complexity(text)]


def has_markup(text: str) -> bool:
    """True if any paired, self-closing or capitalized tag is present."""
    return bool(
        PAIRED_TAG_RE.search(text)
        or SELF_CLOSING_RE.search(text)
        or CAPITALIZED_TAG_RE.search(text)
    )


def has_hook_call(text: str) -> bool:
    """True if any built-in hook primitive is named, called or not."""
    return BUILTIN_HOOK_NAME_RE.search(text) is not None
