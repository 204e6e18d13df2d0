"""Pydantic models and enums shared across detection, extraction and generation."""

from enum import StrEnum

from pydantic import BaseModel


class Category(StrEnum):
    COMPONENT = "component"
    HOOK = "hook"
    UNKNOWN = "unknown"


class PatternKind(StrEnum):
    JSX = "jsx"
    HOOK = "hook"
    STATE = "state"
    EFFECT = "effect"
    EVENT_HANDLER = "event-handler"
    CONDITIONAL = "conditional"
    LOOP = "loop"


class PropType(StrEnum):
    PRIMITIVE = "primitive"
    OBJECT = "object"
    FUNCTION = "function"
    ARRAY = "array"
    UNKNOWN = "unknown"


class UsageKind(StrEnum):
    SIMPLE = "simple"
    OBJECT_ACCESS = "object-access"
    FUNCTION_CALL = "function-call"
    CONDITIONAL = "conditional"
    ARRAY_METHOD = "array-method"


class ExtractionRecommendation(BaseModel):
    should_extract: bool
    category: Category
    confidence: float
    suggested_name: str | None = None
    reason: str


class GeneratedFile(BaseModel):
    """Output handed to the file-writing collaborator."""

    name: str
    category: Category
    path: str
    content: str
    usage: str
    typed: bool
