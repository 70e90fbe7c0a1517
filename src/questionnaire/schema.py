"""Questionnaire Schema.

Declarative description of a guided questionnaire: sections, questions,
per-question validation rules and conditional-visibility rules.

Schemas are authored or seeded outside this package (usually as JSON
stored alongside the questionnaire type) and are read-only at runtime.
The ``from_dict`` constructors accept both the camelCase keys used by the
authored JSON and snake_case keys.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Union


class InputKind(str, Enum):
    """Kinds of answer inputs."""
    TEXT = "text"
    TEXTAREA = "textarea"
    NUMBER = "number"
    DATE = "date"
    EMAIL = "email"
    PHONE = "phone"
    ADDRESS = "address"
    SINGLE_CHOICE = "single_choice"
    MULTI_CHOICE = "multi_choice"
    YES_NO = "yesno"


# Aliases used by the authored schemas for the choice kinds
_INPUT_KIND_ALIASES = {
    "select": InputKind.SINGLE_CHOICE,
    "radio": InputKind.SINGLE_CHOICE,
    "checkbox": InputKind.MULTI_CHOICE,
    "yes_no": InputKind.YES_NO,
}


class VisibilityOperator(str, Enum):
    """Operators a visibility rule may apply to its target field."""
    EQUALS = "equals"
    NOT_EQUALS = "notEquals"
    CONTAINS = "contains"
    GREATER_THAN = "greaterThan"
    LESS_THAN = "lessThan"
    IS_EMPTY = "isEmpty"
    IS_NOT_EMPTY = "isNotEmpty"


class ValidationKind(str, Enum):
    """Kinds of per-question validation rules."""
    REQUIRED = "required"
    MIN = "min"
    MAX = "max"
    PATTERN = "pattern"
    EMAIL = "email"
    DATE = "date"
    CUSTOM = "custom"


def _parse_enum(enum_cls, raw: Any, aliases: Optional[Dict[str, Any]] = None):
    """Return the enum member for raw, or raw itself if unrecognized."""
    if isinstance(raw, enum_cls):
        return raw
    if aliases and raw in aliases:
        return aliases[raw]
    try:
        return enum_cls(raw)
    except ValueError:
        return raw


@dataclass(frozen=True)
class VisibilityRule:
    """Show the owning section/question only while the rule holds."""
    field: str
    operator: Union[VisibilityOperator, str]
    value: Any = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VisibilityRule":
        return cls(
            field=data.get("field") or data.get("target_field", ""),
            operator=_parse_enum(VisibilityOperator, data.get("operator")),
            value=data.get("value"),
        )


@dataclass(frozen=True)
class ValidationRule:
    """A single constraint on a question's answer."""
    kind: Union[ValidationKind, str]
    value: Any = None
    message: Optional[str] = None
    validator: Optional[Callable[[Any], bool]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ValidationRule":
        return cls(
            kind=_parse_enum(ValidationKind, data.get("type") or data.get("kind")),
            value=data.get("value"),
            message=data.get("message"),
            validator=data.get("validator"),
        )


@dataclass(frozen=True)
class QuestionOption:
    """An option for choice questions."""
    value: Any
    label: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QuestionOption":
        value = data.get("value")
        return cls(value=value, label=data.get("label", str(value)))


@dataclass(frozen=True)
class Question:
    """A single question in a section."""
    id: str
    kind: Union[InputKind, str]
    field_name: str
    label: str = ""
    required: bool = False
    validation: List[ValidationRule] = field(default_factory=list)
    visibility: List[VisibilityRule] = field(default_factory=list)
    options: List[QuestionOption] = field(default_factory=list)

    # Display properties
    description: Optional[str] = None
    help_text: Optional[str] = None
    placeholder: Optional[str] = None
    default_value: Optional[Any] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Question":
        question_id = data["id"]
        return cls(
            id=question_id,
            kind=_parse_enum(InputKind, data.get("type") or data.get("kind"), _INPUT_KIND_ALIASES),
            field_name=data.get("fieldName") or data.get("field_name") or question_id,
            label=data.get("label", ""),
            required=bool(data.get("required", False)),
            validation=[
                ValidationRule.from_dict(r) for r in data.get("validation") or []
            ],
            visibility=[
                VisibilityRule.from_dict(r)
                for r in data.get("conditionalLogic") or data.get("visibility") or []
            ],
            options=[QuestionOption.from_dict(o) for o in data.get("options") or []],
            description=data.get("description"),
            help_text=data.get("helpText") or data.get("help_text"),
            placeholder=data.get("placeholder"),
            default_value=data.get("defaultValue", data.get("default_value")),
        )

    @property
    def display_name(self) -> str:
        return self.label or self.id


@dataclass(frozen=True)
class Section:
    """An ordered group of questions, optionally conditional."""
    id: str
    title: str
    questions: List[Question] = field(default_factory=list)
    visibility: List[VisibilityRule] = field(default_factory=list)
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Section":
        return cls(
            id=data["id"],
            title=data.get("title", ""),
            questions=[Question.from_dict(q) for q in data.get("questions") or []],
            visibility=[
                VisibilityRule.from_dict(r)
                for r in data.get("conditionalLogic") or data.get("visibility") or []
            ],
            description=data.get("description"),
        )


@dataclass(frozen=True)
class Questionnaire:
    """A complete questionnaire schema."""
    id: str
    name: str
    sections: List[Section] = field(default_factory=list)
    type: Optional[str] = None
    description: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Questionnaire":
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            sections=[Section.from_dict(s) for s in data.get("sections") or []],
            type=data.get("type"),
            description=data.get("description"),
            metadata=dict(data.get("metadata") or {}),
        )

    def find_section(self, section_id: str) -> Optional[Section]:
        """Find a section by id."""
        for section in self.sections:
            if section.id == section_id:
                return section
        return None

    def find_question(self, question_id: str) -> Optional[Question]:
        """Find a question by id across all sections."""
        for section in self.sections:
            for question in section.questions:
                if question.id == question_id:
                    return question
        return None
