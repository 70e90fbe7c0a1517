"""Questionnaire Engine.

Core engine for the guided questionnaire: decides which sections and
questions are visible for the current answers, validates answers, and
computes completion progress.

An engine instance owns exactly one answer-set for its lifetime. Create
one engine per session; nothing here is module-global.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Mapping, Optional

from questionnaire.rule_evaluator import evaluate_validation, evaluate_visibility
from questionnaire.schema import Question, Questionnaire, Section
from questionnaire.values import is_empty


@dataclass
class QuestionValidation:
    """Result of validating one question's answer."""
    valid: bool
    errors: List[str] = field(default_factory=list)


@dataclass
class ValidationSummary:
    """Result of validating every visible question."""
    valid: bool
    errors: Dict[str, List[str]] = field(default_factory=dict)  # question id -> messages


@dataclass
class QuestionnaireProgress:
    """Completion progress over the visible sections."""
    total_sections: int
    completed_sections: List[int] = field(default_factory=list)  # indices into visible sections
    answered_questions: List[str] = field(default_factory=list)  # question ids
    percentage: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_sections": self.total_sections,
            "completed_sections": list(self.completed_sections),
            "answered_questions": list(self.answered_questions),
            "percentage": self.percentage,
        }


class QuestionnaireEngine:
    """
    Engine for one in-progress questionnaire session.

    Usage:
        engine = QuestionnaireEngine(schema, {"hasChildren": "no"})
        for section in engine.get_visible_sections():
            questions = engine.get_visible_questions(section.id)

        engine.update_responses({"numberOfChildren": 2})
        summary = engine.validate_all()
    """

    def __init__(self, questionnaire: Questionnaire, responses: Optional[Mapping[str, Any]] = None):
        self._questionnaire = questionnaire
        self._responses: Dict[str, Any] = dict(responses or {})

    @property
    def questionnaire(self) -> Questionnaire:
        return self._questionnaire

    # -------------------------------------------------------------------------
    # Visibility
    # -------------------------------------------------------------------------

    def get_visible_sections(self) -> List[Section]:
        """Get sections visible under the current answers, in schema order."""
        return [
            section for section in self._questionnaire.sections
            if evaluate_visibility(section.visibility, self._responses)
        ]

    def get_visible_questions(self, section_id: str) -> List[Question]:
        """Get visible questions of a section; unknown section ids yield []."""
        section = self._questionnaire.find_section(section_id)
        if section is None:
            return []
        return self._visible_questions(section)

    def _visible_questions(self, section: Section) -> List[Question]:
        return [
            question for question in section.questions
            if evaluate_visibility(question.visibility, self._responses)
        ]

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def validate_question(self, question: Question, value: Any) -> QuestionValidation:
        """Run every validation rule in declared order, collecting all failures."""
        errors = []
        for rule in question.validation:
            message = evaluate_validation(rule, value, question)
            if message:
                errors.append(message)
        return QuestionValidation(valid=not errors, errors=errors)

    def validate_all(self) -> ValidationSummary:
        """Validate the current answer of every visible question."""
        errors: Dict[str, List[str]] = {}
        for section in self.get_visible_sections():
            for question in self._visible_questions(section):
                result = self.validate_question(question, self._responses.get(question.field_name))
                if not result.valid:
                    errors[question.id] = result.errors
        return ValidationSummary(valid=not errors, errors=errors)

    # -------------------------------------------------------------------------
    # Progress
    # -------------------------------------------------------------------------

    def get_progress(self) -> QuestionnaireProgress:
        """
        Compute completion progress.

        A visible section is complete when it has at least one visible
        required question and all of them hold a non-empty value. Validity
        is not considered here, so a 100% questionnaire may still fail
        validate_all().
        """
        visible_sections = self.get_visible_sections()
        completed_sections: List[int] = []
        answered_questions: List[str] = []

        for index, section in enumerate(visible_sections):
            visible_questions = self._visible_questions(section)

            for question in visible_questions:
                value = self._responses.get(question.field_name)
                if not is_empty(value) and self.validate_question(question, value).valid:
                    answered_questions.append(question.id)

            required = [q for q in visible_questions if q.required]
            if required and all(
                not is_empty(self._responses.get(q.field_name)) for q in required
            ):
                completed_sections.append(index)

        total = len(visible_sections)
        percentage = 0
        if total > 0:
            ratio = Decimal(len(completed_sections) * 100) / Decimal(total)
            percentage = int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP))

        return QuestionnaireProgress(
            total_sections=total,
            completed_sections=completed_sections,
            answered_questions=answered_questions,
            percentage=percentage,
        )

    def get_missing_required_questions(self) -> List[Question]:
        """Get visible required questions that have no answer yet."""
        missing = []
        for section in self.get_visible_sections():
            for question in self._visible_questions(section):
                if question.required and is_empty(self._responses.get(question.field_name)):
                    missing.append(question)
        return missing

    def is_complete(self) -> bool:
        """Check whether every visible required question is answered."""
        return not self.get_missing_required_questions()

    # -------------------------------------------------------------------------
    # Responses
    # -------------------------------------------------------------------------

    def update_responses(self, responses: Mapping[str, Any]) -> None:
        """Shallow-merge new answers; existing keys are never removed."""
        self._responses.update(responses)

    def get_responses(self) -> Dict[str, Any]:
        """Get a copy of the current answers."""
        return dict(self._responses)

    def get_value(self, field_name: str) -> Optional[Any]:
        """Get the current answer for a field."""
        return self._responses.get(field_name)
