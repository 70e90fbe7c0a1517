"""Dynamic Questionnaire Module.

Schema-driven questionnaire engine:
- Declarative schema (sections, questions, rules)
- Conditional visibility and validation rule evaluation
- Per-session engine with validation and progress tracking
"""

from questionnaire.schema import (
    InputKind,
    Question,
    QuestionOption,
    Questionnaire,
    Section,
    ValidationKind,
    ValidationRule,
    VisibilityOperator,
    VisibilityRule,
)
from questionnaire.rule_evaluator import (
    evaluate_condition,
    evaluate_validation,
    evaluate_visibility,
)
from questionnaire.engine import (
    QuestionnaireEngine,
    QuestionnaireProgress,
    QuestionValidation,
    ValidationSummary,
)

__all__ = [
    # Schema
    "InputKind",
    "Question",
    "QuestionOption",
    "Questionnaire",
    "Section",
    "ValidationKind",
    "ValidationRule",
    "VisibilityOperator",
    "VisibilityRule",
    # Rule evaluation
    "evaluate_condition",
    "evaluate_validation",
    "evaluate_visibility",
    # Engine
    "QuestionnaireEngine",
    "QuestionnaireProgress",
    "QuestionValidation",
    "ValidationSummary",
]
