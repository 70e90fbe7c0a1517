"""
Rule Evaluator.

Stateless evaluation of conditional-visibility rules and per-question
validation rules. Rules are a closed set of operators applied to a single
field and ANDed together; there is no OR/NOT composition.

Unrecognized operators and validation kinds never block the user: they
evaluate as passing.
"""

from __future__ import annotations

import logging
import math
import re
from datetime import date, datetime
from typing import Any, Iterable, Mapping, Optional

from questionnaire.schema import (
    Question,
    ValidationKind,
    ValidationRule,
    VisibilityOperator,
    VisibilityRule,
)
from questionnaire.values import is_empty, strict_equals, stringify, to_number

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

DATE_FORMATS = [
    "%m/%d/%Y", "%m-%d-%Y", "%Y/%m/%d", "%m/%d/%y",
    "%B %d, %Y", "%b %d, %Y", "%B %d %Y", "%b %d %Y", "%d %B %Y", "%d %b %Y",
]


# =============================================================================
# VISIBILITY
# =============================================================================

def evaluate_visibility(
    rules: Optional[Iterable[VisibilityRule]], answers: Mapping[str, Any]
) -> bool:
    """
    Evaluate visibility rules against the current answers.

    Args:
        rules: Rules attached to a section or question (may be empty/None)
        answers: Current answer-set keyed by field name

    Returns:
        True if every rule holds (an empty rule list is always visible)
    """
    if not rules:
        return True
    return all(evaluate_condition(rule, answers.get(rule.field)) for rule in rules)


def evaluate_condition(rule: VisibilityRule, value: Any) -> bool:
    """Evaluate one rule against the target field's current value."""
    operator = rule.operator

    if operator == VisibilityOperator.EQUALS:
        return strict_equals(value, rule.value)

    if operator == VisibilityOperator.NOT_EQUALS:
        return not strict_equals(value, rule.value)

    if operator == VisibilityOperator.CONTAINS:
        if value is None:
            return False
        if isinstance(value, (list, tuple)):
            return any(strict_equals(item, rule.value) for item in value)
        return stringify(rule.value) in stringify(value)

    if operator == VisibilityOperator.GREATER_THAN:
        return _compare(value, rule.value, lambda a, b: a > b)

    if operator == VisibilityOperator.LESS_THAN:
        return _compare(value, rule.value, lambda a, b: a < b)

    if operator == VisibilityOperator.IS_EMPTY:
        return is_empty(value)

    if operator == VisibilityOperator.IS_NOT_EMPTY:
        return not is_empty(value)

    logger.debug(f"Unknown visibility operator {operator!r} on field {rule.field!r}, treating as visible")
    return True


def _compare(value: Any, target: Any, op) -> bool:
    left = to_number(value)
    right = to_number(target)
    if math.isnan(left) or math.isnan(right):
        return False
    return op(left, right)


# =============================================================================
# VALIDATION
# =============================================================================

def evaluate_validation(
    rule: ValidationRule, value: Any, question: Question
) -> Optional[str]:
    """
    Evaluate a validation rule against a candidate value.

    Args:
        rule: The rule to apply
        value: Candidate answer
        question: The question the rule belongs to

    Returns:
        The error message, or None when the rule passes
    """
    kind = rule.kind
    label = question.display_name

    if kind == ValidationKind.REQUIRED:
        if question.required and is_empty(value):
            return rule.message or f"{label} is required"
        return None

    if kind == ValidationKind.MIN:
        if is_empty(value):
            return None
        number = to_number(value)
        if math.isnan(number) or number < to_number(rule.value):
            return rule.message or f"{label} must be at least {rule.value}"
        return None

    if kind == ValidationKind.MAX:
        if is_empty(value):
            return None
        number = to_number(value)
        if math.isnan(number) or number > to_number(rule.value):
            return rule.message or f"{label} must be at most {rule.value}"
        return None

    if kind == ValidationKind.PATTERN:
        if is_empty(value) or is_empty(rule.value):
            return None
        try:
            pattern = re.compile(str(rule.value))
        except re.error as e:
            logger.warning(f"Invalid pattern {rule.value!r} on question {question.id}: {e}")
            return None
        if not pattern.search(stringify(value)):
            return rule.message or f"{label} format is invalid"
        return None

    if kind == ValidationKind.EMAIL:
        if is_empty(value):
            return None
        if not EMAIL_PATTERN.match(stringify(value)):
            return rule.message or f"{label} must be a valid email address"
        return None

    if kind == ValidationKind.DATE:
        if is_empty(value):
            return None
        if parse_date(value) is None:
            return rule.message or f"{label} must be a valid date"
        return None

    if kind == ValidationKind.CUSTOM:
        if rule.validator is None:
            return None
        try:
            passed = rule.validator(value)
        except Exception as e:
            logger.warning(f"Custom validator on question {question.id} raised: {e}")
            passed = False
        if not passed:
            return rule.message or f"{label} is invalid"
        return None

    logger.debug(f"Unknown validation kind {kind!r} on question {question.id}, skipping")
    return None


def parse_date(value: Any) -> Optional[date]:
    """Parse a calendar date from the formats the questionnaire accepts."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, bool) or not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        pass

    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None

