"""
Field Mapper.

Converts a flat questionnaire answer-set into the named fields of one
output document, using a static per-document mapping table.

Mapping is deterministic and side-effect free apart from logging: the same
answers and table always give the same fields and the same missing list.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from questionnaire.values import is_empty

logger = logging.getLogger(__name__)

_NO_DEFAULT = object()


@dataclass(frozen=True)
class FieldMapping:
    """Maps one answer field to one named field of an output document."""
    output_field: str
    source_field: str
    transform: Optional[Callable[[Any], Any]] = None
    default_value: Any = _NO_DEFAULT
    required: bool = False
    section: Optional[str] = None  # questionnaire section the source is asked in

    @property
    def has_default(self) -> bool:
        return self.default_value is not _NO_DEFAULT


@dataclass
class MappingResult:
    """Mapped output fields plus the required fields that could not be mapped."""
    fields: Dict[str, Any] = field(default_factory=dict)
    missing_required: List[str] = field(default_factory=list)  # output field names

    @property
    def warnings(self) -> List[str]:
        return [f"Missing required field: {name}" for name in self.missing_required]


@dataclass
class MappingValidation:
    """Presence check of a mapping table's required sources."""
    valid: bool
    missing_required_fields: List[str] = field(default_factory=list)  # output field names


def map_answers_to_fields(
    answers: Mapping[str, Any], mappings: Sequence[FieldMapping]
) -> MappingResult:
    """
    Map answers to document fields, in table order.

    A present source value is transformed (or passed through). An absent
    source falls back to the entry's default; absent with no default is
    omitted, and recorded as missing when the entry is required.

    Args:
        answers: Answer-set keyed by questionnaire field name
        mappings: The document's mapping table

    Returns:
        MappingResult with output fields and missing required field names
    """
    result = MappingResult()

    for mapping in mappings:
        value = answers.get(mapping.source_field)

        if value is not None:
            result.fields[mapping.output_field] = (
                mapping.transform(value) if mapping.transform else value
            )
        elif mapping.has_default:
            result.fields[mapping.output_field] = mapping.default_value
        elif mapping.required:
            logger.warning(
                f"Missing required field: {mapping.output_field} (from {mapping.source_field})"
            )
            result.missing_required.append(mapping.output_field)

    return result


def validate_mapping(
    answers: Mapping[str, Any], mappings: Sequence[FieldMapping]
) -> MappingValidation:
    """
    Check that every required mapping entry has a non-empty source value.

    Independent of transforms and defaults, so callers can reject early
    with a precise list before filling a template.
    """
    missing = [
        mapping.output_field
        for mapping in mappings
        if mapping.required and is_empty(answers.get(mapping.source_field))
    ]
    return MappingValidation(valid=not missing, missing_required_fields=missing)


def get_source_fields(mappings: Sequence[FieldMapping]) -> List[str]:
    """List the answer fields a mapping table reads, without duplicates."""
    seen: Dict[str, None] = {}
    for mapping in mappings:
        seen.setdefault(mapping.source_field, None)
    return list(seen)
