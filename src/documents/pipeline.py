"""
Document generation pipeline.

Ties the mapper and the filler together for one supported document type:

    validate_mapping -> map_answers_to_fields -> resolve template -> fill

A document with missing required answers is still generated (with
warnings) unless the caller asks for a complete one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

from config.logging_config import get_logger, log_context
from config.settings import Settings, get_settings
from documents.field_mapper import map_answers_to_fields, validate_mapping
from documents.mapping_tables import SUPPORTED_DOCUMENT_TYPES, get_field_mapping
from documents.template_filler import FillReport, TemplateFiller, TemplateHandle, TemplateLoadError

logger = get_logger(__name__)


class UnsupportedDocumentTypeError(ValueError):
    """No mapping table exists for the requested document type."""

    def __init__(self, document_type: str):
        self.document_type = document_type
        super().__init__(
            f"Unsupported document type: {document_type} "
            f"(supported: {', '.join(SUPPORTED_DOCUMENT_TYPES)})"
        )


class IncompleteAnswersError(Exception):
    """Required answers are missing and a complete document was requested."""

    def __init__(self, document_type: str, missing_fields: List[str]):
        self.document_type = document_type
        self.missing_fields = list(missing_fields)
        super().__init__(
            f"Cannot generate {document_type}: missing required fields "
            f"{', '.join(self.missing_fields)}"
        )


@dataclass
class GeneratedDocument:
    """A filled document plus everything a caller needs to warn the user."""
    document_type: str
    content: bytes
    fill_report: FillReport
    missing_required_fields: List[str] = field(default_factory=list)

    @property
    def warnings(self) -> List[str]:
        return [
            f"Missing required field: {name}" for name in self.missing_required_fields
        ] + self.fill_report.warnings

    @property
    def is_complete(self) -> bool:
        return not self.missing_required_fields


def generate_document(
    document_type: str,
    answers: Mapping[str, Any],
    template: Optional[TemplateHandle] = None,
    *,
    settings: Optional[Settings] = None,
    require_complete: bool = False,
    flatten: Optional[bool] = None,
) -> GeneratedDocument:
    """
    Generate one court document from questionnaire answers.

    Args:
        document_type: One of SUPPORTED_DOCUMENT_TYPES
        answers: Answer-set keyed by questionnaire field name
        template: Template bytes, path or file; defaults to the configured file
        settings: Settings to resolve templates from; defaults to get_settings()
        require_complete: Raise instead of generating when required answers are missing
        flatten: Flatten the filled form; defaults to settings.flatten_forms

    Raises:
        UnsupportedDocumentTypeError: Unknown document type
        IncompleteAnswersError: require_complete and required answers are missing
        TemplateLoadError: The template cannot be found or read
        TemplateSerializeError: The filled document cannot be written
    """
    mappings = get_field_mapping(document_type)
    if not mappings:
        raise UnsupportedDocumentTypeError(document_type)

    settings = settings or get_settings()

    with log_context(document_type=document_type):
        validation = validate_mapping(answers, mappings)
        if not validation.valid:
            if require_complete:
                raise IncompleteAnswersError(document_type, validation.missing_required_fields)
            logger.warning(
                f"Generating {document_type} with missing required fields",
                extra={'extra_data': {'missing': validation.missing_required_fields}}
            )

        mapped = map_answers_to_fields(answers, mappings)

        template_id = document_type
        if template is None:
            template = settings.template_path(document_type)
            if template is None:
                raise TemplateLoadError(document_type, "no template configured")
            template_id = str(template)

        if flatten is None:
            flatten = settings.flatten_forms

        filler = TemplateFiller(need_appearances=settings.need_appearances, flatten=flatten)
        result = filler.fill(template, mapped.fields, template_id=template_id)

    document = GeneratedDocument(
        document_type=document_type,
        content=result.content,
        fill_report=result.report,
        missing_required_fields=validation.missing_required_fields,
    )

    logger.info(
        f"Generated {document_type}",
        extra={'extra_data': {
            'complete': document.is_complete,
            'filled': len(result.report.filled),
            'warnings': len(document.warnings),
        }}
    )

    return document
