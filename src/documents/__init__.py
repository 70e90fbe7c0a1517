"""Mapping questionnaire answers onto official court form templates."""

from documents.field_mapper import (
    FieldMapping,
    MappingResult,
    MappingValidation,
    map_answers_to_fields,
    validate_mapping,
)
from documents.mapping_tables import SUPPORTED_DOCUMENT_TYPES, get_field_mapping, get_source_fields
from documents.pipeline import (
    GeneratedDocument,
    IncompleteAnswersError,
    UnsupportedDocumentTypeError,
    generate_document,
)
from documents.template_filler import (
    FillReport,
    FillResult,
    FillStatus,
    TemplateError,
    TemplateField,
    TemplateFieldKind,
    TemplateFiller,
    TemplateLoadError,
    TemplateSerializeError,
)

__all__ = [
    "FieldMapping",
    "MappingResult",
    "MappingValidation",
    "map_answers_to_fields",
    "validate_mapping",
    "SUPPORTED_DOCUMENT_TYPES",
    "get_field_mapping",
    "get_source_fields",
    "GeneratedDocument",
    "IncompleteAnswersError",
    "UnsupportedDocumentTypeError",
    "generate_document",
    "FillReport",
    "FillResult",
    "FillStatus",
    "TemplateError",
    "TemplateField",
    "TemplateFieldKind",
    "TemplateFiller",
    "TemplateLoadError",
    "TemplateSerializeError",
]
