"""
Template Filler

Fills the AcroForm fields of an official PDF template with mapped values
and serializes the result.

Filling is best-effort: a value naming a field the template lacks, a field
of an unsupported kind, or a value the field cannot accept is recorded in
the FillReport and logged, and the remaining fields are still filled.
Only a template that cannot be read, or a result that cannot be written,
aborts the fill.

A flattened fill draws every field's appearance into the page content and
removes the form, so the output can no longer be edited.
"""

from __future__ import annotations

import io
import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, BinaryIO, Dict, List, Optional, Set, Union

from pypdf import PdfReader, PdfWriter
from pypdf.generic import NameObject, TextStringObject

from questionnaire.values import stringify

logger = logging.getLogger(__name__)

TemplateHandle = Union[bytes, str, os.PathLike, BinaryIO]

# AcroForm field flags (PDF 32000-1:2008, tables 226 and 230)
FF_RADIO = 1 << 15
FF_PUSHBUTTON = 1 << 16
FF_MULTISELECT = 1 << 21

OFF_STATE = "/Off"

FALSE_STRINGS = {"", "no", "false", "off", "0", "n", "unchecked"}


class TemplateFieldKind(str, Enum):
    """Kinds of AcroForm field the filler distinguishes."""
    TEXT = "text"
    CHECKBOX = "checkbox"
    RADIO = "radio"
    CHOICE = "choice"
    MULTI_CHOICE = "multi_choice"
    PUSHBUTTON = "pushbutton"
    SIGNATURE = "signature"
    UNKNOWN = "unknown"


SUPPORTED_KINDS = {
    TemplateFieldKind.TEXT,
    TemplateFieldKind.CHECKBOX,
    TemplateFieldKind.RADIO,
    TemplateFieldKind.CHOICE,
    TemplateFieldKind.MULTI_CHOICE,
}


class FillStatus(str, Enum):
    """Outcome of filling one field."""
    FILLED = "filled"
    SKIPPED_UNKNOWN_FIELD = "skipped_unknown_field"
    SKIPPED_UNSUPPORTED_KIND = "skipped_unsupported_kind"
    FAILED = "failed"


class TemplateError(Exception):
    """A template could not be used at all."""

    def __init__(self, template_id: str, reason: str):
        self.template_id = template_id
        self.reason = reason
        super().__init__(f"{template_id}: {reason}")


class TemplateLoadError(TemplateError):
    """The template is missing, unreadable or not a PDF."""


class TemplateSerializeError(TemplateError):
    """The filled document could not be written out."""


@dataclass
class TemplateField:
    """A form field found on a template."""
    name: str
    kind: TemplateFieldKind
    options: List[str] = field(default_factory=list)
    value: Any = None


@dataclass
class FieldOutcome:
    field: str
    status: FillStatus
    kind: Optional[TemplateFieldKind] = None
    message: str = ""


@dataclass
class FillReport:
    """Per-field outcomes of one fill, in the order the values were given."""
    template_id: str
    outcomes: List[FieldOutcome] = field(default_factory=list)

    def _with_status(self, *statuses: FillStatus) -> List[FieldOutcome]:
        return [o for o in self.outcomes if o.status in statuses]

    @property
    def filled(self) -> List[str]:
        return [o.field for o in self._with_status(FillStatus.FILLED)]

    @property
    def skipped(self) -> List[FieldOutcome]:
        return self._with_status(
            FillStatus.SKIPPED_UNKNOWN_FIELD, FillStatus.SKIPPED_UNSUPPORTED_KIND
        )

    @property
    def failed(self) -> List[FieldOutcome]:
        return self._with_status(FillStatus.FAILED)

    @property
    def warnings(self) -> List[str]:
        return [f"{o.field}: {o.message}" for o in self.outcomes if o.status != FillStatus.FILLED]

    @property
    def is_clean(self) -> bool:
        return all(o.status == FillStatus.FILLED for o in self.outcomes)


@dataclass
class FillResult:
    content: bytes
    report: FillReport


def _options_of(field_data: Dict[str, Any], kind: TemplateFieldKind) -> List[str]:
    if kind in (TemplateFieldKind.CHECKBOX, TemplateFieldKind.RADIO):
        states = field_data.get("/_States_") or []
        return [str(s).lstrip("/") for s in states if str(s) != OFF_STATE]
    if kind in (TemplateFieldKind.CHOICE, TemplateFieldKind.MULTI_CHOICE):
        options = []
        for opt in field_data.get("/Opt") or field_data.get("/_States_") or []:
            # [export, display] pairs or bare strings
            if isinstance(opt, (list, tuple)) and opt:
                options.append(str(opt[0]))
            else:
                options.append(str(opt))
        return options
    return []


def _kind_of(field_data: Dict[str, Any]) -> TemplateFieldKind:
    field_type = field_data.get("/FT")
    flags = int(field_data.get("/Ff", 0) or 0)

    if field_type == "/Tx":
        return TemplateFieldKind.TEXT
    if field_type == "/Btn":
        if flags & FF_PUSHBUTTON:
            return TemplateFieldKind.PUSHBUTTON
        if flags & FF_RADIO:
            return TemplateFieldKind.RADIO
        return TemplateFieldKind.CHECKBOX
    if field_type == "/Ch":
        if flags & FF_MULTISELECT:
            return TemplateFieldKind.MULTI_CHOICE
        return TemplateFieldKind.CHOICE
    if field_type == "/Sig":
        return TemplateFieldKind.SIGNATURE
    return TemplateFieldKind.UNKNOWN


def _qualified_name(annotation: Any) -> str:
    parts = []
    node = annotation
    while node is not None:
        if "/T" in node:
            parts.append(str(node["/T"]))
        parent = node.get("/Parent")
        node = parent.get_object() if parent is not None else None
    return ".".join(reversed(parts))


def is_checked(value: Any) -> bool:
    """Truthiness of a value destined for a checkbox."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, (list, tuple, set)):
        return len(value) > 0
    return str(value).strip().lower() not in FALSE_STRINGS


def _match_option(value: Any, options: List[str]) -> Optional[str]:
    wanted = stringify(value)
    if wanted in options:
        return wanted
    return None


class TemplateFiller:
    """
    Fills PDF AcroForm templates.

    Stateless apart from its options; one instance may fill any number of
    documents, concurrently.
    """

    def __init__(self, need_appearances: bool = True, flatten: bool = False):
        self.need_appearances = need_appearances
        self.flatten = flatten

    def _load(self, template: TemplateHandle, template_id: str) -> PdfReader:
        try:
            if isinstance(template, (bytes, bytearray)):
                return PdfReader(io.BytesIO(template))
            return PdfReader(template)
        except Exception as e:
            logger.error(f"Failed to load template {template_id}: {e}")
            raise TemplateLoadError(template_id, str(e)) from e

    @staticmethod
    def _template_id(template: TemplateHandle, template_id: Optional[str]) -> str:
        if template_id:
            return template_id
        if isinstance(template, (str, os.PathLike)):
            return os.fspath(template)
        return "<template>"

    def _read_fields(self, reader: PdfReader, template_id: str) -> Dict[str, Dict[str, Any]]:
        try:
            return dict(reader.get_fields() or {})
        except Exception as e:
            raise TemplateLoadError(template_id, f"unreadable form fields: {e}") from e

    def inspect(self, template: TemplateHandle, template_id: Optional[str] = None) -> List[TemplateField]:
        """List the form fields of a template with their kinds and options."""
        template_id = self._template_id(template, template_id)
        reader = self._load(template, template_id)

        return [
            TemplateField(
                name=name,
                kind=_kind_of(data),
                options=_options_of(data, _kind_of(data)),
                value=data.get("/V"),
            )
            for name, data in self._read_fields(reader, template_id).items()
        ]

    def _field_pages(self, writer: PdfWriter) -> Dict[str, Set[int]]:
        pages: Dict[str, Set[int]] = {}
        for index, page in enumerate(writer.pages):
            for annot in page.get("/Annots") or []:
                annotation = annot.get_object()
                if annotation.get("/Subtype") != "/Widget":
                    continue
                pages.setdefault(_qualified_name(annotation), set()).add(index)
        return pages

    def _pdf_value(self, kind: TemplateFieldKind, value: Any, options: List[str]) -> Any:
        """Convert a mapped value to what the field accepts; ValueError if it cannot."""
        if kind == TemplateFieldKind.TEXT:
            return stringify(value)

        if kind == TemplateFieldKind.CHECKBOX:
            if not is_checked(value):
                return OFF_STATE
            on_state = options[0] if options else "Yes"
            return f"/{on_state}"

        if kind == TemplateFieldKind.RADIO:
            selected = _match_option(value, options)
            if selected is None:
                raise ValueError(f"{stringify(value)!r} is not one of {options}")
            return f"/{selected}"

        if kind == TemplateFieldKind.CHOICE:
            if not options:
                return stringify(value)
            selected = _match_option(value, options)
            if selected is None:
                raise ValueError(f"{stringify(value)!r} is not one of {options}")
            return selected

        if kind == TemplateFieldKind.MULTI_CHOICE:
            values = value if isinstance(value, (list, tuple)) else [value]
            selected = []
            for item in values:
                match = _match_option(item, options) if options else stringify(item)
                if match is None:
                    raise ValueError(f"{stringify(item)!r} is not one of {options}")
                selected.append(match)
            return selected

        raise ValueError(f"unsupported field kind {kind.value}")

    def _flatten(
        self,
        writer: PdfWriter,
        template_fields: Dict[str, Dict[str, Any]],
        field_pages: Dict[str, Set[int]],
        written: Dict[str, Any],
    ) -> None:
        """Draw each field's current appearance into its page, then drop the form."""
        values: Dict[str, Any] = {}
        radio_values: Dict[str, str] = {}
        for name, data in template_fields.items():
            kind = _kind_of(data)
            if kind not in SUPPORTED_KINDS or name not in field_pages:
                continue
            value = written[name] if name in written else data.get("/V")
            if kind in (TemplateFieldKind.CHECKBOX, TemplateFieldKind.RADIO):
                values[name] = str(value) if value else OFF_STATE
                if kind == TemplateFieldKind.RADIO:
                    radio_values[name] = values[name]
            elif kind == TemplateFieldKind.MULTI_CHOICE:
                if isinstance(value, (list, tuple)):
                    values[name] = [str(v) for v in value]
                else:
                    values[name] = [str(value)] if value else []
            else:
                values[name] = "" if value is None else str(value)

        for index, page in enumerate(writer.pages):
            page_values = {
                name: value for name, value in values.items()
                if index in field_pages[name]
            }
            page_values.update(self._detach_radio_widgets(page, index, radio_values))
            if page_values:
                writer.update_page_form_field_values(
                    page, page_values, auto_regenerate=False, flatten=True
                )

        writer.remove_annotations(subtypes=["/Widget"])
        if "/AcroForm" in writer.root_object:
            del writer.root_object["/AcroForm"]

    @staticmethod
    def _detach_radio_widgets(page: Any, index: int, radio_values: Dict[str, str]) -> Dict[str, str]:
        """
        Name each radio widget on the page as a field of its own.

        pypdf names a flattened appearance after its field, so the widgets of
        one group would all be drawn with the first widget's appearance.
        Returns the selected state keyed by each widget's new name.
        """
        detached: Dict[str, str] = {}
        for position, annot in enumerate(page.get("/Annots") or []):
            annotation = annot.get_object()
            if annotation.get("/Subtype") != "/Widget" or "/T" in annotation:
                continue
            group = _qualified_name(annotation)
            if group not in radio_values:
                continue
            key = f"{group}_{index}_{position}"
            annotation[NameObject("/T")] = TextStringObject(key)
            annotation[NameObject("/FT")] = NameObject("/Btn")
            detached[key] = radio_values[group]
        return detached

    def fill(
        self,
        template: TemplateHandle,
        fields: Dict[str, Any],
        template_id: Optional[str] = None,
        flatten: Optional[bool] = None,
    ) -> FillResult:
        """
        Fill a template with field values.

        Args:
            template: PDF bytes, a path, or a binary file object
            fields: Values keyed by template field name
            template_id: Name used in logs and errors; defaults to the path
            flatten: Burn values into the page and drop the form; defaults
                to the filler's setting

        Returns:
            FillResult with the filled PDF bytes and the per-field report

        Raises:
            TemplateLoadError: If the template cannot be read
            TemplateSerializeError: If the filled document cannot be written
        """
        template_id = self._template_id(template, template_id)
        reader = self._load(template, template_id)
        template_fields = self._read_fields(reader, template_id)

        try:
            writer = PdfWriter(clone_from=reader)
        except Exception as e:
            raise TemplateLoadError(template_id, f"cannot copy template: {e}") from e

        field_pages = self._field_pages(writer)
        report = FillReport(template_id=template_id)
        written: Dict[str, Any] = {}

        for name, value in fields.items():
            outcome = self._fill_one(writer, template_fields, field_pages, written, name, value, template_id)
            report.outcomes.append(outcome)

        if flatten is None:
            flatten = self.flatten
        if flatten:
            try:
                self._flatten(writer, template_fields, field_pages, written)
            except Exception as e:
                logger.error(f"Failed to flatten template {template_id}: {e}")
                raise TemplateSerializeError(template_id, f"cannot flatten: {e}") from e
        else:
            writer.set_need_appearances_writer(self.need_appearances)

        buffer = io.BytesIO()
        try:
            writer.write(buffer)
        except Exception as e:
            logger.error(f"Failed to write filled template {template_id}: {e}")
            raise TemplateSerializeError(template_id, str(e)) from e

        logger.info(
            f"Filled {len(report.filled)}/{len(fields)} fields on {template_id}",
            extra={'extra_data': {
                'template': template_id,
                'filled': len(report.filled),
                'skipped': len(report.skipped),
                'failed': len(report.failed),
                'flattened': flatten,
            }}
        )

        return FillResult(content=buffer.getvalue(), report=report)

    def _fill_one(
        self,
        writer: PdfWriter,
        template_fields: Dict[str, Dict[str, Any]],
        field_pages: Dict[str, Set[int]],
        written: Dict[str, Any],
        name: str,
        value: Any,
        template_id: str,
    ) -> FieldOutcome:
        data = template_fields.get(name)
        if data is None:
            return self._skip(
                FieldOutcome(name, FillStatus.SKIPPED_UNKNOWN_FIELD, message="field not found on template"),
                template_id,
            )

        kind = _kind_of(data)
        if kind not in SUPPORTED_KINDS:
            return self._skip(
                FieldOutcome(name, FillStatus.SKIPPED_UNSUPPORTED_KIND, kind, f"unsupported field kind {kind.value}"),
                template_id,
            )

        try:
            pdf_value = self._pdf_value(kind, value, _options_of(data, kind))
            pages = field_pages.get(name)
            if not pages:
                raise ValueError("field has no widget on any page")
            for index in sorted(pages):
                writer.update_page_form_field_values(
                    writer.pages[index], {name: pdf_value}, auto_regenerate=False
                )
            written[name] = pdf_value
        except Exception as e:
            return self._skip(FieldOutcome(name, FillStatus.FAILED, kind, str(e)), template_id)

        return FieldOutcome(name, FillStatus.FILLED, kind)

    @staticmethod
    def _skip(outcome: FieldOutcome, template_id: str) -> FieldOutcome:
        logger.warning(
            f"Field {outcome.field} not filled: {outcome.message}",
            extra={'extra_data': {
                'field': outcome.field,
                'status': outcome.status.value,
                'kind': outcome.kind.value if outcome.kind else None,
                'template': template_id,
            }}
        )
        return outcome
