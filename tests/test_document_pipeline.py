"""
Tests for the document generation pipeline.

These tests verify that:
1. Answers flow through mapping into a filled template
2. Missing required answers produce warnings, or an error when a
   complete document is required
3. Templates resolve from settings when not passed explicitly
4. Documents are flattened unless settings or the caller say otherwise
"""

import io

import pytest
from pypdf import PdfReader

from config.settings import Settings
from documents.pipeline import (
    IncompleteAnswersError,
    UnsupportedDocumentTypeError,
    generate_document,
)
from documents.template_filler import FillStatus, TemplateLoadError


@pytest.fixture
def settings(petition_template_file):
    return Settings(templates_dir=petition_template_file.parent, flatten_forms=False)


class TestGenerateDocument:
    """Tests for generate_document."""

    def test_generates_filled_petition(self, petition_template, complete_petition_answers, settings, read_fields):
        document = generate_document(
            "petition-with-children", complete_petition_answers, petition_template, settings=settings,
        )

        values = read_fields(document.content)
        assert values["PetitionerFirstName"] == "Jordan"
        assert values["DateOfMarriage"] == "06/09/2012"
        assert values["County"] == "Cook County"
        assert values["GroundsForDivorce"] == "Irreconcilable Differences"
        assert values["HasMinorChildren"] == "/Off"
        assert document.is_complete
        assert document.document_type == "petition-with-children"

    def test_fields_missing_from_template_become_warnings(
        self, petition_template, complete_petition_answers, settings
    ):
        """The test template has no address or middle name fields."""
        document = generate_document(
            "petition-with-children", complete_petition_answers, petition_template, settings=settings,
        )

        skipped = {o.field for o in document.fill_report.skipped}
        assert "PetitionerAddress" in skipped
        assert all(o.status == FillStatus.SKIPPED_UNKNOWN_FIELD for o in document.fill_report.skipped)
        assert any("PetitionerAddress" in w for w in document.warnings)

    def test_missing_required_answers_still_generate(self, petition_template, settings, read_fields):
        document = generate_document(
            "petition-no-children", {"petitionerFirstName": "Jordan"}, petition_template, settings=settings,
        )

        assert document.is_complete is False
        assert "PetitionerLastName" in document.missing_required_fields
        assert "Missing required field: County" in document.warnings
        assert read_fields(document.content)["PetitionerFirstName"] == "Jordan"

    def test_require_complete_rejects_before_filling(self, settings):
        """The template is never touched when answers are incomplete."""
        with pytest.raises(IncompleteAnswersError) as exc_info:
            generate_document(
                "petition-no-children", {}, b"not a pdf", settings=settings, require_complete=True,
            )

        assert exc_info.value.document_type == "petition-no-children"
        assert "PetitionerFirstName" in exc_info.value.missing_fields

    def test_unsupported_document_type(self, settings):
        with pytest.raises(UnsupportedDocumentTypeError):
            generate_document("summons-in-klingon", {}, settings=settings)

    def test_unsupported_document_type_is_value_error(self, settings):
        with pytest.raises(ValueError):
            generate_document("nope", {}, settings=settings)

    def test_template_resolved_from_settings(self, complete_petition_answers, settings, read_fields):
        document = generate_document("petition-with-children", complete_petition_answers, settings=settings)

        assert read_fields(document.content)["RespondentFirstName"] == "Casey"
        assert document.fill_report.template_id.endswith("petition-dissolution-with-children.pdf")

    def test_missing_configured_template(self, complete_petition_answers, tmp_path):
        settings = Settings(templates_dir=tmp_path)

        with pytest.raises(TemplateLoadError):
            generate_document("petition-no-children", complete_petition_answers, settings=settings)

    def test_unconfigured_template(self, complete_petition_answers, tmp_path):
        settings = Settings(templates_dir=tmp_path, template_files={})

        with pytest.raises(TemplateLoadError) as exc_info:
            generate_document("petition-no-children", complete_petition_answers, settings=settings)

        assert exc_info.value.template_id == "petition-no-children"


class TestFlattenedDocuments:
    """Tests for the flatten setting and its per-call override."""

    def test_flattened_by_default(self, petition_template_file, complete_petition_answers):
        settings = Settings(templates_dir=petition_template_file.parent)

        document = generate_document("petition-with-children", complete_petition_answers, settings=settings)

        assert not PdfReader(io.BytesIO(document.content)).get_fields()
        assert "PetitionerFirstName" in document.fill_report.filled

    def test_per_call_override(self, petition_template_file, complete_petition_answers, read_fields):
        settings = Settings(templates_dir=petition_template_file.parent, flatten_forms=True)

        document = generate_document(
            "petition-with-children", complete_petition_answers, settings=settings, flatten=False,
        )

        assert read_fields(document.content)["PetitionerFirstName"] == "Jordan"

    def test_flatten_from_environment(self, monkeypatch, petition_template_file, complete_petition_answers, read_fields):
        monkeypatch.setenv("APP_TEMPLATES_DIR", str(petition_template_file.parent))
        monkeypatch.setenv("APP_FLATTEN_FORMS", "false")

        document = generate_document("petition-with-children", complete_petition_answers)

        assert read_fields(document.content)["RespondentFirstName"] == "Casey"
