"""Pytest configuration and fixtures for test suite."""

import io
import os
import sys
from pathlib import Path

import pytest

# Set test environment BEFORE any other imports
os.environ.setdefault("APP_ENVIRONMENT", "test")

# Add src to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Clear the cached settings so env overrides in one test don't leak."""
    from config.settings import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# QUESTIONNAIRE FIXTURES
# =============================================================================

@pytest.fixture
def children_schema():
    """Schema with a required yes/no question gating a follow-up question."""
    from questionnaire.schema import Questionnaire

    return Questionnaire.from_dict({
        "id": "children-only",
        "name": "Children",
        "sections": [
            {
                "id": "children",
                "title": "Children",
                "questions": [
                    {
                        "id": "has-children",
                        "type": "yesno",
                        "label": "Do you have children?",
                        "fieldName": "hasChildren",
                        "required": True,
                        "validation": [{"type": "required"}],
                    },
                    {
                        "id": "number-of-children",
                        "type": "number",
                        "label": "How many children?",
                        "fieldName": "numberOfChildren",
                        "required": True,
                        "conditionalLogic": [
                            {"field": "hasChildren", "operator": "equals", "value": "yes"},
                        ],
                        "validation": [
                            {"type": "required"},
                            {"type": "min", "value": 1},
                        ],
                    },
                ],
            },
        ],
    })


@pytest.fixture
def petition_schema():
    """The seeded petition questionnaire."""
    from questionnaire.sample_petition import SAMPLE_PETITION_QUESTIONNAIRE

    return SAMPLE_PETITION_QUESTIONNAIRE


@pytest.fixture
def complete_petition_answers():
    """Answers that satisfy every required question of the petition."""
    return {
        "petitionerFirstName": "Jordan",
        "petitionerLastName": "Rivera",
        "spouseFirstName": "Casey",
        "spouseLastName": "Rivera",
        "marriageDate": "2012-06-09",
        "county": "cook",
        "petitionerAddress": "100 N Main St, Chicago, IL",
        "petitionerIllinoisResident": "yes",
        "spouseIllinoisResident": "yes",
        "grounds": "irreconcilable",
        "hasChildren": "no",
        "reliefRequested": ["dissolution", "property_division"],
    }


# =============================================================================
# PDF TEMPLATE FIXTURES
# =============================================================================

PETITION_TEXT_FIELDS = [
    "PetitionerFirstName",
    "PetitionerLastName",
    "RespondentFirstName",
    "RespondentLastName",
    "DateOfMarriage",
    "GroundsForDivorce",
    "NumberOfChildren",
]

COUNTY_OPTIONS = ["Cook County", "DuPage County", "Lake County"]

RELIEF_OPTIONS = ["dissolution", "property", "support"]


def build_form_pdf(with_pushbutton: bool = False) -> bytes:
    """Build a one-page AcroForm PDF resembling the petition template."""
    from reportlab.pdfgen import canvas

    buffer = io.BytesIO()
    pdf = canvas.Canvas(buffer)
    form = pdf.acroForm

    y = 760
    for name in PETITION_TEXT_FIELDS:
        pdf.drawString(50, y + 5, name)
        form.textfield(name=name, x=250, y=y, width=250, height=18)
        y -= 30

    form.choice(name="County", options=COUNTY_OPTIONS, value=COUNTY_OPTIONS[0],
                x=250, y=y, width=200, height=18)
    y -= 30
    form.checkbox(name="HasMinorChildren", x=250, y=y, size=16, checked=False, buttonStyle="check")
    y -= 30
    form.radio(name="Custody", value="joint", selected=False, x=250, y=y, size=16)
    form.radio(name="Custody", value="sole", selected=False, x=300, y=y, size=16)
    y -= 30
    form.listbox(name="ReliefRequested", options=RELIEF_OPTIONS, fieldFlags="multiSelect",
                 x=250, y=y - 60, width=200, height=54)
    y -= 90
    if with_pushbutton:
        form.checkbox(name="Submit", x=250, y=y, size=16, checked=False, buttonStyle="check")

    pdf.showPage()
    pdf.save()
    content = buffer.getvalue()

    if with_pushbutton:
        content = _mark_as_pushbutton(content, "Submit")
    return content


def _mark_as_pushbutton(content: bytes, field_name: str) -> bytes:
    from pypdf import PdfReader, PdfWriter
    from pypdf.generic import NameObject, NumberObject

    from documents.template_filler import FF_PUSHBUTTON

    writer = PdfWriter(clone_from=PdfReader(io.BytesIO(content)))
    for annot in writer.pages[0]["/Annots"]:
        annotation = annot.get_object()
        if annotation.get("/T") == field_name:
            annotation[NameObject("/Ff")] = NumberObject(FF_PUSHBUTTON)

    out = io.BytesIO()
    writer.write(out)
    return out.getvalue()


def read_field_values(content: bytes) -> dict:
    """Read back {field name: /V} from a filled PDF."""
    from pypdf import PdfReader

    fields = PdfReader(io.BytesIO(content)).get_fields() or {}
    return {name: data.get("/V") for name, data in fields.items()}


@pytest.fixture
def petition_template():
    """Petition-like AcroForm template as bytes."""
    return build_form_pdf()


@pytest.fixture
def template_with_pushbutton():
    return build_form_pdf(with_pushbutton=True)


@pytest.fixture
def petition_template_file(tmp_path, petition_template):
    """The petition template written to a templates directory."""
    forms_dir = tmp_path / "forms"
    forms_dir.mkdir()
    path = forms_dir / "petition-dissolution-with-children.pdf"
    path.write_bytes(petition_template)
    return path


@pytest.fixture
def read_fields():
    """Function reading back {field name: /V} from filled PDF bytes."""
    return read_field_values
