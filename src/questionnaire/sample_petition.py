"""
Sample questionnaire for the Petition for Dissolution of Marriage.

Used to seed the questionnaire store and as a reference schema in tests.
Field names match the petition mapping tables in documents.mapping_tables.
"""

from questionnaire.schema import Questionnaire


def _required(message: str) -> dict:
    return {"type": "required", "message": message}


SAMPLE_PETITION_SCHEMA = {
    "id": "petition",
    "name": "Divorce Petition",
    "type": "petition",
    "description": (
        "Complete this questionnaire to generate your Divorce Petition. "
        "This form is used to initiate your divorce case in Illinois."
    ),
    "sections": [
        {
            "id": "personal-info",
            "title": "Personal Information",
            "description": "Basic information about you and your spouse",
            "questions": [
                {
                    "id": "petitioner-first-name",
                    "type": "text",
                    "label": "Your First Name",
                    "fieldName": "petitionerFirstName",
                    "required": True,
                    "placeholder": "Enter your first name",
                    "validation": [_required("First name is required")],
                },
                {
                    "id": "petitioner-middle-name",
                    "type": "text",
                    "label": "Your Middle Name",
                    "fieldName": "petitionerMiddleName",
                },
                {
                    "id": "petitioner-last-name",
                    "type": "text",
                    "label": "Your Last Name",
                    "fieldName": "petitionerLastName",
                    "required": True,
                    "placeholder": "Enter your last name",
                    "validation": [_required("Last name is required")],
                },
                {
                    "id": "spouse-first-name",
                    "type": "text",
                    "label": "Spouse's First Name",
                    "fieldName": "spouseFirstName",
                    "required": True,
                    "validation": [_required("Spouse's first name is required")],
                },
                {
                    "id": "spouse-last-name",
                    "type": "text",
                    "label": "Spouse's Last Name",
                    "fieldName": "spouseLastName",
                    "required": True,
                    "validation": [_required("Spouse's last name is required")],
                },
                {
                    "id": "marriage-date",
                    "type": "date",
                    "label": "Date of Marriage",
                    "fieldName": "marriageDate",
                    "required": True,
                    "helpText": "Enter the date you were married",
                    "validation": [
                        _required("Marriage date is required"),
                        {"type": "date", "message": "Please enter a valid date"},
                    ],
                },
                {
                    "id": "separation-date",
                    "type": "date",
                    "label": "Date of Separation (if applicable)",
                    "fieldName": "separationDate",
                    "helpText": "Leave blank if you are still living together",
                    "validation": [{"type": "date", "message": "Please enter a valid date"}],
                },
            ],
        },
        {
            "id": "residence",
            "title": "Residence Information",
            "description": "Information about where you and your spouse live",
            "questions": [
                {
                    "id": "county",
                    "type": "select",
                    "label": "County",
                    "fieldName": "county",
                    "required": True,
                    "options": [
                        {"label": "Cook", "value": "cook"},
                        {"label": "DuPage", "value": "dupage"},
                        {"label": "Lake", "value": "lake"},
                        {"label": "Will", "value": "will"},
                        {"label": "Kane", "value": "kane"},
                        {"label": "McHenry", "value": "mchenry"},
                        {"label": "Winnebago", "value": "winnebago"},
                        {"label": "Madison", "value": "madison"},
                        {"label": "St. Clair", "value": "stclair"},
                        {"label": "Other", "value": "other"},
                    ],
                    "validation": [_required("County is required")],
                },
                {
                    "id": "petitioner-address",
                    "type": "address",
                    "label": "Your Current Address",
                    "fieldName": "petitionerAddress",
                    "required": True,
                    "validation": [_required("Address is required")],
                },
                {
                    "id": "spouse-address",
                    "type": "address",
                    "label": "Spouse's Current Address",
                    "fieldName": "spouseAddress",
                },
                {
                    "id": "petitioner-residence",
                    "type": "yesno",
                    "label": "Have you lived in Illinois for at least 90 days?",
                    "fieldName": "petitionerIllinoisResident",
                    "required": True,
                    "helpText": (
                        "You must have been an Illinois resident for at least "
                        "90 days to file for divorce in Illinois"
                    ),
                    "validation": [_required("This question is required")],
                },
                {
                    "id": "spouse-residence",
                    "type": "yesno",
                    "label": "Has your spouse lived in Illinois for at least 90 days?",
                    "fieldName": "spouseIllinoisResident",
                    "required": True,
                    "validation": [_required("This question is required")],
                },
            ],
        },
        {
            "id": "grounds",
            "title": "Grounds for Divorce",
            "description": "Illinois is a no-fault divorce state, but you must specify grounds",
            "questions": [
                {
                    "id": "grounds-type",
                    "type": "select",
                    "label": "Grounds for Divorce",
                    "fieldName": "grounds",
                    "required": True,
                    "options": [
                        {"label": "Irreconcilable Differences (No-Fault)", "value": "irreconcilable"},
                        {"label": "Mental Cruelty", "value": "mental_cruelty"},
                        {"label": "Physical Cruelty", "value": "physical_cruelty"},
                        {"label": "Desertion", "value": "desertion"},
                        {"label": "Adultery", "value": "adultery"},
                    ],
                    "validation": [_required("Please select grounds for divorce")],
                },
                {
                    "id": "irreconcilable-duration",
                    "type": "number",
                    "label": "How long have irreconcilable differences existed? (months)",
                    "fieldName": "irreconcilableDuration",
                    "helpText": "Enter the number of months",
                    "conditionalLogic": [
                        {"field": "grounds", "operator": "equals", "value": "irreconcilable"},
                    ],
                    "validation": [
                        {"type": "min", "value": 0, "message": "Duration must be 0 or greater"},
                    ],
                },
            ],
        },
        {
            "id": "children",
            "title": "Children",
            "description": "Information about any children from the marriage",
            "questions": [
                {
                    "id": "has-children",
                    "type": "yesno",
                    "label": "Do you have children from this marriage?",
                    "fieldName": "hasChildren",
                    "required": True,
                    "validation": [_required("This question is required")],
                },
                {
                    "id": "number-of-children",
                    "type": "number",
                    "label": "How many children do you have?",
                    "fieldName": "numberOfChildren",
                    "required": True,
                    "conditionalLogic": [
                        {"field": "hasChildren", "operator": "equals", "value": "yes"},
                    ],
                    "validation": [
                        _required("Number of children is required"),
                        {"type": "min", "value": 1, "message": "Must have at least 1 child"},
                    ],
                },
            ],
        },
        {
            "id": "relief",
            "title": "Relief Requested",
            "description": "What are you asking the court to decide?",
            "questions": [
                {
                    "id": "request-divorce",
                    "type": "checkbox",
                    "label": "What are you requesting?",
                    "fieldName": "reliefRequested",
                    "required": True,
                    "options": [
                        {"label": "Dissolution of Marriage", "value": "dissolution"},
                        {"label": "Child Custody", "value": "custody"},
                        {"label": "Child Support", "value": "child_support"},
                        {"label": "Spousal Maintenance (Alimony)", "value": "spousal_maintenance"},
                        {"label": "Division of Property", "value": "property_division"},
                        {"label": "Division of Debts", "value": "debt_division"},
                    ],
                    "validation": [_required("Please select at least one option")],
                },
            ],
        },
    ],
    "metadata": {
        "estimated_time": 15,
        "required_documents": [
            "Marriage certificate",
            "Proof of Illinois residency",
        ],
        "help_resources": [
            {"title": "Illinois Divorce Process Guide", "url": "/legal-info/process"},
            {"title": "Divorce Requirements", "url": "/legal-info/requirements"},
        ],
    },
}

SAMPLE_PETITION_QUESTIONNAIRE = Questionnaire.from_dict(SAMPLE_PETITION_SCHEMA)
