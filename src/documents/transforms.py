"""
Value transforms for document field mappings.

Each transform takes a raw questionnaire answer and returns the text the
court form expects. Unknown codes pass through unchanged.
"""

from decimal import InvalidOperation
from typing import Any

from financial._decimal_utils import money
from questionnaire.rule_evaluator import parse_date
from questionnaire.values import is_empty

COUNTY_NAMES = {
    "cook": "Cook County",
    "dupage": "DuPage County",
    "lake": "Lake County",
    "will": "Will County",
    "kane": "Kane County",
    "mchenry": "McHenry County",
    "winnebago": "Winnebago County",
    "madison": "Madison County",
    "stclair": "St. Clair County",
    "sangamon": "Sangamon County",
    "other": "Other County",
}

GROUNDS_TEXT = {
    "irreconcilable": "Irreconcilable Differences",
    "mental_cruelty": "Extreme and Repeated Mental Cruelty",
    "physical_cruelty": "Extreme and Repeated Physical Cruelty",
    "cruelty": "Extreme and Repeated Mental or Physical Cruelty",
    "desertion": "Willful Desertion",
    "adultery": "Adultery",
    "impotence": "Impotence",
    "bigamy": "Bigamy",
    "substance": "Habitual Drunkenness or Drug Addiction",
    "attempted_murder": "Attempt on Life of Spouse",
    "felony": "Conviction of a Felony or Other Infamous Crime",
}

EMPLOYMENT_STATUS_TEXT = {
    "full_time": "Employed Full-Time",
    "part_time": "Employed Part-Time",
    "self_employed": "Self-Employed",
    "unemployed": "Unemployed",
    "retired": "Retired",
    "disabled": "Disabled",
}

DECISION_MAKING_TEXT = {
    "joint": "Joint (Both Parents)",
    "parent1": "Petitioner (Parent 1)",
    "parent2": "Respondent (Parent 2)",
    "na": "Not Applicable",
}

SCHEDULE_TYPE_TEXT = {
    "standard": "Standard (Every Other Weekend)",
    "week_on_off": "50/50 - Week On/Week Off",
    "2_2_3": "50/50 - 2-2-3 Rotation",
    "3_4_4_3": "50/50 - 3-4-4-3 Rotation",
    "60_40": "60/40 Split",
    "custom": "Custom Schedule",
}

PARENT_TEXT = {
    "parent1": "Petitioner (Parent 1)",
    "parent2": "Respondent (Parent 2)",
    "shared": "Shared (Alternating)",
    "mother": "Mother",
    "father": "Father",
    "split": "Split Between Parents",
}


def format_date(value: Any) -> str:
    """Format a date as MM/DD/YYYY; unparsable dates become ''."""
    if is_empty(value):
        return ""
    parsed = parse_date(value)
    if parsed is None:
        return ""
    return parsed.strftime("%m/%d/%Y")


def format_currency(value: Any) -> str:
    """Format an amount as US dollars, e.g. $1,234.50."""
    if is_empty(value):
        return "$0.00"
    try:
        amount = money(value)
    except (InvalidOperation, TypeError, ValueError):
        return "$0.00"
    if not amount.is_finite():
        return "$0.00"
    if amount < 0:
        return f"-${-amount:,.2f}"
    return f"${amount:,.2f}"


def format_county(value: Any) -> str:
    if is_empty(value):
        return ""
    text = str(value)
    return COUNTY_NAMES.get(text.lower(), text)


def format_grounds(value: Any) -> str:
    text = "" if value is None else str(value)
    return GROUNDS_TEXT.get(text, text)


def format_employment_status(value: Any) -> str:
    text = "" if value is None else str(value)
    return EMPLOYMENT_STATUS_TEXT.get(text, text)


def format_decision_making(value: Any) -> str:
    text = "" if value is None else str(value)
    return DECISION_MAKING_TEXT.get(text, text)


def format_schedule_type(value: Any) -> str:
    text = "" if value is None else str(value)
    return SCHEDULE_TYPE_TEXT.get(text, text)


def format_parent(value: Any) -> str:
    text = "" if value is None else str(value)
    return PARENT_TEXT.get(text, text)


def format_yes_no_checkbox(value: Any) -> bool:
    """Map a yes/no answer to a checkbox state."""
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("yes", "y", "true")
