"""
Spouse Financial Comparison

Computes normalized totals from two independently collected financial
answer-sets (the user's and the spouse's) and flags material differences
between them.

Two kinds of discrepancy are reported:
- amount_mismatch: a total differs by at least DISCREPANCY_THRESHOLD_PERCENT
- user_missing: the spouse reports a category the user left empty

Nothing in this module raises on bad input: missing lists are empty,
unparsable amounts count as zero.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from financial._decimal_utils import money, to_decimal

logger = logging.getLogger(__name__)

DISCREPANCY_THRESHOLD_PERCENT = Decimal("10")
# Denominator floor so small or zero totals never divide by zero
PERCENT_DIFF_FLOOR = Decimal("1")

WEEKS_PER_MONTH = Decimal("4.33")
BIWEEKLY_PERIODS_PER_MONTH = Decimal("2.17")
MONTHS_PER_YEAR = Decimal("12")


class Frequency(str, Enum):
    """Payment frequencies for income and expense items."""
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class DiscrepancyCategory(str, Enum):
    """Financial categories compared between spouses."""
    INCOME = "income"
    EXPENSES = "expenses"
    ASSETS = "assets"
    DEBTS = "debts"
    NET_WORTH = "net_worth"


class DiscrepancyType(str, Enum):
    """How the two sides differ."""
    AMOUNT_MISMATCH = "amount_mismatch"
    USER_MISSING = "user_missing"


def _coerce_amount(raw: Any, label: str) -> Decimal:
    if raw is None or raw == "":
        return Decimal("0")
    try:
        amount = to_decimal(raw)
    except (InvalidOperation, TypeError, ValueError):
        logger.warning(f"Unparsable {label} {raw!r}, counting as zero")
        return Decimal("0")
    if not amount.is_finite():
        logger.warning(f"Non-finite {label} {raw!r}, counting as zero")
        return Decimal("0")
    return amount


@dataclass
class IncomeItem:
    """A recurring income source."""
    amount: Decimal
    frequency: str = Frequency.MONTHLY.value
    source: Optional[str] = None
    income_type: Optional[str] = None

    def __post_init__(self):
        self.amount = _coerce_amount(self.amount, "income amount")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "IncomeItem":
        return cls(
            amount=data.get("amount"),
            frequency=data.get("frequency") or Frequency.MONTHLY.value,
            source=data.get("source"),
            income_type=data.get("type"),
        )


@dataclass
class ExpenseItem:
    """A recurring expense."""
    amount: Decimal
    frequency: str = Frequency.MONTHLY.value
    category: Optional[str] = None
    description: Optional[str] = None

    def __post_init__(self):
        self.amount = _coerce_amount(self.amount, "expense amount")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExpenseItem":
        return cls(
            amount=data.get("amount"),
            frequency=data.get("frequency") or Frequency.MONTHLY.value,
            category=data.get("category"),
            description=data.get("description"),
        )


@dataclass
class AssetItem:
    """An asset at its current value."""
    value: Decimal
    description: Optional[str] = None
    ownership: Optional[str] = None

    def __post_init__(self):
        self.value = _coerce_amount(self.value, "asset value")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AssetItem":
        return cls(
            value=data.get("value"),
            description=data.get("description"),
            ownership=data.get("ownership"),
        )


@dataclass
class DebtItem:
    """A debt at its outstanding balance."""
    balance: Decimal
    creditor: Optional[str] = None
    ownership: Optional[str] = None

    def __post_init__(self):
        self.balance = _coerce_amount(self.balance, "debt balance")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DebtItem":
        return cls(
            balance=data.get("balance"),
            creditor=data.get("creditor"),
            ownership=data.get("ownership"),
        )


@dataclass
class FinancialAnswerSet:
    """One party's financial answers."""
    income: List[IncomeItem] = field(default_factory=list)
    expenses: List[ExpenseItem] = field(default_factory=list)
    assets: List[AssetItem] = field(default_factory=list)
    debts: List[DebtItem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "FinancialAnswerSet":
        data = data or {}
        return cls(
            income=[IncomeItem.from_dict(i) for i in data.get("income") or []],
            expenses=[ExpenseItem.from_dict(e) for e in data.get("expenses") or []],
            assets=[AssetItem.from_dict(a) for a in data.get("assets") or []],
            debts=[DebtItem.from_dict(d) for d in data.get("debts") or []],
        )


@dataclass
class FinancialTotals:
    """Normalized totals for one party, rounded to cents."""
    monthly_income: Decimal
    monthly_expenses: Decimal
    total_assets: Decimal
    total_debts: Decimal
    net_worth: Decimal
    monthly_cash_flow: Decimal

    def to_dict(self) -> Dict[str, float]:
        return {
            "monthly_income": float(self.monthly_income),
            "monthly_expenses": float(self.monthly_expenses),
            "total_assets": float(self.total_assets),
            "total_debts": float(self.total_debts),
            "net_worth": float(self.net_worth),
            "monthly_cash_flow": float(self.monthly_cash_flow),
        }


@dataclass
class Discrepancy:
    """A material difference between the user's and the spouse's figures."""
    category: DiscrepancyCategory
    field: str
    user_value: Decimal
    spouse_value: Decimal
    percent_diff: float
    type: DiscrepancyType
    description: str


@dataclass
class ComparisonReport:
    """Both parties' totals and the discrepancies between them."""
    user_totals: FinancialTotals
    spouse_totals: FinancialTotals
    discrepancies: List[Discrepancy]

    @property
    def has_discrepancies(self) -> bool:
        return bool(self.discrepancies)


def normalize_to_monthly(amount: Union[Decimal, int, float, str], frequency: Optional[str]) -> Decimal:
    """
    Convert an amount at the given frequency to a monthly amount.

    Unrecognized frequencies are treated as already monthly.
    """
    amount = to_decimal(amount)
    if frequency == Frequency.YEARLY:
        return amount / MONTHS_PER_YEAR
    if frequency == Frequency.WEEKLY:
        return amount * WEEKS_PER_MONTH
    if frequency == Frequency.BIWEEKLY:
        return amount * BIWEEKLY_PERIODS_PER_MONTH
    return amount


def compute_totals(answer_set: FinancialAnswerSet) -> FinancialTotals:
    """Sum each category; income and expenses are normalized to monthly."""
    monthly_income = sum(
        (normalize_to_monthly(item.amount, item.frequency) for item in answer_set.income),
        Decimal("0"),
    )
    monthly_expenses = sum(
        (normalize_to_monthly(item.amount, item.frequency) for item in answer_set.expenses),
        Decimal("0"),
    )
    total_assets = sum((item.value for item in answer_set.assets), Decimal("0"))
    total_debts = sum((item.balance for item in answer_set.debts), Decimal("0"))

    return FinancialTotals(
        monthly_income=money(monthly_income),
        monthly_expenses=money(monthly_expenses),
        total_assets=money(total_assets),
        total_debts=money(total_debts),
        net_worth=money(total_assets - total_debts),
        monthly_cash_flow=money(monthly_income - monthly_expenses),
    )


def percent_difference(user_value: Decimal, spouse_value: Decimal) -> Decimal:
    """|a - b| / max(a, b, 1) * 100."""
    denominator = max(user_value, spouse_value, PERCENT_DIFF_FLOOR)
    return abs(user_value - spouse_value) / denominator * Decimal("100")


def detect_discrepancies(
    user: FinancialAnswerSet, spouse: FinancialAnswerSet
) -> List[Discrepancy]:
    """
    Compare the user's and spouse's financial answers.

    Args:
        user: The primary user's answers
        spouse: The spouse's separately collected answers

    Returns:
        Discrepancies, totals first, then categories the user is missing
    """
    user_totals = compute_totals(user)
    spouse_totals = compute_totals(spouse)
    discrepancies: List[Discrepancy] = []

    comparisons = [
        (DiscrepancyCategory.INCOME, "Monthly Income", user_totals.monthly_income, spouse_totals.monthly_income),
        (DiscrepancyCategory.EXPENSES, "Monthly Expenses", user_totals.monthly_expenses, spouse_totals.monthly_expenses),
        (DiscrepancyCategory.ASSETS, "Total Assets", user_totals.total_assets, spouse_totals.total_assets),
        (DiscrepancyCategory.DEBTS, "Total Debts", user_totals.total_debts, spouse_totals.total_debts),
        (DiscrepancyCategory.NET_WORTH, "Net Worth", user_totals.net_worth, spouse_totals.net_worth),
    ]

    for category, label, user_value, spouse_value in comparisons:
        if user_value == 0 and spouse_value == 0:
            continue
        diff = percent_difference(user_value, spouse_value)
        if diff >= DISCREPANCY_THRESHOLD_PERCENT:
            discrepancies.append(Discrepancy(
                category=category,
                field=label,
                user_value=user_value,
                spouse_value=spouse_value,
                percent_diff=float(diff),
                type=DiscrepancyType.AMOUNT_MISMATCH,
                description=(
                    f"{label}: You report ${user_value:,.2f} vs spouse "
                    f"${spouse_value:,.2f} ({diff:.0f}% difference)"
                ),
            ))

    missing_checks = [
        (DiscrepancyCategory.INCOME, "Income", user.income, spouse.income, spouse_totals.monthly_income),
        (DiscrepancyCategory.ASSETS, "Assets", user.assets, spouse.assets, spouse_totals.total_assets),
        (DiscrepancyCategory.DEBTS, "Debts", user.debts, spouse.debts, spouse_totals.total_debts),
    ]

    for category, label, user_items, spouse_items, spouse_value in missing_checks:
        if spouse_items and not user_items:
            discrepancies.append(Discrepancy(
                category=category,
                field=label,
                user_value=Decimal("0.00"),
                spouse_value=spouse_value,
                percent_diff=100.0,
                type=DiscrepancyType.USER_MISSING,
                description=f"You have no {label.lower()} recorded; spouse reports {label.lower()}.",
            ))

    if discrepancies:
        logger.info(
            "Financial discrepancies detected",
            extra={'extra_data': {
                'count': len(discrepancies),
                'fields': [d.field for d in discrepancies],
            }}
        )

    return discrepancies


def compare_financials(
    user: FinancialAnswerSet, spouse: FinancialAnswerSet
) -> ComparisonReport:
    """Compute both parties' totals along with their discrepancies."""
    return ComparisonReport(
        user_totals=compute_totals(user),
        spouse_totals=compute_totals(spouse),
        discrepancies=detect_discrepancies(user, spouse),
    )
