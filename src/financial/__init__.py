"""Financial comparison between spouses' independently collected answers."""

from financial.comparison import (
    AssetItem,
    ComparisonReport,
    DebtItem,
    Discrepancy,
    DiscrepancyCategory,
    DiscrepancyType,
    ExpenseItem,
    FinancialAnswerSet,
    FinancialTotals,
    Frequency,
    IncomeItem,
    compare_financials,
    compute_totals,
    detect_discrepancies,
    normalize_to_monthly,
)

__all__ = [
    "AssetItem",
    "ComparisonReport",
    "DebtItem",
    "Discrepancy",
    "DiscrepancyCategory",
    "DiscrepancyType",
    "ExpenseItem",
    "FinancialAnswerSet",
    "FinancialTotals",
    "Frequency",
    "IncomeItem",
    "compare_financials",
    "compute_totals",
    "detect_discrepancies",
    "normalize_to_monthly",
]
