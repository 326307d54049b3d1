"""Core business logic package for the expense ledger."""

from .analytics import analyze, category_totals, highest_spending_category, monthly_totals
from .categories import CATEGORIES, is_registered_category
from .exceptions import InvalidRangeError, ValidationError
from .filters import filter_expenses
from .models import CategoryAmount, Expense, PeriodSummary, SpendingAnalysis
from .scheduler import SummaryScheduler
from .services import ExpenseService
from .store import LedgerStore
from .summary import PERIODS, period_start, scheduled_summary
from .validators import is_valid_expense, validate_expense

__all__ = [
    "CATEGORIES",
    "PERIODS",
    "CategoryAmount",
    "Expense",
    "ExpenseService",
    "InvalidRangeError",
    "LedgerStore",
    "PeriodSummary",
    "SpendingAnalysis",
    "SummaryScheduler",
    "ValidationError",
    "analyze",
    "category_totals",
    "filter_expenses",
    "highest_spending_category",
    "is_registered_category",
    "is_valid_expense",
    "monthly_totals",
    "period_start",
    "scheduled_summary",
    "validate_expense",
]
