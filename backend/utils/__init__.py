from .formatting import format_currency
from .period_utils import generate_month_ranges, month_bounds

__all__ = ['format_currency', 'generate_month_ranges', 'month_bounds']
