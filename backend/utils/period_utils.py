from datetime import date, datetime
from typing import List, Tuple
from dateutil.relativedelta import relativedelta
from schemas.financial_reports import MonthRange

def month_bounds(day: date) -> Tuple[date, date]:
    """First and last day of the month containing day."""
    first = day.replace(day=1)
    return first, first + relativedelta(day=31)

def generate_month_ranges(start_month: str, months: int) -> List[MonthRange]:
    """
    Calendar month windows ending with start_month ("YYYY-MM"), oldest first.

    generate_month_ranges("2024-03", 3) -> Jan 2024, Feb 2024, Mar 2024
    """
    base = datetime.strptime(start_month, "%Y-%m").date()
    # months elapsed since January of year 1
    if base.year * 12 + base.month - 13 < months - 1:
        raise ValueError(f"{months} months ending {start_month} would start before year 1")
    ranges = []
    for i in range(months):
        month_start, month_end = month_bounds(base - relativedelta(months=i))
        ranges.append(MonthRange(start=month_start, end=month_end, label=month_start.strftime("%b %Y")))
    ranges.reverse()
    return ranges
