from io import BytesIO
from typing import List, Tuple
import pandas as pd
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from schemas.financial_reports import IncomeStatement, TransactionSummary

XLSX_MEDIA_TYPE = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'

SUMMARY_COLUMNS = ["account_code", "account_name", "amount", "count"]

def _style_sheet(worksheet):
    """Bold the header row and widen columns to fit their contents."""
    for cell in worksheet[1]:
        cell.font = Font(bold=True)
    for index, column in enumerate(worksheet.columns, start=1):
        width = max(len(str(cell.value)) if cell.value is not None else 0 for cell in column)
        worksheet.column_dimensions[get_column_letter(index)].width = width + 2

def _write_workbook(sheets: List[Tuple[str, pd.DataFrame]]) -> BytesIO:
    excel_file = BytesIO()
    with pd.ExcelWriter(excel_file, engine="openpyxl") as writer:
        for sheet_name, df in sheets:
            df.to_excel(writer, index=False, sheet_name=sheet_name)
            _style_sheet(writer.sheets[sheet_name])
    excel_file.seek(0)
    return excel_file

def transaction_summary_to_excel(summary: TransactionSummary) -> BytesIO:
    revenue_df = pd.DataFrame([line.model_dump() for line in summary.revenue], columns=SUMMARY_COLUMNS)
    expenses_df = pd.DataFrame([line.model_dump() for line in summary.expenses], columns=SUMMARY_COLUMNS)
    # Decimals would otherwise be written as text cells
    revenue_df["amount"] = revenue_df["amount"].astype(float)
    expenses_df["amount"] = expenses_df["amount"].astype(float)
    return _write_workbook([("Revenue", revenue_df), ("Expenses", expenses_df)])

def income_statement_to_excel(statement: IncomeStatement) -> BytesIO:
    revenue = statement.revenue
    expenses = statement.expenses
    rows = [
        ("Revenue", "Rental Income", revenue.rental_income),
        ("Revenue", "Late Fees", revenue.late_fees),
        ("Revenue", "Other Income", revenue.other_income),
        ("Revenue", "Total Revenue", revenue.total_revenue),
        ("Expenses", "Maintenance and Repairs", expenses.maintenance),
        ("Expenses", "Utilities", expenses.utilities),
        ("Expenses", "Insurance", expenses.insurance),
        ("Expenses", "Taxes", expenses.taxes),
        ("Expenses", "Management", expenses.management),
        ("Expenses", "Other", expenses.other),
        ("Expenses", "Total Expenses", expenses.total_expenses),
        ("Result", "Net Income", statement.net_income),
        ("Result", "Profit Margin %", statement.profit_margin),
    ]
    df = pd.DataFrame(
        [(section, line, float(amount)) for section, line, amount in rows],
        columns=["section", "line", "amount"],
    )
    sheet_name = f"{statement.period.start.isoformat()} to {statement.period.end.isoformat()}"
    return _write_workbook([(sheet_name, df)])
