from fastapi import APIRouter, HTTPException
from fastapi.responses import StreamingResponse
from typing import List
from datetime import datetime
from schemas.financial_reports import (
    IncomeStatement,
    BalanceSheet,
    CashFlowStatement,
    PropertyPerformance,
    TransactionSummary,
    MonthRange,
)
from schemas.report_requests import PeriodReportRequest, BalanceSheetRequest, PropertyPerformanceRequest
from accounting import financial_reports as reports_service
from accounting import report_export
from utils.period_utils import generate_month_ranges
import logging

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/financial-reports",
    tags=["Financial Reports"],
)

@router.post("/income-statement", response_model=IncomeStatement)
def get_income_statement(request: PeriodReportRequest):
    return reports_service.generate_income_statement(
        payments=request.payments,
        expenses=request.expenses,
        start_date=request.start_date,
        end_date=request.end_date
    )

@router.post("/balance-sheet", response_model=BalanceSheet)
def get_balance_sheet(request: BalanceSheetRequest):
    return reports_service.generate_balance_sheet(
        payments=request.payments,
        expenses=request.expenses,
        leases=request.leases,
        as_of_date=request.as_of_date
    )

@router.post("/cash-flow", response_model=CashFlowStatement)
def get_cash_flow_statement(request: PeriodReportRequest):
    return reports_service.generate_cash_flow_statement(
        payments=request.payments,
        expenses=request.expenses,
        start_date=request.start_date,
        end_date=request.end_date
    )

@router.post("/property-performance", response_model=PropertyPerformance)
def get_property_performance(request: PropertyPerformanceRequest):
    return reports_service.generate_property_performance(
        property_id=request.property_id,
        property_name=request.property_name,
        payments=request.payments,
        expenses=request.expenses,
        units=request.units,
        leases=request.leases,
        start_date=request.start_date,
        end_date=request.end_date
    )

@router.post("/transaction-summary", response_model=TransactionSummary)
def get_transaction_summary(request: PeriodReportRequest):
    return reports_service.generate_transaction_summary(
        payments=request.payments,
        expenses=request.expenses,
        start_date=request.start_date,
        end_date=request.end_date
    )

@router.post("/transaction-summary/export")
def export_transaction_summary(request: PeriodReportRequest):
    summary = reports_service.generate_transaction_summary(
        request.payments, request.expenses, request.start_date, request.end_date
    )
    excel_file = report_export.transaction_summary_to_excel(summary)
    filename = f"transaction_summary_{request.start_date}_{request.end_date}.xlsx"
    headers = {
        'Content-Disposition': f'attachment; filename="{filename}"'
    }
    return StreamingResponse(excel_file, media_type=report_export.XLSX_MEDIA_TYPE, headers=headers)

@router.post("/income-statement/export")
def export_income_statement(request: PeriodReportRequest):
    statement = reports_service.generate_income_statement(
        request.payments, request.expenses, request.start_date, request.end_date
    )
    excel_file = report_export.income_statement_to_excel(statement)
    filename = f"income_statement_{request.start_date}_{request.end_date}.xlsx"
    headers = {
        'Content-Disposition': f'attachment; filename="{filename}"'
    }
    return StreamingResponse(excel_file, media_type=report_export.XLSX_MEDIA_TYPE, headers=headers)

@router.get("/month-ranges", response_model=List[MonthRange])
def get_month_ranges(start_month: str, months: int = 6):
    if months < 1:
        raise HTTPException(status_code=400, detail="months must be at least 1")
    try:
        datetime.strptime(start_month, "%Y-%m")
    except ValueError:
        logger.warning(f"Rejected month range request with start_month={start_month!r}")
        raise HTTPException(status_code=400, detail="Invalid month format. Please use YYYY-MM for start_month")
    try:
        return generate_month_ranges(start_month, months)
    except ValueError as exc:
        logger.warning(f"Rejected month range request: {exc}")
        raise HTTPException(status_code=400, detail=str(exc))
