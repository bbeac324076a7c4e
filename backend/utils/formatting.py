from decimal import Decimal, ROUND_HALF_UP
from typing import Optional
import config

CURRENCY_SYMBOLS = {
    "SCR": "₨",
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
}

def format_currency(amount: Decimal, currency: Optional[str] = None) -> str:
    """Two decimals with thousands separators, prefixed by the currency symbol (or its code if unknown)."""
    currency = currency or config.DEFAULT_CURRENCY
    if amount is None:
        amount = Decimal(0)
    amount = Decimal(amount).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    symbol = CURRENCY_SYMBOLS.get(currency, currency)
    if amount < 0:
        return f"-{symbol}{-amount:,.2f}"
    return f"{symbol}{amount:,.2f}"
