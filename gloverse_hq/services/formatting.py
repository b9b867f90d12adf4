"""
Display helpers shared by the admin endpoints

gloverse_hq/services/formatting.py
"""
import math
from typing import Optional
from urllib.parse import quote


def initials(name: Optional[str], fallback: str = "") -> str:
    """First letter of each word, upper-cased"""
    if not name:
        return fallback
    letters = "".join(part[0] for part in name.split(" ") if part)
    return letters.upper() or fallback


def matches_handle(handle: Optional[str], search: Optional[str]) -> bool:
    """Case-insensitive substring match on a channel handle"""
    if not search:
        return True
    if not handle:
        return False
    needle = search.strip().lstrip("@").lower()
    return needle in handle.lower()


def _group_indian(digits: str) -> str:
    # 1234567 -> 12,34,567
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups) + "," + tail


def format_inr(amount: float, decimals: int = 2) -> str:
    """Format an amount the way en-IN renders INR currency"""
    sign = "-" if amount < 0 else ""
    text = f"{abs(amount):.{decimals}f}"
    whole, _, fraction = text.partition(".")
    grouped = _group_indian(whole)
    if fraction:
        grouped = f"{grouped}.{fraction}"
    return f"{sign}₹{grouped}"


def format_usd(amount: float) -> str:
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def upi_payment_link(upi_id: str, payee_name: str, amount: float) -> str:
    """Deep link that opens a UPI app with the payment prefilled"""
    # Same escaping as encodeURIComponent
    payee = quote(payee_name, safe="!'()*~")
    return f"upi://pay?pa={upi_id}&pn={payee}&am={amount:.2f}&cu=INR"


def parse_amount(value) -> Optional[float]:
    """Parse a form value into a finite number, None when it is not one"""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number
