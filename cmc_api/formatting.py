# cmc_api/formatting.py
from typing import Optional

def format_price(v: Optional[float]) -> str:
    """Formats a float as a price string."""
    if v is None:
        return "?"
    try:
        if v >= 1000:
            return f"{v:,.0f}"
        if v >= 1:
            return f"{v:,.2f}"
        if v >= 0.01:
            return f"{v:,.4f}"
        return f"{v:,.6f}"
    except (TypeError, ValueError):
        return str(v)

def format_large(v: Optional[float]) -> str:
    """Formats market caps and volumes as 1.23T / 4.56B / 7.89M."""
    if v is None:
        return "?"
    try:
        for limit, suffix in ((1e12, "T"), (1e9, "B"), (1e6, "M")):
            if abs(v) >= limit:
                return f"{v / limit:.2f}{suffix}"
        return f"{v:,.0f}"
    except (TypeError, ValueError):
        return str(v)

def fmt_pct(p: Optional[float]) -> str:
    """Formats a float as a percentage string."""
    if p is None:
        return "?%"
    arrow = "▲" if p > 0 else "▼"
    sign = "+" if p > 0 else ""
    try:
        return f"{arrow}{sign}{p:.2f}%"
    except (TypeError, ValueError):
        return f"{arrow}{p}%"
