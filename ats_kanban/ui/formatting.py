"""
Display helpers registered as Jinja filters.
"""

from datetime import date, datetime
from typing import Optional, Union

STATUS_BADGE_CLASSES = {
    "open": "bg-warning",
    "abierto": "bg-warning",
    "filled": "bg-success",
    "contratado": "bg-success",
    "draft": "bg-secondary",
    "borrador": "bg-secondary",
    "closed": "bg-dark",
    "cerrado": "bg-dark",
}

STATUS_LABELS = {
    "open": "Open",
    "abierto": "Open",
    "filled": "Filled",
    "contratado": "Filled",
    "draft": "Draft",
    "borrador": "Draft",
    "closed": "Closed",
    "cerrado": "Closed",
}


def status_badge_class(status: str) -> str:
    return STATUS_BADGE_CLASSES.get((status or "").lower(), "bg-info")


def status_label(status: str) -> str:
    return STATUS_LABELS.get((status or "").lower(), status)


def format_deadline(value: Optional[Union[str, date, datetime]]) -> str:
    """Render a deadline as e.g. ``5 Mar 2025``; ``N/A`` when missing."""
    if not value:
        return "N/A"
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return value
    return f"{value.day} {value.strftime('%b')} {value.year}"
