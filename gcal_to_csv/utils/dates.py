# dates.py
from __future__ import annotations
from typing import Optional
import pendulum as p

def local_timestamp(value: Optional[str]) -> Optional[str]:
    """RFC3339 → 'YYYY-MM-DD HH:mm:ss' dans l'offset d'origine (None si absent)."""
    if not value:
        return None
    return p.parse(value).to_datetime_string()

def utc_now_iso(now: Optional[p.DateTime] = None) -> str:
    dt = now if now is not None else p.now("UTC")
    return dt.in_timezone("UTC").to_iso8601_string()
