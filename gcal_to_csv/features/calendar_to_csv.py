# gcal_to_csv/features/calendar_to_csv.py
from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, List, Optional

import pendulum as p

from ..config import PAGE_SIZE_MAX
from ..core.mapper import to_flat_record
from ..core.models import FlatRecord
from ..integrations.gcal_client import list_events_page
from ..utils.dates import utc_now_iso

log = logging.getLogger(__name__)


def iter_raw_events(service, calendar_id: str, max_results: int,
                    now: Optional[p.DateTime] = None) -> Iterator[Dict[str, Any]]:
    """
    Parcourt les pages de events.list jusqu'à épuisement du pageToken
    ou jusqu'au plafond max_results. Ne produit jamais plus de max_results items.
    """
    time_min = utc_now_iso(now)
    fetched = 0
    page_token: Optional[str] = None

    while fetched < max_results:
        page_size = min(max_results - fetched, PAGE_SIZE_MAX)
        resp = list_events_page(
            service, calendar_id, time_min=time_min, page_size=page_size, page_token=page_token
        )
        items = resp.get("items") or []
        log.debug("page reçue: %d événements", len(items))

        # l'API peut renvoyer plus que demandé : on coupe au plafond
        for item in items[: max_results - fetched]:
            fetched += 1
            yield item

        page_token = resp.get("nextPageToken")
        if not page_token:
            break


def iter_flat_records(service, calendar_id: str, max_results: int,
                      now: Optional[p.DateTime] = None) -> Iterator[FlatRecord]:
    for raw in iter_raw_events(service, calendar_id, max_results, now=now):
        yield to_flat_record(raw)


def collect_records(service, calendar_id: str, max_results: int,
                    now: Optional[p.DateTime] = None) -> List[FlatRecord]:
    """Tout en mémoire avant écriture : pas de CSV partiel si une page échoue."""
    records = list(iter_flat_records(service, calendar_id, max_results, now=now))
    log.info("%d événements récupérés depuis '%s'", len(records), calendar_id)
    return records
