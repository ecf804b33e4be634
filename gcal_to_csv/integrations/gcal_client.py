from __future__ import annotations
import logging
from typing import Any, Dict, Optional
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

log = logging.getLogger(__name__)


class CalendarNotFound(LookupError):
    def __init__(self, calendar_id: str):
        super().__init__(calendar_id)
        self.calendar_id = calendar_id


def build_service(credentials):
    """Client Google Calendar v3 authentifié (discovery cache désactivé)."""
    return build("calendar", "v3", credentials=credentials, cache_discovery=False)


def list_events_page(service, calendar_id: str, *, time_min: str, page_size: int,
                     page_token: Optional[str] = None) -> Dict[str, Any]:
    """
    Une page de events.list : événements à partir de time_min, occurrences
    dépliées, triées par début, sans les supprimés.
    Un 404 devient CalendarNotFound ; toute autre erreur remonte telle quelle.
    """
    log.debug("events.list calendar=%s maxResults=%s pageToken=%s",
              calendar_id, page_size, "oui" if page_token else "non")
    try:
        return (
            service.events()
            .list(
                calendarId=calendar_id,
                timeMin=time_min,
                orderBy="startTime",
                singleEvents=True,
                showDeleted=False,
                maxResults=page_size,
                pageToken=page_token,
            )
            .execute()
        )
    except HttpError as e:
        if e.resp.status == 404:
            raise CalendarNotFound(calendar_id) from e
        raise
