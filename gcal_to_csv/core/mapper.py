from __future__ import annotations
from typing import Any, Dict, List, Optional, Union
from .models import EventDateTime, FlatRecord, Person, RawEvent
from ..utils.dates import local_timestamp


def _format_when(value: Optional[EventDateTime], all_day: bool) -> str:
    """Date nue pour un all-day, sinon 'YYYY-MM-DD HH:mm:ss' ; '' si absent."""
    if value is None:
        return ""
    if all_day:
        return value.date or ""
    return local_timestamp(value.date_time) or ""


def _email(person: Optional[Person]) -> Optional[str]:
    return person.email if person is not None else None


def _join_attendees(attendees: Optional[List[Person]]) -> Optional[str]:
    # liste absente ou vide → pas de valeur
    if not attendees:
        return None
    return ";".join(a.email or "" for a in attendees)


def to_flat_record(event: Union[RawEvent, Dict[str, Any]]) -> FlatRecord:
    if not isinstance(event, RawEvent):
        event = RawEvent.model_validate(event)

    all_day = event.is_all_day
    return FlatRecord(
        event_id=event.id,
        summary=event.summary,
        description=event.description,
        location=event.location,
        start_date_time=_format_when(event.start, all_day),
        end_date_time=_format_when(event.end, all_day),
        is_all_day=all_day,
        status=event.status,
        organizer=_email(event.organizer),
        creator=_email(event.creator),
        attendees=_join_attendees(event.attendees),
        html_link=event.html_link,
        created=local_timestamp(event.created),
        updated=local_timestamp(event.updated),
        recurrence=event.recurring_event_id,
    )
