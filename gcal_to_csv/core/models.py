from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class EventDateTime(BaseModel):
    # Google: "date" (YYYY-MM-DD) pour un all-day, sinon "dateTime" RFC3339
    date: Optional[str] = None
    date_time: Optional[str] = Field(None, alias="dateTime")
    time_zone: Optional[str] = Field(None, alias="timeZone")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Person(BaseModel):
    email: Optional[str] = None
    display_name: Optional[str] = Field(None, alias="displayName")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class RawEvent(BaseModel):
    """Événement tel que renvoyé par events.list (champs inconnus ignorés)."""
    id: Optional[str] = None
    summary: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    start: Optional[EventDateTime] = None
    end: Optional[EventDateTime] = None
    status: Optional[str] = None
    organizer: Optional[Person] = None
    creator: Optional[Person] = None
    attendees: Optional[List[Person]] = None
    html_link: Optional[str] = Field(None, alias="htmlLink")
    created: Optional[str] = None             # RFC3339, ex: "2025-08-29T01:45:00.000Z"
    updated: Optional[str] = None
    recurring_event_id: Optional[str] = Field(None, alias="recurringEventId")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @property
    def is_all_day(self) -> bool:
        return self.start is not None and self.start.date is not None


class FlatRecord(BaseModel):
    # Ligne CSV : l'alias est le nom de colonne, l'ordre des champs celui des colonnes
    event_id: Optional[str] = Field(None, alias="EventId")
    summary: Optional[str] = Field(None, alias="Summary")
    description: Optional[str] = Field(None, alias="Description")
    location: Optional[str] = Field(None, alias="Location")
    start_date_time: Optional[str] = Field(None, alias="StartDateTime")
    end_date_time: Optional[str] = Field(None, alias="EndDateTime")
    is_all_day: bool = Field(False, alias="IsAllDay")
    status: Optional[str] = Field(None, alias="Status")
    organizer: Optional[str] = Field(None, alias="Organizer")
    creator: Optional[str] = Field(None, alias="Creator")
    attendees: Optional[str] = Field(None, alias="Attendees")
    html_link: Optional[str] = Field(None, alias="HtmlLink")
    created: Optional[str] = Field(None, alias="Created")
    updated: Optional[str] = Field(None, alias="Updated")
    recurrence: Optional[str] = Field(None, alias="Recurrence")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def csv_header(cls) -> List[str]:
        return [f.alias or name for name, f in cls.model_fields.items()]

    def csv_row(self) -> List[str]:
        row = []
        for value in self.model_dump(by_alias=True).values():
            if value is None:
                row.append("")
            else:
                row.append(str(value))
        return row


CSV_HEADER = FlatRecord.csv_header()
