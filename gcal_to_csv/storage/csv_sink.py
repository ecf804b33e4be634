# gcal_to_csv/storage/csv_sink.py
from __future__ import annotations
import csv
from typing import Iterable, List
from ..core.models import CSV_HEADER, FlatRecord

# colonnes jamais nulles côté mapping
_ALWAYS_STR = {"StartDateTime", "EndDateTime"}


def write_records(records: Iterable[FlatRecord], path: str) -> int:
    """
    Écrit l'en-tête puis une ligne par record (UTF-8, quoting CSV standard).
    Retourne le nombre de lignes écrites (hors en-tête).
    """
    n = 0
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(CSV_HEADER)
        for rec in records:
            w.writerow(rec.csv_row())
            n += 1
    return n


def read_records(path: str) -> List[FlatRecord]:
    """
    Relit un CSV écrit par write_records.
    Cellule vide → None, sauf début/fin qui valent toujours une chaîne ("" si absent).
    """
    out: List[FlatRecord] = []
    with open(path, newline="", encoding="utf-8") as f:
        for row in csv.DictReader(f):
            data = {k: (v if v != "" or k in _ALWAYS_STR else None) for k, v in row.items()}
            data["IsAllDay"] = row.get("IsAllDay") == "True"
            out.append(FlatRecord.model_validate(data))
    return out
