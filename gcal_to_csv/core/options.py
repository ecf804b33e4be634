from __future__ import annotations
import re
from pydantic import BaseModel
from typing import Sequence
from ..config import DEFAULT_CALENDAR_ID, DEFAULT_OUTPUT, DEFAULT_MAX_RESULTS

# entier signé 32 bits, chiffres ASCII uniquement (pas de "1_0" ni de chiffres unicode)
_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT_MIN, _INT_MAX = -(2 ** 31), 2 ** 31 - 1


class InvalidArgument(ValueError):
    pass


class ExportOptions(BaseModel):
    calendar_id: str = DEFAULT_CALENDAR_ID
    output: str = DEFAULT_OUTPUT
    max_results: int = DEFAULT_MAX_RESULTS
    verbose: bool = False


def _parse_int(value: str) -> int:
    text = value.strip()
    if _INT_RE.fullmatch(text):
        n = int(text)
        if _INT_MIN <= n <= _INT_MAX:
            return n
    raise InvalidArgument(
        f"Valeur invalide pour --max-results : '{value}' (entier attendu)."
    )


def parse_args(argv: Sequence[str]) -> ExportOptions:
    """
    Lecture gauche → droite de --calendar-id / --output / --max-results / -v.
    - La valeur d'un flag est le token suivant, quel qu'il soit.
    - Un flag sans valeur derrière (dernier token) est ignoré.
    - Les tokens inconnus sont ignorés.
    - --max-results non entier → InvalidArgument.
    """
    opts = ExportOptions()
    args = list(argv)
    i = 0
    while i < len(args):
        flag = args[i]
        has_value = i + 1 < len(args)
        if flag == "--calendar-id" and has_value:
            i += 1
            opts.calendar_id = args[i]
        elif flag == "--output" and has_value:
            i += 1
            opts.output = args[i]
        elif flag == "--max-results" and has_value:
            i += 1
            opts.max_results = _parse_int(args[i])
        elif flag in ("-v", "--verbose"):
            opts.verbose = True
        i += 1
    return opts
