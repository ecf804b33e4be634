# gcal_to_csv/config.py
from __future__ import annotations
import os
from dotenv import load_dotenv

# Charge automatiquement .env (répertoire courant)
load_dotenv(override=False)


def _int(envval: str | None, default: int) -> int:
    if envval is None or not envval.strip():
        return default
    try:
        return int(envval)
    except ValueError:
        return default


APPLICATION_NAME = "gcal-to-csv"


# ----- Google OAuth -----
# Lecture seule : on n'écrit jamais dans l'agenda
SCOPES = ["https://www.googleapis.com/auth/calendar.readonly"]

# Recommandé: GOOGLE_CREDENTIALS_PATH vers un fichier 'credentials.json'
GOOGLE_CREDENTIALS_PATH = os.getenv("GOOGLE_CREDENTIALS_PATH", "credentials.json")
# Optionnel: JSON inline sur une seule ligne
GOOGLE_CREDENTIALS_JSON = os.getenv("GOOGLE_CREDENTIALS_JSON")
# Token OAuth mis en cache par utilisateur (clé fixe "user")
TOKEN_PATH = os.getenv(
    "GOOGLE_TOKEN_PATH",
    os.path.join("~", ".credentials", APPLICATION_NAME, "token-user.json"),
)


# ----- Export -----
DEFAULT_CALENDAR_ID = os.getenv("GCAL_CALENDAR_ID", "primary")
DEFAULT_OUTPUT = os.getenv("GCAL_OUTPUT", "calendar_events.csv")
DEFAULT_MAX_RESULTS = _int(os.getenv("GCAL_MAX_RESULTS"), 2500)

# maxResults maximal accepté par events.list
PAGE_SIZE_MAX = 2500
