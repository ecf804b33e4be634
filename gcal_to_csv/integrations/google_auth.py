from __future__ import annotations

import json
import logging
import pathlib
from typing import List, Optional

from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials as UserCreds
from google.oauth2.service_account import Credentials as ServiceCreds
from google_auth_oauthlib.flow import InstalledAppFlow

from ..config import GOOGLE_CREDENTIALS_JSON, GOOGLE_CREDENTIALS_PATH, SCOPES, TOKEN_PATH

log = logging.getLogger(__name__)


class CredentialsNotFound(FileNotFoundError):
    pass


def _client_config(credentials_path: str, credentials_json: Optional[str]) -> dict:
    """
    Config client OAuth.
    Priorité:
      1) JSON inline (GOOGLE_CREDENTIALS_JSON)
      2) fichier credentials.json
    """
    json_inline = (credentials_json or "").strip()
    if json_inline:
        try:
            return json.loads(json_inline)
        except json.JSONDecodeError as e:
            raise RuntimeError(f"GOOGLE_CREDENTIALS_JSON invalide (JSON non décodable) : {e}")

    path = pathlib.Path(credentials_path).expanduser()
    if not path.exists():
        raise CredentialsNotFound(
            f"{path} introuvable. Télécharge un identifiant OAuth 2.0 (application de bureau) "
            "depuis la Google Cloud Console et place-le dans le répertoire courant."
        )
    return json.loads(path.read_text(encoding="utf-8"))


def load_credentials(
    credentials_path: str = GOOGLE_CREDENTIALS_PATH,
    token_path: str = TOKEN_PATH,
    scopes: Optional[List[str]] = None,
    credentials_json: Optional[str] = GOOGLE_CREDENTIALS_JSON,
):
    """
    Credentials Google prêts pour googleapiclient.
    - Service Account si le JSON client est de type 'service_account' (pas de cache).
    - Sinon OAuth utilisateur : token en cache, rafraîchi si expiré,
      consentement navigateur s'il manque ou n'est plus utilisable.
    """
    scopes = scopes or SCOPES
    client_cfg = _client_config(credentials_path, credentials_json)

    if client_cfg.get("type") == "service_account":
        return ServiceCreds.from_service_account_info(client_cfg, scopes=scopes)

    token_file = pathlib.Path(token_path).expanduser()
    creds = None
    if token_file.exists():
        creds = UserCreds.from_authorized_user_file(str(token_file), scopes)

    if creds and creds.valid:
        return creds

    if creds and creds.expired and creds.refresh_token:
        log.debug("Token expiré, rafraîchissement")
        creds.refresh(Request())
    else:
        log.debug("Pas de token utilisable, lancement du consentement OAuth")
        flow = InstalledAppFlow.from_client_config(client_cfg, scopes)
        creds = flow.run_local_server(port=0, open_browser=True)

    token_file.parent.mkdir(parents=True, exist_ok=True)
    token_file.write_text(creds.to_json(), encoding="utf-8")
    return creds
