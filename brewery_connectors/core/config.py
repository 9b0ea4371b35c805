# brewery_connectors/core/config.py

from dotenv import load_dotenv
import os

load_dotenv()

BREWERYDB_API_KEY_VAR = "BREWERYDB_API_KEY"


def get_brewerydb_api_key() -> str:
    key = os.getenv(BREWERYDB_API_KEY_VAR)
    if not key:
        raise RuntimeError(f"{BREWERYDB_API_KEY_VAR} manquante. Définir la variable d'environnement (ou le fichier .env).")
    return key


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()
