import re
from typing import Any, Dict

# --- Fonctions utilitaires pour les paramètres de requête ---

API_KEY_PATTERN = re.compile(r"(apikey=)[^&\s]*")


def drop_empty_values(args: Dict[str, Any]) -> Dict[str, Any]:
    """
    Retire les clés dont la valeur est une chaîne vide, pour que l'API
    applique sa propre valeur par défaut.
    Seule la chaîne vide est retirée: 0 et False sont conservés.
    """
    return {key: value for key, value in args.items() if not (isinstance(value, str) and value == "")}


def encode_query_value(value: Any) -> Any:
    """
    Encode un booléen en 1/0 (ce qu'attend l'API BreweryDB), laisse le reste tel quel.
    """
    if isinstance(value, bool):
        return int(value)
    return value


def redact_api_key(text: str) -> str:
    """Masque la valeur de apikey=... avant écriture dans les logs."""
    return API_KEY_PATTERN.sub(r"\1***", text)
