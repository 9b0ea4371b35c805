import requests
from typing import Any, Dict, Optional
from .exceptions import TransportError
from .logger import get_logger
from .utils import encode_query_value, redact_api_key

logger = get_logger(__name__)


class HTTPClient:
    """
    Transport HTTP synchrone (requests) pour les appels API externes.

    Une seule tentative par appel: pas de retry, pas de timeout.
    """

    def __init__(self, base_url: str, verify_tls: bool = False):
        self.base_url = base_url.rstrip("/")
        # Vérification TLS désactivée par compatibilité avec l'API BreweryDB.
        # Faille de sécurité connue: ne pas réactiver sans le signaler.
        self.verify_tls = verify_tls

    def build_url(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> str:
        """
        Construit l'URI finale: base_url/endpoint/?k=v&k=v
        Les booléens sont encodés en 1/0, les valeurs None ignorées par requests.
        """
        url = f"{self.base_url}/{endpoint.strip('/')}/"
        encoded = {key: encode_query_value(value) for key, value in (params or {}).items()}
        return requests.Request("GET", url, params=encoded).prepare().url

    def get(self, url: str) -> requests.Response:
        try:
            response = requests.get(url, verify=self.verify_tls)
        except requests.RequestException as e:
            logger.warning("HTTP transport error on %s: %s", url.split("?", 1)[0], redact_api_key(str(e)))
            raise TransportError(str(e)) from e

        logger.debug("⬅️ Response %s: %s", response.status_code, response.text[:300])
        return response
