# brewery_connectors/brewerydb/api_client.py

from typing import Optional, Dict, Any
from pydantic import ValidationError as PydanticValidationError

from brewery_connectors.core.config import get_brewerydb_api_key
from brewery_connectors.core.exceptions import ServiceError, TransportError, ValidationError
from brewery_connectors.core.http_client import HTTPClient
from brewery_connectors.core.logger import get_logger
from brewery_connectors.core.utils import drop_empty_values
from brewery_connectors.brewerydb.schema import ClientConfig, ResponseFormat

logger = get_logger(__name__)

SEARCH_TYPES = ("", "beer", "brewery")


class BreweryDBClient:
    """
    Client pour BreweryDB.

    Stocke la clé API (immuable) et le format de réponse.

    Fournit une méthode par endpoint:
     - list_breweries / get_brewery              /breweries
     - list_beers_for_brewery / list_all_beers   /beers
     - list_all_styles / get_style               /styles
     - list_all_categories / get_category        /categories
     - list_all_glassware / get_glassware        /glassware
     - search                                    /search

    Chaque appel est synchrone et bloquant (une seule requête GET, sans retry
    ni timeout). Les derniers URI / réponse brute / réponse décodée restent
    consultables via get_last_*(). Une instance ne doit pas être partagée
    entre plusieurs threads.
    """

    def __init__(self, api_key: str, response_format: str = "json", http_client: Optional[HTTPClient] = None):
        try:
            self.config = ClientConfig(api_key=str(api_key), format=response_format)
        except PydanticValidationError as e:
            raise ValidationError(f"Format de réponse invalide : {response_format!r} (json ou xml).") from e

        # HTTPClient wrapper (testable / injectable)
        self.http = http_client if http_client is not None else HTTPClient(base_url=self.config.base_url)

        self._last_request_uri: Optional[str] = None
        self._last_raw_response: Optional[str] = None
        self._last_parsed_response: Any = None

    @classmethod
    def from_env(cls, **kwargs) -> "BreweryDBClient":
        """Construit un client à partir de BREWERYDB_API_KEY (environnement ou .env)."""
        return cls(api_key=get_brewerydb_api_key(), **kwargs)

    @property
    def api_key(self) -> str:
        return self.config.api_key

    @property
    def response_format(self) -> str:
        return self.config.format.value

    # ---------------- Breweries ----------------
    def list_breweries(self, page: int = 1, include_metadata: bool = True, since: Optional[str] = None,
                       geo: bool = False, lat: Optional[float] = None, lng: Optional[float] = None,
                       radius: int = 50, units: str = "miles") -> Any:
        """
        Liste les brasseries (50 par page).

        :param since: ne retourne que les brasseries créées depuis cette date (UTC, AAAA-MM-JJ)
        :param geo: recherche géographique; lat et lng deviennent obligatoires
        """
        if geo and (lat is None or lng is None):
            raise ValidationError("If doing a geo search, lat and lng values are required")

        args: Dict[str, Any] = {"page": page, "metadata": include_metadata}
        if since is not None:
            args["since"] = since

        if geo:
            args.update({"geo": 1, "lat": lat, "lng": lng, "radius": radius, "units": units})

        return self._request("breweries", args)

    def get_brewery(self, brewery_id: int = 1, include_metadata: bool = True) -> Any:
        """Retourne une brasserie."""
        return self._request(f"breweries/{brewery_id}", {"metadata": include_metadata})

    # ---------------- Beers ----------------
    def list_beers_for_brewery(self, brewery_id: int, page: int = 1, include_metadata: bool = True,
                               since: Optional[str] = None) -> Any:
        """Liste les bières d'une brasserie."""
        args: Dict[str, Any] = {"brewery_id": brewery_id, "page": page, "metadata": include_metadata}
        if since is not None:
            args["since"] = since
        return self._request("beers", args)

    def list_all_beers(self, page: int = 1, include_metadata: bool = True, since: Optional[str] = None) -> Any:
        args: Dict[str, Any] = {"page": page, "metadata": include_metadata}
        if since is not None:
            args["since"] = since
        return self._request("beers", args)

    # ---------------- Styles / catégories / verres ----------------
    def list_all_styles(self) -> Any:
        return self._request("styles", {})

    def get_style(self, style_id: int) -> Any:
        return self._request(f"styles/{style_id}", {})

    def list_all_categories(self) -> Any:
        return self._request("categories", {})

    def get_category(self, category_id: int) -> Any:
        return self._request(f"categories/{category_id}", {})

    def list_all_glassware(self) -> Any:
        return self._request("glassware", {})

    def get_glassware(self, glassware_id: int) -> Any:
        return self._request(f"glassware/{glassware_id}", {})

    # ---------------- Search ----------------
    def search(self, query: str, type: str = "", include_metadata: bool = True, page: int = 1) -> Any:
        """
        Recherche dans le catalogue.

        :param type: "beer", "brewery" ou vide (tous types), insensible à la casse
        """
        type = (type or "").lower()
        if type not in SEARCH_TYPES:
            raise ValidationError('Type must be either "beer", "brewery", or empty')

        args: Dict[str, Any] = {"q": query, "page": page, "metadata": include_metadata}
        if type:
            args["type"] = type

        return self._request("search", args)

    # ---------------- Pipeline de requête ----------------
    def _request(self, endpoint: str, args: Dict[str, Any]) -> Any:
        """
        Envoie la requête GET et retourne la réponse décodée.
        Lève TransportError si l'appel HTTP échoue, ServiceError si le corps
        contient une enveloppe d'erreur (le code HTTP n'est pas consulté).
        """
        self._last_request_uri = None
        self._last_raw_response = None
        self._last_parsed_response = None

        # apikey et format écrasent toujours les valeurs fournies par l'appelant
        args = {**args, "apikey": self.config.api_key, "format": self.config.format.value}

        # Les arguments vides sont retirés pour que l'API applique ses valeurs par défaut
        args = drop_empty_values(args)

        self._last_request_uri = self.http.build_url(endpoint, args)
        logger.debug("GET %s | params=%s", endpoint, {k: v for k, v in args.items() if k != "apikey"})

        try:
            response = self.http.get(self._last_request_uri)
        except TransportError as e:
            self._last_raw_response = e.description
            raise

        self._last_raw_response = response.text

        # xml est accepté mais pas décodé
        if self.config.format is ResponseFormat.JSON:
            try:
                self._last_parsed_response = response.json()
            except ValueError:
                logger.debug("Réponse non décodable en JSON pour %s", endpoint)
                self._last_parsed_response = None

        error = self._last_parsed_response.get("error") if isinstance(self._last_parsed_response, dict) else None
        if isinstance(error, dict) and "message" in error:
            logger.warning("BreweryDB error on %s: %s", endpoint, error["message"])
            raise ServiceError(error["message"])

        return self.get_last_parsed_response()

    # ---------------- Introspection ----------------
    def get_last_parsed_response(self) -> Any:
        return self._last_parsed_response

    def get_last_raw_response(self) -> Optional[str]:
        return self._last_raw_response

    def get_last_request_uri(self) -> Optional[str]:
        return self._last_request_uri
