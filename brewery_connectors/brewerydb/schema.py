from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


BREWERYDB_BASE_URL = "http://brewerydb.com/api"


class ResponseFormat(str, Enum):
    """Formats de réponse acceptés par l'API. Seul json est décodé."""
    JSON = "json"
    XML = "xml"


class ClientConfig(BaseModel):
    """Configuration immuable d'un client BreweryDB."""
    api_key: str            = Field(..., description="Clé API BreweryDB")
    format: ResponseFormat  = Field(ResponseFormat.JSON, description="Format de réponse demandé (json|xml)")
    base_url: str           = Field(BREWERYDB_BASE_URL, description="URL de base de l'API")

    model_config = ConfigDict(frozen=True)
