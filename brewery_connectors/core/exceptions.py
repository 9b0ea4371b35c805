# brewery_connectors/core/exceptions.py
class APIError(Exception):
    """Erreur lors de l'appel d'une API externe"""
    pass


class ValidationError(APIError, ValueError):
    """Combinaison d'arguments invalide, détectée avant tout appel réseau."""
    pass


class TransportError(APIError):
    """L'appel HTTP lui-même a échoué (connexion, DNS, TLS...)."""

    def __init__(self, description: str):
        self.description = description
        super().__init__(f"HTTP transport error: {description}")


class ServiceError(APIError):
    """Le serveur a répondu avec une enveloppe d'erreur {"error": {"message": ...}}."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Brewerydb Service Error: {message}")
