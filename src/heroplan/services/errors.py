"""Service-layer exceptions."""


class HeroNotFoundError(KeyError):
    """Raised when a hero name is not in the catalog."""
