"""Authentication strategies for La Poste APIs."""
from .base import AuthStrategy
from .bearer import BearerTokenAuth

__all__ = ["AuthStrategy", "BearerTokenAuth"]
