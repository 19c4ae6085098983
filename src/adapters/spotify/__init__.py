"""Adaptador de Spotify (token + catálogo).

Por qué un paquete:
- Separa el intercambio de credenciales de las operaciones de catálogo.
"""

from adapters.spotify.auth import AuthenticatedClient, create_client
from adapters.spotify.catalog import SpotifyCatalog

__all__ = [
    "AuthenticatedClient",
    "SpotifyCatalog",
    "create_client",
]
