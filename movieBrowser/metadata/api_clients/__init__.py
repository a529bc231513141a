"""
metadata.api_clients
~~~~~~~~~~~~~~~~~~~~
Thin wrappers around external REST APIs.
Clients are built once by the container; nothing here is a global singleton.
"""

from movieBrowser.metadata.api_clients.tmdb_client import TMDBClient, NetworkError

__all__ = ["TMDBClient", "NetworkError"]
