"""
Movies API - REST backend for movies and users.

Main entry point for building listing orchestrators and the HTTP app.
"""

__version__ = "1.0.0"

from movie_api.orchestrator import ListingOrchestrator
from movie_api.query import QueryTranslator

__all__ = ["ListingOrchestrator", "QueryTranslator", "__version__"]
