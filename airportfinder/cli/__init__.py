"""
AirportFinder CLI module
"""

from .app import app, main
from .config import SearchOptions

__all__ = ["app", "main", "SearchOptions"]
