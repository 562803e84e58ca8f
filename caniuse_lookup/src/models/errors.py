"""Errors raised while looking up compatibility data"""

from typing import Optional


class CompatLookupError(Exception):
    """Base error for caniuse lookups"""
    pass


class NetworkError(CompatLookupError):
    """Connection failure, timeout or unsuccessful HTTP status"""
    pass


class ParseError(CompatLookupError):
    """Response body is not JSON or does not have the expected shape"""
    pass


class EmptyResultError(CompatLookupError):
    """The search term matched no features"""

    def __init__(self, message: str, search_term: Optional[str] = None):
        super().__init__(message)
        self.search_term = search_term
