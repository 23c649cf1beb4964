class NaatSearchError(Exception):
    """Base error for naat_search."""


class CatalogError(NaatSearchError):
    """The naat catalogue could not be loaded."""
