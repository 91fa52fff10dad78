class CatalogLoadError(ValueError):
    """Catalog data is missing or malformed. Raised at startup, never per request."""
