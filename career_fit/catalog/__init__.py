"""Career catalog loading.

Public API:
    - CatalogService: Load, look up and validate career catalogs
    - parse_catalog: Validate raw catalog data
"""

from career_fit.catalog.loader import CatalogService, parse_catalog

__all__ = ["CatalogService", "parse_catalog"]
