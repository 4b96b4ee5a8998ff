"""File cataloging."""

from repokit.catalog.walker import iter_catalog, write_catalog

__all__ = ["iter_catalog", "write_catalog"]
