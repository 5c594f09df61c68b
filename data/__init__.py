"""Static catalogs and sample data."""

from data.catalog import CATALOG, Catalog
from data.sample_building import SAMPLE_RECORD

__all__ = ["CATALOG", "SAMPLE_RECORD", "Catalog"]
