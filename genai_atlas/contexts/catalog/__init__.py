"""
Catalog Context

Responsibilities:
- Defines the dataset records (use cases, frameworks, implementation guide, taxonomy)
- Ships the bundled dataset file
- Loads the dataset once and serves id lookups and facet values (industries, sectors)

Owns: Dataset records, dataset file format, loading
Never: Derives difficulty, filters or scores records
"""

from genai_atlas.contexts.catalog.catalog import Catalog, load_default_catalog
from genai_atlas.contexts.catalog.catalog_data_structure import (
    SECTORS,
    Framework,
    ImplementationGuide,
    InterventionTaxonomy,
    Source,
    UseCase,
)
from genai_atlas.contexts.catalog.exceptions import InvalidCatalogError

__all__ = [
    "Catalog",
    "load_default_catalog",
    "InvalidCatalogError",
    # Data structure classes
    "Framework",
    "ImplementationGuide",
    "InterventionTaxonomy",
    "Source",
    "UseCase",
    "SECTORS",
]
