"""
In-memory catalog of the bundled case study dataset.

The dataset is a structured file (YAML or JSON) with four top-level
collections: use_cases, frameworks, implementation_guide and
intervention_taxonomy. It is loaded once and never mutated.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence

from dotenv import load_dotenv
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException
from yaml import YAMLError

from genai_atlas.contexts.catalog.catalog_data_structure import (
    Framework,
    ImplementationGuide,
    InterventionTaxonomy,
    UseCase,
)
from genai_atlas.contexts.catalog.exceptions import InvalidCatalogError
from genai_atlas.contexts.catalog.logger import _log_debug, log_catalog_loaded

load_dotenv()
BUNDLED_DATA_PATH = Path(__file__).parent / "data" / "atlas_data.yaml"
ATLAS_DATA_PATH = Path(os.getenv("ATLAS_DATA_PATH", str(BUNDLED_DATA_PATH)))

COLLECTIONS = ("use_cases", "frameworks", "implementation_guide", "intervention_taxonomy")


class Catalog:
    """
    Immutable collection of use cases and frameworks with an id index.

    Build with Catalog.from_file() for a dataset on disk, or pass records
    directly (as tests do).

    Attributes:
        use_cases: Use cases in dataset order
        frameworks: Frameworks in declaration order (order matters for matching)
        implementation_guide: Implementation guide entries
        intervention_taxonomy: Intervention taxonomy entries
    """

    def __init__(
        self,
        use_cases: Sequence[UseCase],
        frameworks: Sequence[Framework] = (),
        implementation_guide: Sequence[ImplementationGuide] = (),
        intervention_taxonomy: Sequence[InterventionTaxonomy] = (),
    ):
        """
        Raises:
            InvalidCatalogError: If two use cases share an id
        """
        self.use_cases = tuple(use_cases)
        self.frameworks = tuple(frameworks)
        self.implementation_guide = tuple(implementation_guide)
        self.intervention_taxonomy = tuple(intervention_taxonomy)

        self._by_id: Dict[str, UseCase] = {}
        for index, use_case in enumerate(self.use_cases):
            if use_case.id in self._by_id:
                raise InvalidCatalogError(
                    f"Duplicate use case id '{use_case.id}'",
                    collection="use_cases",
                    record_index=index,
                )
            self._by_id[use_case.id] = use_case

    @classmethod
    def from_dict(cls, data: Dict[str, Any], data_path: Path = None) -> "Catalog":
        """
        Build a catalog from the raw top-level mapping of a dataset file.

        Missing collections load as empty.

        Raises:
            InvalidCatalogError: If the mapping or any record is malformed
        """
        if not isinstance(data, dict):
            raise InvalidCatalogError(
                f"Dataset root must be a mapping, got {type(data).__name__}", data_path=data_path
            )

        return cls(
            use_cases=_build_records(data, "use_cases", UseCase.from_dict, data_path),
            frameworks=_build_records(data, "frameworks", Framework.from_dict, data_path),
            implementation_guide=_build_records(
                data, "implementation_guide", ImplementationGuide.from_dict, data_path
            ),
            intervention_taxonomy=_build_records(
                data, "intervention_taxonomy", InterventionTaxonomy.from_dict, data_path
            ),
        )

    @classmethod
    def from_file(cls, data_path: Path) -> "Catalog":
        """
        Load a catalog from a YAML or JSON dataset file.

        Args:
            data_path: Path to dataset file

        Returns:
            Catalog with every record from the file

        Raises:
            FileNotFoundError: If the dataset file doesn't exist
            InvalidCatalogError: If the file can't be parsed or has the wrong shape
        """
        data_path = Path(data_path)
        if not data_path.exists():
            raise FileNotFoundError(f"Dataset not found: {data_path}")

        try:
            data = OmegaConf.to_container(OmegaConf.load(data_path), resolve=True)
        except (OmegaConfBaseException, YAMLError) as e:
            raise InvalidCatalogError(f"Could not parse dataset: {e}", data_path=data_path) from e

        catalog = cls.from_dict(data, data_path=data_path)
        log_catalog_loaded(data_path, catalog)
        return catalog

    def get_use_case_by_id(self, use_case_id: str) -> Optional[UseCase]:
        """Exact id lookup. Returns None when no use case has this id."""
        return self._by_id.get(use_case_id)

    def get_industries(self) -> List[str]:
        """All distinct industries, sorted."""
        return sorted({uc.industry for uc in self.use_cases})

    def get_sectors(self) -> List[str]:
        """All distinct sectors, sorted."""
        return sorted({uc.sector for uc in self.use_cases})

    def __len__(self) -> int:
        return len(self.use_cases)


def _build_records(
    data: Dict[str, Any], collection: str, factory: Callable, data_path: Optional[Path]
) -> List:
    """Run factory over every record of one collection, wrapping failures with their location."""
    raw_records = data.get(collection) or []
    if not isinstance(raw_records, list):
        raise InvalidCatalogError(
            f"'{collection}' must be a list", data_path=data_path, collection=collection
        )

    records = []
    for index, raw in enumerate(raw_records):
        if not isinstance(raw, dict):
            raise InvalidCatalogError(
                "Record must be a mapping",
                data_path=data_path,
                collection=collection,
                record_index=index,
            )
        try:
            records.append(factory(raw))
        except KeyError as e:
            raise InvalidCatalogError(
                f"Missing required field {e}",
                data_path=data_path,
                collection=collection,
                record_index=index,
            ) from e
        except (TypeError, ValueError) as e:
            raise InvalidCatalogError(
                f"Invalid field value: {e}",
                data_path=data_path,
                collection=collection,
                record_index=index,
            ) from e

    _log_debug(f"Parsed {len(records)} {collection} records")
    return records


@lru_cache(maxsize=None)
def load_default_catalog() -> Catalog:
    """
    Load the process-wide catalog from ATLAS_DATA_PATH (bundled dataset by default).

    The dataset is static, so the first load is reused for the lifetime of the process.
    """
    return Catalog.from_file(ATLAS_DATA_PATH)
