"""Custom exceptions for the catalog context."""

from pathlib import Path
from typing import Optional


class InvalidCatalogError(ValueError):
    """
    Exception raised when a dataset file does not have the expected structure.

    Attributes:
        message: Error description
        data_path: Dataset file being loaded, when known
        collection: Top-level collection the bad record came from (e.g., 'use_cases')
        record_index: Position of the bad record within its collection
    """

    def __init__(
        self,
        message: str,
        data_path: Optional[Path] = None,
        collection: Optional[str] = None,
        record_index: Optional[int] = None,
    ):
        self.message = message
        self.data_path = data_path
        self.collection = collection
        self.record_index = record_index

        parts = [message]

        if collection is not None:
            location = collection if record_index is None else f"{collection}[{record_index}]"
            parts.append(f"Record: {location}")

        if data_path:
            parts.append(f"Dataset: {data_path}")

        super().__init__("\n".join(parts))
