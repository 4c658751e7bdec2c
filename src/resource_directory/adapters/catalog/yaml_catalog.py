"""Catalog source reading YAML content files."""

from pathlib import Path
from typing import Any, Callable, TypeVar

import yaml

from resource_directory.core import (
    CatalogSource,
    Entry,
    LibraryItem,
    SchemaError,
    parse_library_item,
    parse_recommendation,
)

T = TypeVar("T")


class YamlCatalogSource(CatalogSource):
    """Load catalog records from a content directory.

    Layout::

        content/
            recommendations/*.yaml
            library/*.yaml

    Each file holds either one record or a list of records.
    """

    def __init__(self, content_dir: Path) -> None:
        self.content_dir = content_dir

    def load_recommendations(self) -> list[Entry]:
        return self._load_collection("recommendations", parse_recommendation)

    def load_library(self) -> list[LibraryItem]:
        return self._load_collection("library", parse_library_item)

    def _load_collection(self, name: str, parse: Callable[[dict[str, Any]], T]) -> list[T]:
        """Parse every record of a collection, skipping invalid ones."""
        collection_dir = self.content_dir / name
        if not collection_dir.is_dir():
            return []

        records: list[T] = []
        skipped = 0

        for path in self._content_files(collection_dir):
            try:
                with open(path, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
                print(f"⚠️  Warning: Could not read {path}: {e}")
                skipped += 1
                continue

            if data is None:
                continue

            raw_records = data if isinstance(data, list) else [data]
            for index, raw in enumerate(raw_records):
                try:
                    records.append(parse(raw))
                except SchemaError as e:
                    print(f"⚠️  Warning: Skipping record {index} in {path.name}: {e}")
                    skipped += 1

        if skipped:
            print(f"  └─ {name}: {len(records)} loaded, {skipped} skipped")

        return records

    @staticmethod
    def _content_files(collection_dir: Path) -> list[Path]:
        files = [*collection_dir.glob("*.yaml"), *collection_dir.glob("*.yml")]
        return sorted(files, key=lambda p: p.name)
