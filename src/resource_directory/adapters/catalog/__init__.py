"""Catalog adapters."""

from resource_directory.adapters.catalog.yaml_catalog import YamlCatalogSource

__all__ = ["YamlCatalogSource"]
