"""Listing renderers."""

from resource_directory.adapters.listing.markdown_renderer import MarkdownListingRenderer

__all__ = ["MarkdownListingRenderer"]
