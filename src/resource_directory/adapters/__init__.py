"""Adapters for content, rendering and storage."""
