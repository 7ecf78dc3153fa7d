"""Markdown document tree with a deterministic serializer."""
