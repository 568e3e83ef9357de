"""Cross-cutting utilities."""
