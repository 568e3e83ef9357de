"""Adapters for external identity providers."""
