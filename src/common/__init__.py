"""Shared helpers (HTTP transport, logging) used by registry and versioning modules."""
