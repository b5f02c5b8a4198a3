"""Observability helpers for srcgraph."""
