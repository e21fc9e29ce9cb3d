"""Adapters that read excuse datasets from concrete storage."""
