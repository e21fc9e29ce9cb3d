"""Application layer: ports and the cached dataset store."""
