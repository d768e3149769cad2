"""Adapters (implementations) for the ports-and-adapters architecture."""
