"""Boundary adapters: relational persistence and external enrichment lookups."""
