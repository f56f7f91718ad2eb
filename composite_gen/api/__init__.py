"""Catalog-to-source generation pipeline. The entry points live in composite_gen.api.generator."""
