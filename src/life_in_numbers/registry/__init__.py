"""Milestone registry - reference data."""

from life_in_numbers.registry.loader import Registry, RegistryError, build_registry, get_registry

__all__ = ["Registry", "RegistryError", "build_registry", "get_registry"]
