"""Core shared kernel.

This module provides foundational pieces used across all architectural layers:
- config: Flat, environment-driven Settings
- enums: Environment and StorageBackend
- container: Composition root (dependency factories, seeding entry point)

Submodules are imported explicitly (e.g. ``from src.core.config import
settings``) so importing the kernel stays free of side effects.
"""
