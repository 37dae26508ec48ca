"""Domain layer - Pure business logic.

This layer contains the core entities and protocols (ports). The domain layer
has NO dependencies on any framework or infrastructure - it is pure Python.

Structure:
- entities/: Domain entities (reference geography, sites, roles, users)
- protocols/: Domain protocols (repository interfaces, service interfaces)
"""
