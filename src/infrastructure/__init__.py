"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- persistence/: Relational adapters (SQLAlchemy async models and repositories)
- documents/: Document store adapters (JSON documents in Redis)
- security/: Password hashing (bcrypt)
- logging/: Structured logging (structlog)

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
