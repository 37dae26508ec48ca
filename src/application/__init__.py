"""Application layer - Use cases and orchestration.

Structure:
- seeding/: Initial data builders and the idempotent DataSeeder
- services/: Tenant resolvers used by the seeder
- errors/: SeedingError hierarchy

The application layer orchestrates domain entities through protocols and
depends on no infrastructure.
"""
