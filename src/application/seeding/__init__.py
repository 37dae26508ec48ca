"""Initial data seeding.

Exports:
    DataSeeder: Idempotent seeding workflow
    SeedReport: Counts of what a run inserted
"""

from src.application.seeding.data_seeder import DataSeeder, SeedReport

__all__ = ["DataSeeder", "SeedReport"]
