"""Test suite for Seedbed.

Test structure follows the test pyramid:
- unit/: Unit tests - seeding logic, entities and wiring with mocked ports
- integration/: Integration tests - repositories and seeding on SQLite
  (aiosqlite) and Redis (fakeredis)
- api/: API tests - application lifespan and system endpoints
"""
