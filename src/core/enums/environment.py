"""Application environment types.

Defines the runtime environments Seedbed can run in. Used by Settings and the
container to pick environment-specific behavior (log rendering, adapters).

Environments:
- DEVELOPMENT: Local development, human-readable logs
- TESTING: Automated test execution against throwaway stores
- CI: Continuous integration runs
- PRODUCTION: Production deployment
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
