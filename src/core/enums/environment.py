"""Application environment types.

Defines the runtime environments for the console API.
Used by Settings to determine environment-specific behavior
(log rendering, cookie security flags).

Environments:
- DEVELOPMENT: Local development, human-readable logs, non-secure cookies
- TESTING: Automated test execution
- CI: Continuous integration
- PRODUCTION: Production deployment, secure cookies, JSON logs
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
