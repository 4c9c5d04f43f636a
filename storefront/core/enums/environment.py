"""Deployment environment names."""

from enum import Enum


class Environment(str, Enum):
    """Environment the service runs in.

    Drives log rendering (console vs JSON) and debug behaviour.
    """

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
