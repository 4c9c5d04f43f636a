"""Casbin adapter for role-based rights.

Roles travel in the access token, so a check needs no database access:
``enforce(role, right)`` against the bundled model and policy files.

Rights:
    - getUsers: list and read any user
    - manageUsers: create, update and delete any user
    - manageProducts: create, update and delete products
"""

from pathlib import Path

import casbin

AUTHORIZATION_DIR = Path(__file__).parent
MODEL_PATH = AUTHORIZATION_DIR / "model.conf"
POLICY_PATH = AUTHORIZATION_DIR / "policy.csv"


class CasbinAdapter:
    """Check whether any of a user's roles grants a right.

    Example:
        >>> authz = CasbinAdapter.from_files()
        >>> authz.has_right(["admin"], "manageProducts")
        True
        >>> authz.has_right(["user"], "manageProducts")
        False
    """

    def __init__(self, enforcer: casbin.Enforcer) -> None:
        self._enforcer = enforcer

    @classmethod
    def from_files(
        cls,
        model_path: Path = MODEL_PATH,
        policy_path: Path = POLICY_PATH,
    ) -> "CasbinAdapter":
        """Build an adapter from a model file and a CSV policy file."""
        return cls(casbin.Enforcer(str(model_path), str(policy_path)))

    def has_right(self, roles: list[str], right: str) -> bool:
        return any(self._enforcer.enforce(role, right) for role in roles)
