"""Casbin role-based authorization."""

from storefront.infrastructure.authorization.casbin_adapter import CasbinAdapter

__all__ = ["CasbinAdapter"]
