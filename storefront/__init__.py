"""Storefront e-commerce backend."""
