"""Versioned API."""
