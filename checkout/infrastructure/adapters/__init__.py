"""Concrete adapters for the checkout ports."""
