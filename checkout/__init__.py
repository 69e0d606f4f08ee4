"""Checkout orchestration core - domain, application, infrastructure, settings."""
