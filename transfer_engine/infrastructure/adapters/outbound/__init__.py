"""Outbound adapters implementing the application ports."""
