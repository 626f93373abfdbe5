"""Hydration deviation alert backend."""
