"""Boundary adapters: database, provider API and artifact storage."""
