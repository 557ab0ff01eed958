"""Async repositories over the ORM models."""
