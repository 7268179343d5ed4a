"""Schemas — Pydantic models at the API boundary (request bodies and responses)."""
