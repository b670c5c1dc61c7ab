"""Pydantic Schemas - request/response validation for API endpoints.

Design Decisions:
    - Separate from core records: schemas are API contracts, records are domain values
"""
