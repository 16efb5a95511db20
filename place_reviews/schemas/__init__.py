"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - JSON keys are camelCase (alias_generator=to_camel); Python attributes stay snake_case
    - Schemas check shape and types only; domain rules are re-checked in core/
"""
