"""
Pydantic schema definitions for API payloads.

Schemas describe request and response bodies and the records kept by
the store.
"""
