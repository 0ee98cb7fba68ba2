"""
Pydantic schema definitions for API payloads.

Schemas are separated from the storage layer to decouple the API
representation (including derived attributes) from persistence.
"""
