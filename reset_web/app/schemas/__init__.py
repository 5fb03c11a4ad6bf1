"""
Pydantic schema definitions for the backend payloads.

Each resource (services, products, carousel slides, auth, uploads,
contact) defines its own models for request and response bodies.  The
snake_case shapes used by the admin CRUD endpoints are authoritative.
"""
