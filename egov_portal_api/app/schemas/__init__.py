"""
Pydantic schema definitions for API payloads.

Each domain (catalog, contact, reviews, applications, appointments,
elections) defines its own Pydantic models for request bodies and for
validating loaded data.  JSON field names are camelCase; the models
map them to snake_case attributes through aliases.
"""
