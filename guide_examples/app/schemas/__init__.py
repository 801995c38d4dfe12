"""
Pydantic schema definitions for API payloads.

Schemas are separated from the services that produce them so the JSON
representation does not depend on how the data is stored.
"""
