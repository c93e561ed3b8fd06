"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every feature uses (DB pool,
settings, logging, error rendering). Feature-specific SQL and business logic
live in the feature packages (`vehicles/`, `odometer/`).
"""
