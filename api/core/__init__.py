"""
Shared, cross-cutting code for the API.

`core/` holds the building blocks every feature uses (DB pool and query
helpers, SQL builders, payload validation, error envelope, settings, logging,
schema migration). Keep entity-specific SQL and business logic in the
corresponding feature package (e.g. `news/`).
"""
