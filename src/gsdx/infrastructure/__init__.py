"""Infrastructure layer — database engine, schema, repositories, health.

This layer depends on stdlib, the domain layer, SQLAlchemy, and structlog.
It must never import from services, usecases, commands, api, or output.
"""
