"""Configuration layer — TOML discovery, typed settings, logging setup.

This layer depends only on stdlib, pydantic, pydantic-settings, and structlog.
"""
