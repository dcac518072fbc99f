"""
Blog List Service root package.

This package contains the FastAPI app entry point (main.py), API routes,
domain logic (models, validation, aggregation), use cases, and the MongoDB
infrastructure.
"""
