# backend/app/__init__.py
"""
CRM workspace backend application package.

This package contains:
- main: FastAPI application entrypoint
- db: SQLite store, schema bootstrap and embedded JSON codec
- users / clients / projects / tasks / leads / notifications: one package per entity
"""
