"""
HTTP API
FastAPI presentation layer over the catalog, auth and audit services.
"""
