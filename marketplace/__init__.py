"""
Marketplace Catalog Backend
Product catalog with cached search, audit trail and single-session authentication.
"""

__version__ = "0.1.0"
