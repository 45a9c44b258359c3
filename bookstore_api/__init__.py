"""
Bookstore HTTP API: authors, books and users backed by PostgreSQL.
"""

__version__ = "0.1.0"
