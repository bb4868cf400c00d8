"""User service backend: record store CRUD plus a read-only search index path."""

__version__ = "0.1.0"
