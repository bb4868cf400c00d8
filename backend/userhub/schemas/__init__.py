"""Pydantic schemas for the HTTP surfaces."""
