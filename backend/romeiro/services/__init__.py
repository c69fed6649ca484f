"""Service layer for domain operations."""
