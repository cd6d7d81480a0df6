"""Domain layer for user management.

This package holds the business rules of the service, decoupled from any
delivery mechanism and from the infrastructure adapters.
"""
