"""Unit test configuration.

Unit tests use only in-memory collaborators from the shared fixtures.
"""
