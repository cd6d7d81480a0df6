"""User domain module.

This domain manages user identity, contact data, account status and the
audit trail of domain events emitted by the User aggregate.
"""
