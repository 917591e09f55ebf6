"""
Core infrastructure: configuration, logging, database access, the
backing store and shared error and status types.
"""
