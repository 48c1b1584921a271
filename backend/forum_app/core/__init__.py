"""
Core infrastructure: configuration, database, logging, errors, security.
"""
