"""
Fantasy name catalog: validation, SQL and HTTP endpoints.
"""
