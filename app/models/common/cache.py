"""API cache table - expiring cache of computed bundles."""

CACHE_DDL = """
CREATE TABLE IF NOT EXISTS api_cache (
    key VARCHAR PRIMARY KEY,
    data VARCHAR NOT NULL,
    expires_at TIMESTAMP NOT NULL,
    computed_at TIMESTAMP NOT NULL
)
"""
