"""District model."""

DISTRICT_DDL = """
CREATE TABLE IF NOT EXISTS district (
    code VARCHAR PRIMARY KEY,
    name VARCHAR NOT NULL,
    state_name VARCHAR NOT NULL,
    latitude DOUBLE,
    longitude DOUBLE
)
"""
