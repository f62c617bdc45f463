"""Refresh jobs - populate cache and history from the upstream API."""

from etl.refresh import refresh_all, refresh_period, validate_all

__all__ = ["refresh_all", "refresh_period", "validate_all"]
