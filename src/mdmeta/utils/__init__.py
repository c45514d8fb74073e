"""Utility helpers for mdmeta."""

from .dates import coerce_datetime, to_iso8601, utc_now

__all__ = ["coerce_datetime", "to_iso8601", "utc_now"]
