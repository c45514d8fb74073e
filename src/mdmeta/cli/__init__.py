"""Command line interface for mdmeta."""
