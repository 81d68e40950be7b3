"""Command line tool for record-store."""
