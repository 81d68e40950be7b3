"""Tests for the record-store command line tool."""
