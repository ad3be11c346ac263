"""Routing — file paths to route patterns, ordered table, request matching.

Patterns are derived and sorted once when the table is built; matching
is a read-only walk over that table.
"""
