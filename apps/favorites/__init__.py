"""Favorites app package.

A user's favorite rooms and vehicles, kept as a set toggled one key at a
time.
"""
