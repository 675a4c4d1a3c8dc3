"""Filtered views and export of scan findings."""
