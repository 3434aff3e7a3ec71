"""Soonami - shows the first USGS earthquake for a fixed query."""
