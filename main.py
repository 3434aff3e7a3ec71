"""Cloud Function Entry Point - Root Module.

This is the root-level entry point for Google Cloud Functions.
It imports from the soonami package.
"""

from soonami.main import earthquake_screen

__all__ = [
    "earthquake_screen",
]
