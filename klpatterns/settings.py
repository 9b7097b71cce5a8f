"""
Settings and configuration for klpatterns.

Values are module constants, some of which can be overridden through
environment variables before the package is imported.
"""

import os

# Debug mode: raises the package logger to DEBUG
DEBUG = os.environ.get("KLPATTERNS_DEBUG", "").lower() in ("1", "true", "yes")

# Word-boundary sentinel wrapped around every word before matching.
# Patterns anchored at the start or end of a word begin or end with it.
BOUNDARY = "."
