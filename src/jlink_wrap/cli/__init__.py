"""CLI layer — argument parsing, console output, and error boundary.

This package is the outermost layer of the application.  It may import
from ``config``, ``core`` and ``infra``, but no other layer may import
from ``cli``.
"""
