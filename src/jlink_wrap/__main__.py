"""Allow ``python -m jlink_wrap`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m jlink_wrap`` behaves identically to the ``jlink-wrap``
console script.
"""

from __future__ import annotations

from jlink_wrap.cli.app import cli

if __name__ == "__main__":
    cli()
