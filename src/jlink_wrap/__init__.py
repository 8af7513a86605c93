"""jlink-wrap — declarative front end for the JDK ``jlink`` tool.

Turns a TOML configuration block into a validated ``jlink`` command
line and runs it as a single synchronous subprocess.
"""

from jlink_wrap.version import __version__

__all__: list[str] = ["__version__"]
