"""Configuration layer — reads the declarative jlink block from TOML.

Rules
-----
* May import from ``core``; never from ``cli`` or ``infra``.
* No user-facing output.
"""

from jlink_wrap.config.loader import dry_run_from_env, find_config, load_config, parse_table

__all__: list[str] = [
    "dry_run_from_env",
    "find_config",
    "load_config",
    "parse_table",
]
