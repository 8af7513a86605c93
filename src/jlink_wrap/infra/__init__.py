"""Infrastructure layer — operating-system integration.

This layer locates the ``jlink`` executable and runs it.  Every raw
``OSError`` must be caught here and re-raised as a
:class:`~jlink_wrap.exceptions.JlinkWrapError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from jlink_wrap.infra.jlink_locator import JlinkStatus, locate_jlink, require_jlink
from jlink_wrap.infra.process_runner import SubprocessRunner

__all__: list[str] = [
    "JlinkStatus",
    "SubprocessRunner",
    "locate_jlink",
    "require_jlink",
]
