"""Shared pytest configuration for the jlink-wrap test suite.

Guidelines
----------
* No JDK required — ``jlink`` discovery and execution are mocked at the
  infra boundary; real subprocess tests use the running interpreter.
* Core tests must be pure apart from ``tmp_path`` existence checks.
* Tests must not depend on ``JAVA_HOME`` or ``JLINK_DRY_RUN`` from the
  outer environment.
"""

from __future__ import annotations
