"""API module for rkeys commands.

Functions defined here are the single source of truth for the CLI: each
``cmd_*`` returns a StageResult that the CLI layer announces, drives and prints.
"""

__all__ = []
