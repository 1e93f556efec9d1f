"""Logging configuration for command-line entry points."""
import logging
import sys

PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "WARNING", structured: bool = False):
    """
    Configure root logging for the CLI.

    Log records go to stderr so they never interleave with command output on
    stdout. Structured records are already JSON, so they are emitted bare.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(message)s" if structured else PLAIN_FORMAT,
        stream=sys.stderr,
        force=True,
    )
