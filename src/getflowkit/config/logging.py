"""Render getflowkit log records with structlog.

getflowkit modules log through ``logging.getLogger(__name__)``. This
module attaches one stderr handler to the ``getflowkit`` logger whose
formatter is a structlog ``ProcessorFormatter``: console lines by default,
JSON lines with ``--log-json``. The root logger is left to the embedding
application.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAME = "getflowkit"


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer(ensure_ascii=False)
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> logging.Logger:
    """Route the ``getflowkit`` logger tree to stderr and return its root.

    Args:
        verbose: DEBUG level when True, WARNING otherwise.
        log_json: Use the JSON renderer instead of the console renderer.
    """
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(log_json),
        ],
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    kit_logger = logging.getLogger(LOGGER_NAME)
    kit_logger.handlers[:] = [handler]
    kit_logger.propagate = False
    kit_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return kit_logger
