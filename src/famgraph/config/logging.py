"""Log routing for famgraph.

Modules log through ``logging.getLogger(__name__)``. This module renders
those records with structlog's ``ProcessorFormatter``: console lines by
default, one JSON object per line with ``--log-json``. Every line carries
the dataset the graph was built from, so a ``dot`` invocation logged by
the renderer can be tied back to its input.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import structlog
from structlog.types import Processor

SAMPLE_DATASET = "sample"


def _pre_chain() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]


def _line_renderer(log_json: bool) -> Processor:
    if log_json:
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    dataset: Path | None = None,
) -> None:
    """Send log records to stderr, replacing any previous famgraph setup.

    Only the ``famgraph`` logger drops to DEBUG with *verbose*; third-party
    loggers such as ``networkx`` stay at WARNING.

    Args:
        verbose: Show famgraph DEBUG records (renderer argv, build counts).
        log_json: Render JSON lines instead of console lines.
        dataset: Dataset file bound to every line; ``None`` means the
            built-in sample.
    """
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_pre_chain(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _line_renderer(log_json),
        ],
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger("famgraph").setLevel(logging.DEBUG if verbose else logging.WARNING)

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        dataset=str(dataset) if dataset is not None else SAMPLE_DATASET
    )
