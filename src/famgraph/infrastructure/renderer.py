"""Renderers turn a DOT description into an image file.

:class:`GraphvizRenderer` pipes the description into the ``dot``
executable. Any object with a matching ``render`` method can stand in
for it, which is how tests avoid spawning processes.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Protocol

from famgraph.domain.errors import RenderUnavailable

logger = logging.getLogger(__name__)


class Renderer(Protocol):
    """Anything that can write *description* as an image at *out_path*."""

    def render(self, description: str, out_path: Path) -> None: ...


class GraphvizRenderer:
    """Render via ``<command> -T<fmt> -o <out_path>`` with the DOT text on stdin."""

    def __init__(self, command: str = "dot", fmt: str = "png") -> None:
        self.command = command
        self.fmt = fmt

    def args(self, out_path: Path) -> list[str]:
        return [self.command, f"-T{self.fmt}", "-o", str(out_path)]

    def render(self, description: str, out_path: Path) -> None:
        """Run the renderer and wait for it to exit.

        Raises:
            RenderUnavailable: The executable is missing or exited non-zero.
        """
        args = self.args(out_path)
        logger.debug("Running renderer: %s", " ".join(args))
        try:
            subprocess.run(
                args,
                input=description,
                capture_output=True,
                text=True,
                check=True,
            )
        except subprocess.CalledProcessError as exc:
            logger.debug("Renderer exited with %s", exc.returncode)
            raise RenderUnavailable(self.command, exc, stderr=(exc.stderr or "").strip()) from exc
        except OSError as exc:
            logger.debug("Renderer could not start: %s", exc)
            raise RenderUnavailable(self.command, exc) from exc
