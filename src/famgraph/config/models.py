"""Pydantic configuration sections with code-baked defaults.

Sparse TOML contract: defaults live here, famgraph.toml only contains overrides.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel


class RenderConfig(BaseModel):
    """[render] section."""

    model_config = {"frozen": True}

    command: str = "dot"
    format: str = "png"
    output: str = "family_tree.png"
    rankdir: str = "TB"
    shape: str = "box"
    style: str = "rounded"


class DatasetConfig(BaseModel):
    """[dataset] section. Relative paths resolve against the config directory."""

    model_config = {"frozen": True}

    path: Path | None = None


class DemoConfig(BaseModel):
    """[demo] section. Start nodes for the demo traversals."""

    model_config = {"frozen": True}

    trace_start: str = "2"
    sweep_start: str = "1"
