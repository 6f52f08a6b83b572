"""Runtime configuration.

Defaults come from the dataclass, environment variables override them and
command-line options override both (see ``term_paint.cli.app``).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, Optional

from term_paint.core.constants import DEFAULT_SAVE_FILE

ENV_SAVE_FILE = "TERM_PAINT_FILE"
ENV_LOG_FILE = "TERM_PAINT_LOG_FILE"
ENV_LOG_LEVEL = "TERM_PAINT_LOG_LEVEL"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True, slots=True)
class PaintConfig:
    """
    Settings for an editor session.

    Attributes:
        save_path: File used by the save and load keys
        load_on_start: Overlay save_path onto the canvas before the first frame
        log_file: Where log records go; None disables logging
        log_level: Logging level name
    """
    save_path: Path = Path(DEFAULT_SAVE_FILE)
    load_on_start: bool = False
    log_file: Optional[Path] = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> PaintConfig:
        """Build a config from defaults plus TERM_PAINT_* variables."""
        env = os.environ if environ is None else environ
        config = cls()
        if save_file := env.get(ENV_SAVE_FILE):
            config = replace(config, save_path=Path(save_file).expanduser())
        if log_file := env.get(ENV_LOG_FILE):
            config = replace(config, log_file=Path(log_file).expanduser())
        if log_level := env.get(ENV_LOG_LEVEL):
            config = replace(config, log_level=log_level.upper())
        return config

    def override(self, **changes: object) -> PaintConfig:
        """Return a copy with every non-None change applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def setup_logging(config: PaintConfig) -> None:
    """Route term_paint log records to the configured file.

    The editor owns the terminal, so records never go to the console.
    Without a log file they are dropped.
    """
    root = logging.getLogger("term_paint")
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.propagate = False
    if config.log_file is None:
        root.addHandler(logging.NullHandler())
        return
    level = logging.getLevelName(config.log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.log_level}")
    handler = logging.FileHandler(config.log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)
