"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from stockpos.domain.service.inventory_ledger import DEFAULT_OPERATOR


@dataclass(frozen=True)
class Settings:
    """Configuration for the CLI and the HTTP API.

    ``STOCKPOS_DATA_DIR``             where the CLI keeps its JSON files
    ``STOCKPOS_OPERATOR``             name stamped on history entries
    ``STOCKPOS_LOW_STOCK_THRESHOLD``  products below this count as low stock
    ``STOCKPOS_LOG_LEVEL``            root log level name
    """

    data_dir: Path = Path("data")
    operator: str = DEFAULT_OPERATOR
    low_stock_threshold: int = 10
    log_level: str = "WARNING"

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        raw_threshold = env.get("STOCKPOS_LOW_STOCK_THRESHOLD", "10")
        try:
            threshold = int(raw_threshold)
        except ValueError:
            raise ValueError(
                f"STOCKPOS_LOW_STOCK_THRESHOLD must be an integer, got {raw_threshold!r}"
            ) from None

        return Settings(
            data_dir=Path(env.get("STOCKPOS_DATA_DIR", "data")),
            operator=env.get("STOCKPOS_OPERATOR", "").strip() or DEFAULT_OPERATOR,
            low_stock_threshold=threshold,
            log_level=env.get("STOCKPOS_LOG_LEVEL", "WARNING").upper(),
        )
