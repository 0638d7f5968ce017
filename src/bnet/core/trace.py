# src/bnet/core/trace.py
"""
Running estimates recorded at draw checkpoints, for convergence plots.
"""

from dataclasses import dataclass, field

import pandas as pd
from rich.console import Console
from rich.table import Table

from bnet.config import DEFAULT_CHECKPOINT


@dataclass
class ConvergenceTrace:
    every: int = DEFAULT_CHECKPOINT
    # method -> [(draw, estimate or None)]
    points: dict[str, list[tuple[int, float | None]]] = field(default_factory=dict)

    def __post_init__(self):
        if self.every < 1:
            raise ValueError("Checkpoint interval must be at least 1")

    def should_record(self, draw: int, total: int) -> bool:
        return draw % self.every == 0 or draw == total

    def record(self, method: str, draw: int, estimate: float | None) -> None:
        self.points.setdefault(method, []).append((draw, estimate))

    @property
    def methods(self) -> list[str]:
        return list(self.points.keys())

    def rows(self) -> list[dict]:
        by_draw: dict[int, dict] = {}
        for method, points in self.points.items():
            for draw, estimate in points:
                by_draw.setdefault(draw, {"draw": draw})[method] = estimate
        return [by_draw[d] for d in sorted(by_draw)]

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(self.rows(), columns=["draw"] + self.methods)

    def to_csv(self, path) -> None:
        self.to_dataframe().to_csv(path, index=False)

    def print_table(self, console: Console | None = None) -> None:
        console = console or Console()
        table = Table(title="Convergence")
        table.add_column("draw", justify="right")
        for method in self.methods:
            table.add_column(method, justify="right")

        for row in self.rows():
            cells = [f"{row['draw']:,}"]
            for method in self.methods:
                value = row.get(method)
                cells.append("-" if value is None else f"{value:.4f}")
            table.add_row(*cells)

        console.print(table)
