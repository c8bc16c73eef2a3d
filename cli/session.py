"""Dataset session shared by every command (the CLI composition root)."""

from __future__ import annotations

import logging
from functools import cached_property
from pathlib import Path

import typer

from cli.display import error_panel
from complexity_roi.dataset import FileRecord, generate_dataset, load_records_csv
from complexity_roi.exceptions import ComplexityROIError

logger = logging.getLogger(__name__)


class DatasetSession:
    """Owns the one dataset a CLI invocation works on.

    The dataset is built on first access, either by loading and
    validating *input_path* or by running the generator, and is then
    handed to commands by reference.  Commands never build their own.
    Library errors are reported here so command modules stay free of
    error handling.
    """

    def __init__(
        self,
        seed: int | None = None,
        input_path: Path | None = None,
        delay: float = 1.2,
    ) -> None:
        self.seed = seed
        self.input_path = input_path
        self.delay = max(delay, 0.0)

    @cached_property
    def records(self) -> tuple[FileRecord, ...]:
        try:
            if self.input_path is not None:
                records = load_records_csv(self.input_path)
            else:
                records = generate_dataset(seed=self.seed)
                logger.info("Generated %d records (seed=%s)", len(records), self.seed)
        except ComplexityROIError as exc:
            error_panel(f"Cannot load dataset: {exc}")
            raise typer.Exit(code=1)

        if not records:
            error_panel("The dataset is empty.")
            raise typer.Exit(code=1)
        return records
