# -*- coding: utf-8 -*-
"""Configs for puzzle generation."""
from dataclasses import dataclass, field
from typing import Dict, Optional

from omegaconf import OmegaConf

from sudoku_csp.common.constants import CELL_COUNT, DEFAULT_REMOVAL_COUNTS, Difficulty
from sudoku_csp.common.random_provider import SEEDED_PROVIDERS
from sudoku_csp.utils.log import get_logger

logger = get_logger(__name__)


@dataclass
class GeneratorConfig:
    """Config for `PuzzleGenerator`."""

    difficulty: str = Difficulty.MEDIUM.value
    seed: Optional[int] = None
    # one of `SEEDED_PROVIDERS`
    random_provider: str = "python"
    removal_counts: Dict[str, int] = field(default_factory=lambda: dict(DEFAULT_REMOVAL_COUNTS))
    log_level: str = "INFO"

    def removal_count(self, difficulty) -> int:
        """Number of cells to clear for `difficulty`, unknown labels use medium."""
        difficulty = Difficulty.parse(difficulty)
        return self.removal_counts.get(
            difficulty.value, DEFAULT_REMOVAL_COUNTS[difficulty.value]
        )

    def validate(self) -> None:
        if self.random_provider not in SEEDED_PROVIDERS:
            raise ValueError(
                f"Invalid random provider: {self.random_provider}, "
                f"expected one of {list(SEEDED_PROVIDERS)}"
            )
        known = {d.value for d in Difficulty}
        counts = {}
        for name, count in self.removal_counts.items():
            key = str(name).lower()
            if key not in known:
                raise ValueError(f"Invalid difficulty in `removal_counts`: {name}")
            if count < 0:
                raise ValueError(f"`removal_counts.{key}` must be non-negative, got {count}")
            if count > CELL_COUNT:
                logger.warning(
                    f"`removal_counts.{key}` = {count} exceeds {CELL_COUNT}, clamped to {CELL_COUNT}."
                )
                count = CELL_COUNT
            counts[key] = count
        self.removal_counts = counts
        if self.difficulty.lower() not in known:
            logger.warning(f"Unknown difficulty `{self.difficulty}`, falling back to medium.")
            self.difficulty = Difficulty.MEDIUM.value
        else:
            self.difficulty = self.difficulty.lower()


def load_config(config_path: str) -> GeneratorConfig:
    """Load a `GeneratorConfig` from a YAML file."""
    schema = OmegaConf.structured(GeneratorConfig)
    try:
        yaml_config = OmegaConf.load(config_path)
        config = OmegaConf.merge(schema, yaml_config)
        config = OmegaConf.to_object(config)
    except Exception as e:
        raise ValueError(f"Invalid configuration: {e}") from e
    config.validate()
    return config
