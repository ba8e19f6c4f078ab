"""Configuration schema for the game and the machine player."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from connect_four.games.connect4.constants import MAX_DEPTH


@dataclass
class SearchConfig:
    depth: int = MAX_DEPTH
    use_alpha_beta: bool = True
    use_opening_book: bool = True

    def __post_init__(self) -> None:
        if self.depth < 1:
            raise ValueError(f"search.depth must be >= 1, got {self.depth}")


@dataclass
class PlayConfig:
    # None: ask at the start of the game.
    human_first: Optional[bool] = None


@dataclass
class MetricsConfig:
    log_dir: Optional[str] = None


@dataclass
class AppConfig:
    search: SearchConfig = field(default_factory=SearchConfig)
    play: PlayConfig = field(default_factory=PlayConfig)
    metrics: MetricsConfig = field(default_factory=MetricsConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        search_data = data.get("search") or {}
        search = SearchConfig(
            depth=int(search_data.get("depth", MAX_DEPTH)),
            use_alpha_beta=bool(search_data.get("use_alpha_beta", True)),
            use_opening_book=bool(search_data.get("use_opening_book", True)),
        )

        play_data = data.get("play") or {}
        human_first = play_data.get("human_first")
        play = PlayConfig(human_first=None if human_first is None else bool(human_first))

        metrics_data = data.get("metrics") or {}
        log_dir = metrics_data.get("log_dir")
        metrics = MetricsConfig(log_dir=None if log_dir is None else str(log_dir))

        return cls(search=search, play=play, metrics=metrics)


def load_config(path: Union[str, Path]) -> AppConfig:
    """Load AppConfig from a YAML file."""
    path = Path(path)
    with path.open() as f:
        data = yaml.safe_load(f)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a YAML mapping, got {type(data)}")
    return AppConfig.from_dict(data)
