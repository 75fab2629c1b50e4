import os
import yaml
from pathlib import Path
from dotenv import load_dotenv
from pydantic import BaseModel, Field
from typing import Optional, Union

from arcothello.core.constants import (
    DEFAULT_WIDTH, DEFAULT_HEIGHT, MIN_SIZE, DEFAULT_DEPTH, ENGINE_NAME,
    CORNER_BONUS, WALL_MALUS, CORNER_GIVING_MALUS, RISKY_TERRITORY_MALUS,
    EARLY_ROUNDS, BLOCKING_OPPONENT,
)

load_dotenv()

CONFIG_ENV = "ARCOTHELLO_CONFIG"
DEFAULT_CONFIG_PATH = Path(__file__).parent / "engine.yaml"


class HeuristicWeights(BaseModel):
    corner_bonus: float = CORNER_BONUS
    wall_malus: float = WALL_MALUS
    corner_giving_malus: float = CORNER_GIVING_MALUS
    risky_territory_malus: float = RISKY_TERRITORY_MALUS
    early_rounds: int = Field(default=EARLY_ROUNDS, gt=0)
    blocking_opponent: float = BLOCKING_OPPONENT


class EngineSettings(BaseModel):
    name: str = ENGINE_NAME
    width: int = Field(default=DEFAULT_WIDTH, ge=MIN_SIZE, le=26)  # one letter per column
    height: int = Field(default=DEFAULT_HEIGHT, ge=MIN_SIZE)
    default_depth: int = Field(default=DEFAULT_DEPTH, ge=1)
    weights: HeuristicWeights = Field(default_factory=HeuristicWeights)


def load_settings(path: Optional[Union[str, Path]] = None) -> EngineSettings:
    """
    Reads engine settings from YAML.
    Lookup order: explicit path, $ARCOTHELLO_CONFIG, the bundled engine.yaml.
    """
    if path is None:
        path = os.getenv(CONFIG_ENV) or DEFAULT_CONFIG_PATH
    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}
    return EngineSettings(**data.get("engine", {}))


# Singleton instance
settings = load_settings()
