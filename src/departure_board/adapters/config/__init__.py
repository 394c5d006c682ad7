"""Configuration adapters."""

from departure_board.adapters.config.app_config import AppConfig
from departure_board.adapters.config.train_seed_loader import TrainSeed, TrainSeedLoader

__all__ = ["AppConfig", "TrainSeed", "TrainSeedLoader"]
