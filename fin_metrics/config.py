"""
fin_metrics/config.py
=====================
Calculation thresholds and logger setup.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass


@dataclass(frozen=True)
class MetricsConfig:
    # Absolute currency units, independent of company size.
    cash_flow_threshold: float = 1_000_000
    cash_flow_window: int = 5
    profitable_streak_years: int = 3


DEFAULT_CONFIG = MetricsConfig()


def setup_logger(name: str = "fin_metrics", level: int = logging.INFO) -> logging.Logger:
    """Configure and return a logger with a single stream handler."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
