"""Configuration for the hysteria filter server."""

from dataclasses import dataclass


@dataclass
class Config:
    max_records: int = 10_000
    log_removed: bool = True
