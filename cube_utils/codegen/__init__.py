from .classifier import classify
from .aggregator import aggregate_pins
from .grouping import GroupedFamily, group_family
from .loader import CubeDatabaseLoader

__all__ = ["classify", "aggregate_pins", "GroupedFamily", "group_family", "CubeDatabaseLoader"]
