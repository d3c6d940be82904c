from polywire.utils.disjoint_set import DisjointSet
from polywire.utils.logger_setup import setup_logger

__all__ = ["DisjointSet", "setup_logger"]
