from polywire.utils.trackers.backends.tensorboard import TBBackend
from polywire.utils.trackers.base import LogWriter
from polywire.utils.trackers.configs import TBConfig
from polywire.utils.trackers.core import GenericLogger, LoggerBackend


def init_tb(
    cfg: TBConfig, *, queue_size: int = 8192, flush_secs: float = 3.0
) -> GenericLogger:
    """Create a tensorboardX-backed writer for search progress."""
    return GenericLogger(TBBackend(cfg), queue_size=queue_size, flush_secs=flush_secs)


__all__ = [
    "GenericLogger",
    "LogWriter",
    "LoggerBackend",
    "TBBackend",
    "TBConfig",
    "init_tb",
]
