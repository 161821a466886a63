import logging
import os
from dataclasses import dataclass, field, replace
from typing import Optional

from .errors import InvalidArgumentError

DEGREE_ENV_VAR = 'LAZINQ_DEGREE'

logger = logging.getLogger(__name__)


def default_degree() -> int:
    """hardware concurrency, unless overridden through the environment"""
    configured = os.environ.get(DEGREE_ENV_VAR)
    if configured:
        try:
            return int(configured)
        except ValueError:
            logger.warning(f"ignoring {DEGREE_ENV_VAR}={configured!r}: not an integer")
    return os.cpu_count() or 1


@dataclass(frozen=True)
class ParallelOptions:
    """configuration for parallel query execution"""
    degree: int = field(default_factory=default_degree)
    ordered: bool = False
    partition_size: Optional[int] = None  # None = split evenly across workers

    def resolve(self, item_count: int) -> 'ParallelOptions':
        """validate and fill in the partition size for a buffered source of item_count elements"""
        if self.degree < 1:
            raise InvalidArgumentError(f"degree of parallelism must be at least 1, got {self.degree}")
        if self.partition_size is not None and self.partition_size < 1:
            raise InvalidArgumentError(f"partition size must be at least 1, got {self.partition_size}")
        if self.partition_size is not None:
            return self
        # ceil division, never below one element per partition
        size = max(-(-item_count // self.degree), 1)
        return replace(self, partition_size=size)
