"""Background timers that keep a cache bounded."""

from .periodic import PeriodicTask
from .sweeper import Sweeper

__all__ = ["PeriodicTask", "Sweeper"]
