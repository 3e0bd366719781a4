"""Adventure data sources."""

from pyprole.stores.base import AdventureStore
from pyprole.stores.memory import LatencyProfile, MemoryAdventureStore
from pyprole.stores.remote import RemoteAdventureStore
from pyprole.stores.seed import SAMPLE_ADVENTURES, seed_records

__all__ = [
    "AdventureStore",
    "LatencyProfile",
    "MemoryAdventureStore",
    "RemoteAdventureStore",
    "SAMPLE_ADVENTURES",
    "seed_records",
]
