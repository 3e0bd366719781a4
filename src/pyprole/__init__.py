"""pyprole - Async data layer for the Prole Adventures site."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyprole")
except PackageNotFoundError:
    __version__ = "0+local"
from pyprole.client import ProleClient
from pyprole.config import ProleConfig
from pyprole.exceptions import (
    ProleApiError,
    ProleConfigError,
    ProleContentError,
    ProleDataError,
    ProleDuplicateError,
    ProleError,
    ProleNotFoundError,
    ProleTransportError,
)
from pyprole.models import (
    STATUS_STYLES,
    Adventure,
    MissionStats,
    MissionStatus,
    NewAdventure,
    Projection,
    RedactionReport,
    SubmissionResult,
    SubscribeOutcome,
)
from pyprole.policy import apply_coordinate_jitter, is_redacted, mission_stats, project, validate_redaction
from pyprole.service import MissionControl, MissionLoad, SourceOutcome
from pyprole.sitemap import generate_sitemap
from pyprole.stores import MemoryAdventureStore, RemoteAdventureStore

__all__ = [
    "__version__",
    "Adventure",
    "MemoryAdventureStore",
    "MissionControl",
    "MissionLoad",
    "MissionStats",
    "MissionStatus",
    "NewAdventure",
    "ProleApiError",
    "ProleClient",
    "ProleConfig",
    "ProleConfigError",
    "ProleContentError",
    "ProleDataError",
    "ProleDuplicateError",
    "ProleError",
    "ProleNotFoundError",
    "ProleTransportError",
    "Projection",
    "RedactionReport",
    "RemoteAdventureStore",
    "STATUS_STYLES",
    "SourceOutcome",
    "SubmissionResult",
    "SubscribeOutcome",
    "apply_coordinate_jitter",
    "generate_sitemap",
    "is_redacted",
    "mission_stats",
    "project",
    "validate_redaction",
]
