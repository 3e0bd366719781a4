"""Sample missions used to seed an empty store and the demo fallback."""

from __future__ import annotations

from datetime import UTC, datetime

from pyprole.models.adventure import Adventure, MissionStatus, NewAdventure

SAMPLE_ADVENTURES: tuple[NewAdventure, ...] = (
    NewAdventure(
        title="Birkbeck Tunnel Complex",
        codename="Operation Shadow Vault",
        status=MissionStatus.SCOUTING,
        description=(
            "Classified reconnaissance mission into the abandoned Birkbeck Tunnel system. "
            "Intelligence gathering on underground infrastructure and potential access points."
        ),
        lat=51.5202,
        lng=-0.1298,
        bounty_target=500.00,
        bounty_current=125.50,
    ),
    NewAdventure(
        title="Aldgate East Station",
        codename="Platform Prime",
        status=MissionStatus.GREENLIT,
        description=(
            "Urban exploration mission at the disused Aldgate East platforms. "
            "Full access granted for documentation and photography."
        ),
        lat=51.5154,
        lng=-0.0758,
        bounty_target=300.00,
        bounty_current=180.00,
    ),
    NewAdventure(
        title="Royal Observatory Greenwich",
        codename="Prime Meridian Protocol",
        status=MissionStatus.ACTIVE,
        description=(
            "Active mission to capture the perfect prime meridian alignment shots during the "
            "winter solstice. Limited time window for optimal conditions."
        ),
        lat=51.4769,
        lng=0.0005,
        bounty_target=750.00,
        bounty_current=520.75,
    ),
    NewAdventure(
        title="Leadenhall Market",
        codename="Victorian Echo",
        status=MissionStatus.COMPLETE,
        description=(
            "Completed mission to document the architectural beauty of Leadenhall Market's "
            "Victorian glass ceiling and trading floor history."
        ),
        lat=51.5158,
        lng=-0.0836,
        bounty_target=400.00,
        bounty_current=400.00,
    ),
    NewAdventure(
        title="Crossness Pumping Station",
        codename="Industrial Heartbeat",
        status=MissionStatus.SCOUTING,
        description=(
            "Scouting mission to assess access to the historic Crossness Pumping Station. "
            "Investigating the massive beam engines and Victorian engineering."
        ),
        lat=51.4982,
        lng=0.1234,
        bounty_target=600.00,
        bounty_current=89.25,
    ),
    NewAdventure(
        title="Hampstead Heath Underground Tunnels",
        codename="Subterranean Network",
        status=MissionStatus.GREENLIT,
        description=(
            "Greenlit mission to explore the network of WWII air raid shelters and "
            "Underground Railway extensions beneath Hampstead Heath."
        ),
        lat=51.5590,
        lng=-0.1750,
        bounty_target=800.00,
        bounty_current=345.80,
    ),
)

# Fixed creation dates for the demo records, in SAMPLE_ADVENTURES order.
_SEED_CREATED = (
    datetime(2024, 1, 15, 10, tzinfo=UTC),
    datetime(2024, 1, 10, 10, tzinfo=UTC),
    datetime(2024, 1, 8, 10, tzinfo=UTC),
    datetime(2024, 1, 5, 10, tzinfo=UTC),
    datetime(2024, 1, 12, 10, tzinfo=UTC),
    datetime(2024, 1, 7, 10, tzinfo=UTC),
)
_SEED_UPDATED = datetime(2024, 1, 15, 10, tzinfo=UTC)


def seed_records() -> list[Adventure]:
    """Demo records with ids ``"1"`` to ``"6"``, fresh objects each call."""
    return [
        Adventure(
            id=str(index),
            created_at=created,
            updated_at=_SEED_UPDATED,
            **sample.model_dump(),
        )
        for index, (sample, created) in enumerate(zip(SAMPLE_ADVENTURES, _SEED_CREATED, strict=True), start=1)
    ]
