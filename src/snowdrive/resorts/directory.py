# src/snowdrive/resorts/directory.py
from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


@dataclass(frozen=True)
class Resort:
    id: str
    name: str
    slug: str
    country: str
    region: str
    lat: float
    lon: float
    tz: str
    elevation: int  # feet, summit


# west to east, Ikon Pass resorts in North America
RESORTS: Tuple[Resort, ...] = (
    Resort("palisades-tahoe", "Palisades Tahoe", "palisades-tahoe", "US", "California", 39.1978, -120.2357, "America/Los_Angeles", 9045),
    Resort("mammoth-mountain", "Mammoth Mountain", "mammoth-mountain", "US", "California", 37.6308, -119.0326, "America/Los_Angeles", 11053),
    Resort("big-sky", "Big Sky Resort", "big-sky", "US", "Montana", 45.2849, -111.4083, "America/Denver", 11166),
    Resort("jackson-hole", "Jackson Hole", "jackson-hole", "US", "Wyoming", 43.5872, -110.8278, "America/Denver", 10449),
    Resort("alta", "Alta", "alta", "US", "Utah", 40.5885, -111.6387, "America/Denver", 10548),
    Resort("snowbird", "Snowbird", "snowbird", "US", "Utah", 40.5832, -111.6573, "America/Denver", 11000),
    Resort("deer-valley", "Deer Valley", "deer-valley", "US", "Utah", 40.6374, -111.4783, "America/Denver", 9570),
    Resort("solitude", "Solitude Mountain Resort", "solitude", "US", "Utah", 40.6199, -111.5919, "America/Denver", 10035),
    Resort("aspen-snowmass", "Aspen Snowmass", "aspen-snowmass", "US", "Colorado", 39.2130, -106.9479, "America/Denver", 12510),
    Resort("steamboat", "Steamboat", "steamboat", "US", "Colorado", 40.4572, -106.8047, "America/Denver", 10568),
    Resort("winter-park", "Winter Park Resort", "winter-park", "US", "Colorado", 39.8868, -105.7625, "America/Denver", 10800),
    Resort("copper-mountain", "Copper Mountain", "copper-mountain", "US", "Colorado", 39.5021, -106.1506, "America/Denver", 12313),
    Resort("eldora", "Eldora Mountain Resort", "eldora", "US", "Colorado", 39.9372, -105.5828, "America/Denver", 10800),
    Resort("taos", "Taos Ski Valley", "taos", "US", "New Mexico", 36.5928, -105.4467, "America/Denver", 12480),
    Resort("stratton", "Stratton Mountain", "stratton", "US", "Vermont", 43.1136, -72.9083, "America/New_York", 3875),
)

_BY_ID: Mapping[str, Resort] = MappingProxyType({r.id: r for r in RESORTS})
_BY_SLUG: Mapping[str, Resort] = MappingProxyType({r.slug: r for r in RESORTS})


def list_resorts() -> Tuple[Resort, ...]:
    return RESORTS


def get_resort_by_id(resort_id: str) -> Optional[Resort]:
    return _BY_ID.get(resort_id)


def get_resort_by_slug(slug: str) -> Optional[Resort]:
    return _BY_SLUG.get(slug)
