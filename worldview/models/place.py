"""Place-related data models."""

from dataclasses import dataclass

UNKNOWN_REGION = "Unknown"


@dataclass(frozen=True)
class PlaceQuery:
    """A place lookup: location name plus optional region."""

    location_name: str
    region_name: str | None = None

    @property
    def region_label(self) -> str:
        return self.region_name or UNKNOWN_REGION

    @property
    def cache_key(self) -> str:
        """Exact-match, case-preserving cache identity."""
        return f"{self.location_name},{self.region_label}"


@dataclass(frozen=True)
class LocationSuggestion:
    """A place picked by the location-selection agent."""

    country: str
    state: str
    lat: float
    long: float
