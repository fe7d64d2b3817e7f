"""Country expected-lifetime lookup used for the age ceiling"""

from dataclasses import dataclass, field
from typing import Dict, Mapping

from decision_engine.config import Settings
from decision_engine.domain.models import CountryCode

DEFAULT_EXPECTED_LIFETIME = 75


@dataclass(frozen=True)
class ExpectedLifetimeTable:
    """Expected lifetime in years per country, with a fallback for unmapped codes"""

    lifetimes: Mapping[str, int] = field(
        default_factory=lambda: {"EE": 78, "LV": 75, "LT": 76}
    )
    default: int = DEFAULT_EXPECTED_LIFETIME

    @classmethod
    def from_settings(cls, settings: Settings) -> "ExpectedLifetimeTable":
        lifetimes: Dict[str, int] = dict(settings.expected_lifetimes)
        return cls(lifetimes=lifetimes, default=settings.default_expected_lifetime)

    def lookup(self, country: CountryCode | str) -> int:
        key = country.value if isinstance(country, CountryCode) else country
        return self.lifetimes.get(key, self.default)
