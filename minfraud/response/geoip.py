"""GeoIP2 Insights records embedded in the ``ip_address`` object of an insights response."""

from collections.abc import Sequence

from pydantic import PrivateAttr, ValidationInfo, model_validator

from .base import ResponseModel

DEFAULT_LOCALES: tuple[str, ...] = ("en",)


class NamedRecord(ResponseModel):
    """A record carrying localized ``names``.

    ``name`` picks the first locale from the client's preference list that the
    service returned. The list arrives through the validation context under
    ``"locales"``.
    """

    geoname_id: int | None = None
    names: dict[str, str] | None = None

    _locales: tuple[str, ...] = PrivateAttr(default=DEFAULT_LOCALES)

    @model_validator(mode="after")
    def _bind_locales(self, info: ValidationInfo) -> "NamedRecord":
        locales: Sequence[str] | None = (info.context or {}).get("locales")
        if locales:
            self._locales = tuple(locales)
        return self

    @property
    def name(self) -> str | None:
        if not self.names:
            return None
        for locale in self._locales:
            if locale in self.names:
                return self.names[locale]
        return None


class City(NamedRecord):
    confidence: int | None = None


class Continent(NamedRecord):
    code: str | None = None


class Country(NamedRecord):
    confidence: int | None = None
    iso_code: str | None = None
    is_high_risk: bool | None = None


class RepresentedCountry(NamedRecord):
    iso_code: str | None = None
    type: str | None = None


class Subdivision(NamedRecord):
    confidence: int | None = None
    iso_code: str | None = None


class Location(ResponseModel):
    accuracy_radius: int | None = None
    average_income: int | None = None
    latitude: float | None = None
    longitude: float | None = None
    metro_code: int | None = None
    population_density: int | None = None
    time_zone: str | None = None
    local_time: str | None = None


class Postal(ResponseModel):
    code: str | None = None
    confidence: int | None = None


class Traits(ResponseModel):
    autonomous_system_number: int | None = None
    autonomous_system_organization: str | None = None
    domain: str | None = None
    ip_address: str | None = None
    is_anonymous_proxy: bool | None = None
    is_satellite_provider: bool | None = None
    isp: str | None = None
    organization: str | None = None
    user_type: str | None = None


class MaxMind(ResponseModel):
    queries_remaining: int | None = None
