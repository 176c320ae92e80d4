"""Response objects for the score and insights services.

Every field is optional: the service omits whatever it has no data for, and
an omitted field reads back as ``None``.
"""

from .base import ResponseModel
from .geoip import (
    City,
    Continent,
    Country,
    Location,
    MaxMind,
    Postal,
    RepresentedCountry,
    Subdivision,
    Traits,
)


class ServiceWarning(ResponseModel):
    """A non-fatal problem with the request, e.g. an unrecognized input value."""

    code: str | None = None
    warning: str | None = None
    input_pointer: str | None = None


class ScoreIpAddress(ResponseModel):
    risk: float | None = None


class IpAddress(ScoreIpAddress):
    city: City | None = None
    continent: Continent | None = None
    country: Country | None = None
    location: Location | None = None
    maxmind: MaxMind | None = None
    postal: Postal | None = None
    registered_country: Country | None = None
    represented_country: RepresentedCountry | None = None
    subdivisions: list[Subdivision] | None = None
    traits: Traits | None = None

    @property
    def most_specific_subdivision(self) -> Subdivision | None:
        if not self.subdivisions:
            return None
        return self.subdivisions[-1]


class Issuer(ResponseModel):
    name: str | None = None
    matches_provided_name: bool | None = None
    phone_number: str | None = None
    matches_provided_phone_number: bool | None = None


class CreditCard(ResponseModel):
    issuer: Issuer | None = None
    country: str | None = None
    is_issued_in_billing_address_country: bool | None = None
    is_prepaid: bool | None = None


class BillingAddress(ResponseModel):
    is_postal_in_city: bool | None = None
    latitude: float | None = None
    longitude: float | None = None
    distance_to_ip_location: int | None = None
    is_in_ip_country: bool | None = None


class ShippingAddress(BillingAddress):
    is_high_risk: bool | None = None
    distance_to_billing_address: int | None = None


class Subscores(ResponseModel):
    """Risk of the individual components behind the overall risk score.

    Each value, when present, is in the range 0.01 to 99. Values are passed
    through as returned.
    """

    avs_result: float | None = None
    billing_address: float | None = None
    billing_address_distance_to_ip_location: float | None = None
    browser: float | None = None
    # only for accounts that send chargeback data
    chargeback: float | None = None
    country: float | None = None
    country_mismatch: float | None = None
    cvv_result: float | None = None
    email_address: float | None = None
    email_domain: float | None = None
    email_tenure: float | None = None
    ip_tenure: float | None = None
    issuer_id_number: float | None = None
    order_amount: float | None = None
    phone_number: float | None = None
    shipping_address_distance_to_ip_location: float | None = None
    time_of_day: float | None = None


class Score(ResponseModel):
    id: str | None = None
    risk_score: float | None = None
    credits_remaining: int | None = None
    ip_address: ScoreIpAddress | None = None
    warnings: list[ServiceWarning] | None = None


class Insights(Score):
    ip_address: IpAddress | None = None
    credit_card: CreditCard | None = None
    billing_address: BillingAddress | None = None
    shipping_address: ShippingAddress | None = None
    subscores: Subscores | None = None
