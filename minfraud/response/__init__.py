"""Response objects returned by the minFraud service."""

from .geoip import (
    City,
    Continent,
    Country,
    Location,
    MaxMind,
    NamedRecord,
    Postal,
    RepresentedCountry,
    Subdivision,
    Traits,
)
from .models import (
    BillingAddress,
    CreditCard,
    Insights,
    IpAddress,
    Issuer,
    Score,
    ScoreIpAddress,
    ServiceWarning,
    ShippingAddress,
    Subscores,
)

__all__ = [
    "BillingAddress",
    "City",
    "Continent",
    "Country",
    "CreditCard",
    "Insights",
    "IpAddress",
    "Issuer",
    "Location",
    "MaxMind",
    "NamedRecord",
    "Postal",
    "RepresentedCountry",
    "Score",
    "ScoreIpAddress",
    "ServiceWarning",
    "ShippingAddress",
    "Subdivision",
    "Subscores",
    "Traits",
]
