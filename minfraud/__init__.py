"""Client library for the minFraud score and insights web services."""

from .client import MinFraudClient
from .config import Settings
from .errors import (
    AuthenticationError,
    HttpError,
    InsufficientFundsError,
    InvalidFieldError,
    InvalidRequestError,
    MinFraudError,
    PermissionRequiredError,
    TransportError,
    WebServiceError,
)
from .request import (
    Account,
    Billing,
    CreditCard,
    DeliverySpeed,
    Device,
    Email,
    Event,
    EventType,
    MinFraudRequest,
    Order,
    Payment,
    PaymentProcessor,
    Shipping,
    ShoppingCartItem,
)
from .response import Insights, Score, Subscores
from .version import __version__

__all__ = [
    "Account",
    "AuthenticationError",
    "Billing",
    "CreditCard",
    "DeliverySpeed",
    "Device",
    "Email",
    "Event",
    "EventType",
    "HttpError",
    "Insights",
    "InsufficientFundsError",
    "InvalidFieldError",
    "InvalidRequestError",
    "MinFraudClient",
    "MinFraudError",
    "MinFraudRequest",
    "Order",
    "Payment",
    "PaymentProcessor",
    "PermissionRequiredError",
    "Score",
    "Settings",
    "Shipping",
    "ShoppingCartItem",
    "Subscores",
    "TransportError",
    "WebServiceError",
    "__version__",
]
