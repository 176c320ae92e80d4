"""Request objects sent to the minFraud service."""

from .builder import Builder
from .models import (
    Account,
    Billing,
    CreditCard,
    DeliverySpeed,
    Device,
    Email,
    Event,
    EventType,
    MinFraudRequest,
    MinFraudRequestBuilder,
    Order,
    Payment,
    PaymentProcessor,
    Shipping,
    ShoppingCartItem,
)

__all__ = [
    "Account",
    "Billing",
    "Builder",
    "CreditCard",
    "DeliverySpeed",
    "Device",
    "Email",
    "Event",
    "EventType",
    "MinFraudRequest",
    "MinFraudRequestBuilder",
    "Order",
    "Payment",
    "PaymentProcessor",
    "Shipping",
    "ShoppingCartItem",
]
