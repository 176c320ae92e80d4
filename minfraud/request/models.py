"""Pydantic models for the request body sent to minFraud.

Field names are the wire names; absent fields are dropped from the JSON body
rather than sent as ``null``. Money amounts stay ``Decimal`` all the way to the
wire and are written as JSON numbers with their exact digits.
"""

import hashlib
from decimal import Decimal
from enum import StrEnum
from typing import Annotated, Any, ClassVar
from urllib.parse import urlsplit

import simplejson
from pydantic import (
    AwareDatetime,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    IPvAnyAddress,
    PlainSerializer,
    ValidationError,
    field_serializer,
    field_validator,
    model_validator,
)

from ..errors import InvalidFieldError
from .builder import Builder


def _float_to_decimal(value: Any) -> Any:
    # 10.3 must become Decimal("10.3"), not the binary expansion
    if isinstance(value, float):
        return Decimal(repr(value))
    return value


NonNegativeDecimal = Annotated[Decimal, BeforeValidator(_float_to_decimal), Field(ge=0)]

# Must carry a UTC offset.
Timestamp = Annotated[
    AwareDatetime,
    PlainSerializer(lambda value: value.isoformat(), return_type=str),
]

WireIpAddress = Annotated[IPvAnyAddress, PlainSerializer(str, return_type=str)]

NonEmptyStr = Annotated[str, Field(min_length=1)]
PhoneCountryCode = Annotated[str, Field(pattern=r"^[0-9]{1,4}$")]
SingleChar = Annotated[str, Field(min_length=1, max_length=1)]


class EventType(StrEnum):
    ACCOUNT_CREATION = "account_creation"
    ACCOUNT_LOGIN = "account_login"
    PURCHASE = "purchase"
    RECURRING_PURCHASE = "recurring_purchase"
    REFERRAL = "referral"
    SURVEY = "survey"


class DeliverySpeed(StrEnum):
    SAME_DAY = "same_day"
    OVERNIGHT = "overnight"
    EXPEDITED = "expedited"
    STANDARD = "standard"


class PaymentProcessor(StrEnum):
    ADYEN = "adyen"
    ALTAPAY = "altapay"
    AMAZON_PAYMENTS = "amazon_payments"
    AUTHORIZENET = "authorizenet"
    BALANCED = "balanced"
    BEANSTREAM = "beanstream"
    BLUEPAY = "bluepay"
    BRAINTREE = "braintree"
    CHASE_PAYMENTECH = "chase_paymentech"
    CIELO = "cielo"
    COLLECTOR = "collector"
    COMPROPAGO = "compropago"
    CONEKTA = "conekta"
    CUENTADIGITAL = "cuentadigital"
    DIBS = "dibs"
    DIGITAL_RIVER = "digital_river"
    ELAVON = "elavon"
    EPAYEU = "epayeu"
    EPROCESSING_NETWORK = "eprocessing_network"
    EWAY = "eway"
    FIRST_DATA = "first_data"
    GLOBAL_PAYMENTS = "global_payments"
    INGENICO = "ingenico"
    INTERNETSECURE = "internetsecure"
    INTUIT_QUICKBOOKS_PAYMENTS = "intuit_quickbooks_payments"
    IUGU = "iugu"
    MASTERCARD_PAYMENT_GATEWAY = "mastercard_payment_gateway"
    MERCADOPAGO = "mercadopago"
    MERCHANT_ESOLUTIONS = "merchant_esolutions"
    MIRJEH = "mirjeh"
    MOLLIE = "mollie"
    MONERIS_SOLUTIONS = "moneris_solutions"
    NMI = "nmi"
    OPENPAYMENTPLATFORM = "openpaymentplatform"
    OPTIMAL_PAYMENTS = "optimal_payments"
    PAYFAST = "payfast"
    PAYGATE = "paygate"
    PAYONE = "payone"
    PAYPAL = "paypal"
    PAYSTATION = "paystation"
    PAYTRACE = "paytrace"
    PAYTRAIL = "paytrail"
    PAYTURE = "payture"
    PAYU = "payu"
    PAYULATAM = "payulatam"
    PINPAYMENTS = "pinpayments"
    PRINCETON_PAYMENT_SOLUTIONS = "princeton_payment_solutions"
    PSIGATE = "psigate"
    QIWI = "qiwi"
    QUICKPAY = "quickpay"
    RABERIL = "raberil"
    REDE = "rede"
    REDPAGOS = "redpagos"
    REWARDSPAY = "rewardspay"
    SAGEPAY = "sagepay"
    SIMPLIFY_COMMERCE = "simplify_commerce"
    SKRILL = "skrill"
    SMARTCOIN = "smartcoin"
    SPS_DECIDIR = "sps_decidir"
    STRIPE = "stripe"
    TELERECARGAS = "telerecargas"
    TOWAH = "towah"
    USA_EPAY = "usa_epay"
    VEREPAY = "verepay"
    VINDICIA = "vindicia"
    VIRTUAL_CARD_SERVICES = "virtual_card_services"
    VME = "vme"
    WORLDPAY = "worldpay"
    OTHER = "other"


class RequestModel(BaseModel):
    """Base for every request object: frozen, strict about unknown fields."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    builder_inputs: ClassVar[tuple[str, ...]] = ()

    @classmethod
    def builder(cls) -> Builder:
        return Builder(cls)

    @classmethod
    def from_dict(cls, data: dict) -> "RequestModel":
        """Parse a wire-shaped dict, raising InvalidFieldError on bad input."""
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise InvalidFieldError.from_validation_error(exc) from exc

    def to_dict(self) -> dict:
        """Wire-shaped dict. Money fields are left as ``Decimal``."""
        return self.model_dump(exclude_none=True)

    def to_json(self) -> str:
        return simplejson.dumps(self.to_dict(), use_decimal=True, separators=(",", ":"))


class Device(RequestModel):
    ip_address: WireIpAddress
    user_agent: str | None = None
    accept_language: str | None = None


class Event(RequestModel):
    transaction_id: str | None = None
    shop_id: str | None = None
    time: Timestamp | None = None
    type: EventType | None = None


class Account(RequestModel):
    """The end user's account on your site.

    Pass ``username`` and only its MD5 hex digest is kept and sent.
    """

    user_id: str | None = None
    username_md5: str | None = Field(default=None, pattern=r"^[0-9a-f]{32}$")

    builder_inputs: ClassVar[tuple[str, ...]] = ("username",)

    @model_validator(mode="before")
    @classmethod
    def _hash_username(cls, data: Any) -> Any:
        if isinstance(data, dict) and "username" in data:
            data = dict(data)
            username = data.pop("username")
            if username is not None:
                data["username_md5"] = hashlib.md5(str(username).encode("utf-8")).hexdigest()
        return data


class Email(RequestModel):
    address: str | None = Field(default=None, pattern=r"^[^@\s]+@[^@\s]+$")
    domain: str | None = Field(
        default=None,
        pattern=r"^([A-Za-z0-9]([A-Za-z0-9-]{0,61}[A-Za-z0-9])?\.)+[A-Za-z0-9-]{2,63}$",
    )


class Location(RequestModel):
    """Fields shared by billing and shipping addresses."""

    first_name: str | None = None
    last_name: str | None = None
    company: str | None = None
    address: str | None = None
    address_2: str | None = None
    city: str | None = None
    region: NonEmptyStr | None = None
    country: NonEmptyStr | None = None
    postal: str | None = None
    phone_number: str | None = None
    phone_country_code: PhoneCountryCode | None = None


class Billing(Location):
    pass


class Shipping(Location):
    delivery_speed: DeliverySpeed | None = None


class Payment(RequestModel):
    processor: PaymentProcessor | None = None
    was_authorized: bool | None = None
    decline_code: str | None = None


class CreditCard(RequestModel):
    issuer_id_number: str | None = Field(default=None, pattern=r"^[0-9]{6}$")
    last_4_digits: str | None = Field(default=None, pattern=r"^[0-9]{4}$")
    bank_name: str | None = None
    bank_phone_country_code: PhoneCountryCode | None = None
    bank_phone_number: str | None = None
    avs_result: SingleChar | None = None
    cvv_result: SingleChar | None = None


class Order(RequestModel):
    amount: NonNegativeDecimal | None = None
    currency: str | None = Field(default=None, pattern=r"^[A-Z]{3}$")
    discount_code: str | None = None
    affiliate_id: str | None = None
    subaffiliate_id: str | None = None
    referrer_uri: str | None = None

    @field_validator("referrer_uri")
    @classmethod
    def _absolute_uri(cls, value: str | None) -> str | None:
        if value is None:
            return value
        parts = urlsplit(value)
        if not parts.scheme or not parts.netloc:
            raise ValueError("must be an absolute URI")
        return value


class ShoppingCartItem(RequestModel):
    category: str | None = None
    item_id: str | None = None
    quantity: int | None = Field(default=None, ge=0)
    price: NonNegativeDecimal | None = None


class MinFraudRequest(RequestModel):
    """Everything sent in one score or insights call. Only ``device`` is required.

    Values are normalized on the way in: ``shopping_cart`` is stored as a tuple
    whatever sequence it was given as, ``device.ip_address`` as an
    ``ipaddress`` object even when set from a string, and float amounts as
    ``Decimal``. Both forms compare equal field by field after a round trip
    through ``to_dict``.
    """

    device: Device
    event: Event | None = None
    account: Account | None = None
    email: Email | None = None
    billing: Billing | None = None
    shipping: Shipping | None = None
    payment: Payment | None = None
    credit_card: CreditCard | None = None
    order: Order | None = None
    shopping_cart: tuple[ShoppingCartItem, ...] | None = None

    @field_serializer("shopping_cart", mode="wrap")
    def _cart_as_list(self, value: Any, handler: Any) -> list | None:
        if value is None:
            return None
        return list(handler(value))

    @classmethod
    def builder(cls, device: Device | None = None) -> "MinFraudRequestBuilder":
        return MinFraudRequestBuilder(device)


class MinFraudRequestBuilder(Builder[MinFraudRequest]):
    def __init__(self, device: Device | None = None) -> None:
        super().__init__(MinFraudRequest)
        if device is not None:
            self._values["device"] = device

    def add_shopping_cart_item(self, item: ShoppingCartItem) -> "MinFraudRequestBuilder":
        cart = list(self._values.get("shopping_cart") or ())
        cart.append(item)
        self._values["shopping_cart"] = cart
        return self
