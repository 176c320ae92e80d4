"""Shared test fixtures for the minFraud client tests."""

import ipaddress
import json
import os
from datetime import UTC, datetime
from decimal import Decimal
from pathlib import Path

import httpx
import pytest
import structlog

from minfraud.client import MinFraudClient
from minfraud.request import (
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

FIXTURES = Path(__file__).parent / "fixtures"

ACCOUNT_ID = 6
LICENSE_KEY = "0123456789"
USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/41.0.2272.89 Safari/537.36"
)


def load_fixture(name: str, parse_float=None) -> dict:
    with open(FIXTURES / f"{name}.json", encoding="utf-8") as f:
        return json.load(f, parse_float=parse_float)


def read_fixture_text(name: str) -> str:
    return (FIXTURES / f"{name}.json").read_text(encoding="utf-8")


class StubService:
    """Records requests and replays one canned response, like a tiny fake server."""

    def __init__(self, status_code: int = 200, body: str | bytes = b"", content_type: str | None = None):
        self.status_code = status_code
        self.body = body.encode("utf-8") if isinstance(body, str) else body
        self.content_type = content_type
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        headers = {}
        if self.content_type:
            headers["Content-Type"] = self.content_type
        return httpx.Response(self.status_code, content=self.body, headers=headers)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]


def service_content_type(service: str) -> str:
    return f"application/vnd.maxmind.com-minfraud-{service}+json; charset=UTF-8; version=2.0"


@pytest.fixture
def make_client():
    """Return a factory that binds a MinFraudClient to a StubService."""
    clients: list[MinFraudClient] = []

    def _make(stub: StubService, **kwargs) -> MinFraudClient:
        kwargs.setdefault("host", "localhost")
        kwargs.setdefault("port", 8443)
        kwargs.setdefault("use_https", False)
        client = MinFraudClient(
            ACCOUNT_ID, LICENSE_KEY, transport=httpx.MockTransport(stub), **kwargs
        )
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.close()


@pytest.fixture
def full_request() -> MinFraudRequest:
    return (
        MinFraudRequest.builder(
            Device.builder()
            .ip_address(ipaddress.ip_address("81.2.69.160"))
            .user_agent(USER_AGENT)
            .accept_language("en-US,en;q=0.8")
            .build()
        )
        .event(
            Event.builder()
            .transaction_id("txn3134133")
            .shop_id("s2123")
            .time(datetime(2012, 4, 12, 23, 20, 50, 520000, tzinfo=UTC))
            .type(EventType.PURCHASE)
            .build()
        )
        .account(Account.builder().user_id("3132").username("fred").build())
        .email(Email.builder().address("test@maxmind.com").domain("maxmind.com").build())
        .billing(
            Billing.builder()
            .first_name("First")
            .last_name("Last")
            .company("Company")
            .address("101 Address Rd.")
            .address_2("Unit 5")
            .city("City of Thorns")
            .region("CT")
            .country("US")
            .postal("06510")
            .phone_number("323-123-4321")
            .phone_country_code("1")
            .build()
        )
        .shipping(
            Shipping.builder()
            .first_name("ShipFirst")
            .last_name("ShipLast")
            .company("ShipCo")
            .address("322 Ship Addr. Ln.")
            .address_2("St. 43")
            .city("Nowhere")
            .region("OK")
            .country("US")
            .postal("73003")
            .phone_number("403-321-2323")
            .phone_country_code("1")
            .delivery_speed(DeliverySpeed.SAME_DAY)
            .build()
        )
        .payment(
            Payment.builder()
            .processor(PaymentProcessor.STRIPE)
            .was_authorized(False)
            .decline_code("invalid number")
            .build()
        )
        .credit_card(
            CreditCard.builder()
            .issuer_id_number("323132")
            .bank_name("Bank of No Hope")
            .bank_phone_country_code("1")
            .bank_phone_number("800-342-1232")
            .avs_result("Y")
            .cvv_result("N")
            .last_4_digits("7643")
            .build()
        )
        .order(
            Order.builder()
            .amount(Decimal("323.21"))
            .currency("USD")
            .discount_code("FIRST")
            .affiliate_id("af12")
            .subaffiliate_id("saf42")
            .referrer_uri("http://www.amazon.com/")
            .build()
        )
        .add_shopping_cart_item(
            ShoppingCartItem.builder().category("pets").item_id("ad23232").quantity(2).price(20.43).build()
        )
        .add_shopping_cart_item(
            ShoppingCartItem.builder().category("beauty").item_id("bst112").quantity(1).price(100.0).build()
        )
        .build()
    )


@pytest.fixture(autouse=True)
def _clean_minfraud_env(monkeypatch):
    for key in list(os.environ):
        if key.startswith("MINFRAUD_"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()
