"""Messaging prices per country (``/v1/Messaging/Countries``)."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from twilio_client_core.resource import Fetcher, Reader, ResourceDefinition
from twilio_client_core.transport.request import Domain


@dataclass(frozen=True)
class InboundSmsPrice:
    number_type: str | None = None
    base_price: str | None = None
    current_price: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "InboundSmsPrice":
        return cls(
            number_type=data.get("number_type"),
            base_price=data.get("base_price"),
            current_price=data.get("current_price"),
        )


@dataclass(frozen=True)
class OutboundSmsPrice:
    carrier: str | None = None
    mcc: str | None = None
    mnc: str | None = None
    prices: tuple[InboundSmsPrice, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "OutboundSmsPrice":
        # Outbound prices per number type share the inbound price shape
        return cls(
            carrier=data.get("carrier"),
            mcc=data.get("mcc"),
            mnc=data.get("mnc"),
            prices=tuple(InboundSmsPrice.from_dict(p) for p in data.get("prices") or ()),
        )


@dataclass(frozen=True)
class Country:
    iso_country: str
    country: str | None = None
    outbound_sms_prices: tuple[OutboundSmsPrice, ...] = ()
    inbound_sms_prices: tuple[InboundSmsPrice, ...] = ()
    price_unit: str | None = None
    url: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Country":
        return cls(
            iso_country=data["iso_country"],
            country=data.get("country"),
            outbound_sms_prices=tuple(OutboundSmsPrice.from_dict(p) for p in data.get("outbound_sms_prices") or ()),
            inbound_sms_prices=tuple(InboundSmsPrice.from_dict(p) for p in data.get("inbound_sms_prices") or ()),
            price_unit=data.get("price_unit"),
            url=data.get("url"),
        )


COUNTRIES = ResourceDefinition(
    name="Country",
    domain=Domain.PRICING,
    path="/v1/Messaging/Countries",
    records_key="countries",
    parse=Country.from_dict,
)

COUNTRY = ResourceDefinition(
    name="Country",
    domain=Domain.PRICING,
    path="/v1/Messaging/Countries/{iso_country}",
    parse=Country.from_dict,
)


def read() -> Reader[Country]:
    return Reader(COUNTRIES)


def fetch(iso_country: str) -> Fetcher[Country]:
    return Fetcher(COUNTRY, iso_country=iso_country)
