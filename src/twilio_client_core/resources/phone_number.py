"""Lookups phone numbers (``/v1/PhoneNumbers/{PhoneNumber}``)."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from twilio_client_core.resource import Fetcher, FilterKind, QueryFilter, ResourceDefinition
from twilio_client_core.transport.request import Domain


@dataclass(frozen=True)
class PhoneNumber:
    phone_number: str
    country_code: str | None = None
    national_format: str | None = None
    caller_name: dict[str, Any] | None = None
    carrier: dict[str, Any] | None = None
    add_ons: dict[str, Any] | None = None
    url: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PhoneNumber":
        return cls(
            phone_number=data["phone_number"],
            country_code=data.get("country_code"),
            national_format=data.get("national_format"),
            caller_name=data.get("caller_name"),
            carrier=data.get("carrier"),
            add_ons=data.get("add_ons"),
            url=data.get("url"),
        )


PHONE_NUMBER = ResourceDefinition(
    name="PhoneNumber",
    domain=Domain.LOOKUPS,
    path="/v1/PhoneNumbers/{phone_number}",
    parse=PhoneNumber.from_dict,
    filters=(
        QueryFilter("country_code", "CountryCode"),
        QueryFilter("type", "Type", FilterKind.LIST),
        QueryFilter("add_ons", "AddOns", FilterKind.LIST),
        QueryFilter("add_ons_data", "AddOns", FilterKind.PREFIXED_MAP),
    ),
)


def fetch(phone_number: str) -> Fetcher[PhoneNumber]:
    return Fetcher(PHONE_NUMBER, phone_number=phone_number)
