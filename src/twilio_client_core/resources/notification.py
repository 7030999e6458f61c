"""Call notifications (``/2010-04-01/Accounts/{AccountSid}/Calls/{CallSid}/Notifications``)."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from twilio_client_core.resource import Fetcher, QueryFilter, Reader, ResourceDefinition
from twilio_client_core.transport.request import Domain


@dataclass(frozen=True)
class Notification:
    sid: str
    account_sid: str | None = None
    call_sid: str | None = None
    api_version: str | None = None
    error_code: str | None = None
    log: str | None = None
    message_date: str | None = None
    message_text: str | None = None
    more_info: str | None = None
    request_method: str | None = None
    request_url: str | None = None
    date_created: str | None = None
    date_updated: str | None = None
    uri: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Notification":
        return cls(
            sid=data["sid"],
            account_sid=data.get("account_sid"),
            call_sid=data.get("call_sid"),
            api_version=data.get("api_version"),
            error_code=data.get("error_code"),
            log=data.get("log"),
            message_date=data.get("message_date"),
            message_text=data.get("message_text"),
            more_info=data.get("more_info"),
            request_method=data.get("request_method"),
            request_url=data.get("request_url"),
            date_created=data.get("date_created"),
            date_updated=data.get("date_updated"),
            uri=data.get("uri"),
        )


NOTIFICATIONS = ResourceDefinition(
    name="Notification",
    domain=Domain.API,
    path="/2010-04-01/Accounts/{account_sid}/Calls/{call_sid}/Notifications.json",
    records_key="notifications",
    parse=Notification.from_dict,
    filters=(
        QueryFilter("log", "Log"),
        QueryFilter("message_date", "MessageDate"),
    ),
)

NOTIFICATION = ResourceDefinition(
    name="Notification",
    domain=Domain.API,
    path="/2010-04-01/Accounts/{account_sid}/Calls/{call_sid}/Notifications/{sid}.json",
    parse=Notification.from_dict,
)


def read(account_sid: str, call_sid: str) -> Reader[Notification]:
    return Reader(NOTIFICATIONS, account_sid=account_sid, call_sid=call_sid)


def fetch(account_sid: str, call_sid: str, sid: str) -> Fetcher[Notification]:
    return Fetcher(NOTIFICATION, account_sid=account_sid, call_sid=call_sid, sid=sid)
