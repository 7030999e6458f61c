"""Generated resources, each declared as a ``ResourceDefinition``."""

from twilio_client_core.resources import notification, phone_number, pricing_messaging_country

__all__ = ["notification", "phone_number", "pricing_messaging_country"]
