"""Twilio Client Core - request execution and pagination for generated API clients.

Every generated resource reuses the same small set of pieces:
- A request builder with repeated and dotted-path query parameters
- A uniform mapping of transport/HTTP failures onto a typed error model
- Cursor-based pages and a lazy, limit-aware result set over them
- A generic fetcher/reader parametrized by a resource definition

Example:
    ```python
    from twilio_client_core.client import TwilioRestClient
    from twilio_client_core.resources import pricing_messaging_country

    with TwilioRestClient() as client:
        for country in pricing_messaging_country.read().execute(client, limit=10):
            print(country.iso_country, country.price_unit)
    ```
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
