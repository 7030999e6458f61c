"""Account credential resolution (explicit value → env → .env → default).

Example:
    ```python
    from twilio_client_core.auth import CredentialResolver

    credentials = CredentialResolver().resolve_account()
    ```
"""

from twilio_client_core.auth.credentials import AccountCredentials, CredentialResolver
from twilio_client_core.auth.exceptions import CredentialError, CredentialNotFoundError

__all__ = [
    "AccountCredentials",
    "CredentialError",
    "CredentialNotFoundError",
    "CredentialResolver",
]
