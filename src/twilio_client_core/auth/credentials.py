"""Account credential resolution.

The client authenticates with an account SID and an auth token. Both are
resolved with priority ordering:

1. Explicitly provided value
2. Environment variable (``TWILIO_ACCOUNT_SID`` / ``TWILIO_AUTH_TOKEN``)
3. .env file (python-dotenv, loaded into the environment)
4. Default value

Example:
    ```python
    from twilio_client_core.auth import CredentialResolver

    resolver = CredentialResolver()
    credentials = resolver.resolve_account()
    print(credentials.account_sid)
    ```

Security Considerations:
    - Auth tokens are never logged (masked with ***)
    - Only the source of a value is logged (env var name, explicit, default)
    - Thread-safe dotenv loading with lock
"""

import logging
import os
from dataclasses import dataclass, field
from threading import Lock

from dotenv import load_dotenv

from twilio_client_core.auth.exceptions import CredentialNotFoundError

logger = logging.getLogger(__name__)

ACCOUNT_SID_ENV_VAR = "TWILIO_ACCOUNT_SID"
AUTH_TOKEN_ENV_VAR = "TWILIO_AUTH_TOKEN"


@dataclass(frozen=True)
class AccountCredentials:
    """Account SID and auth token used for HTTP basic auth."""

    account_sid: str
    auth_token: str = field(repr=False)


class CredentialResolver:
    """Resolve credentials from explicit values, the environment and .env files.

    Attributes:
        _dotenv_loaded: Whether .env file has been loaded.
        _dotenv_lock: Thread lock for safe dotenv loading.
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        """Initialize credential resolver.

        Args:
            dotenv_path: Path to .env file. If None, python-dotenv searches
                parent directories.
            load_dotenv: Whether to load the .env file at all.
        """
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv

        if self._load_dotenv_enabled:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Loaded .env file for credential resolution")
            except OSError as e:
                logger.warning(f"Failed to load .env file: {e}")
            # Mark as attempted either way; a broken .env never blocks explicit values
            self._dotenv_loaded = True

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
        mask_in_logs: bool = True,
    ) -> str | None:
        """Resolve a single value.

        Args:
            value: Explicitly provided value (highest priority).
            env_var_name: Environment variable to check.
            default: Value used when nothing else is set.
            required: Raise CredentialNotFoundError when nothing resolves.
            mask_in_logs: Log ``***`` instead of the value.

        Returns:
            Resolved value, or None if not found and not required.
        """
        result = None
        source = None

        if value is not None:
            result = value
            source = "explicit parameter"
        elif env_var_name and env_var_name in os.environ:
            result = os.environ[env_var_name]
            source = f"environment variable '{env_var_name}'"
        elif default is not None:
            result = default
            source = "default value"

        if result is not None:
            shown = "***" if mask_in_logs else result
            logger.debug(f"Resolved credential from {source}: {shown}")

        if required and result is None:
            error_msg = "Required credential not found"
            if env_var_name:
                error_msg += f" (checked env var: {env_var_name})"
            raise CredentialNotFoundError(error_msg, env_var_name=env_var_name)

        return result

    def resolve_account(
        self,
        *,
        account_sid: str | None = None,
        auth_token: str | None = None,
    ) -> AccountCredentials:
        """Resolve the account SID and auth token.

        Raises:
            CredentialNotFoundError: If either value cannot be resolved.
        """
        sid = self.resolve(value=account_sid, env_var_name=ACCOUNT_SID_ENV_VAR, required=True, mask_in_logs=False)
        token = self.resolve(value=auth_token, env_var_name=AUTH_TOKEN_ENV_VAR, required=True)
        return AccountCredentials(account_sid=sid, auth_token=token)
