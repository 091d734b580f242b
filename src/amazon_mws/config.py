"""Client configuration and credentials."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .constants import (
    APPLICATION_NAME,
    DEFAULT_APPLICATION_VERSION,
    DEFAULT_TIMEOUT,
    MARKETPLACES,
)
from .exceptions import ConfigurationError
from .utils.validators import validate_marketplace_id

REQUIRED_FIELDS = ("marketplace_id", "seller_id", "access_key_id", "secret_access_key")


@dataclass(frozen=True)
class MWSConfig:
    """Immutable credentials and endpoint settings shared by every call.

    Args:
        marketplace_id: Marketplace the seller operates in, e.g. ``A1F83G8C2ARO7P``
        seller_id: Merchant/seller identifier
        access_key_id: MWS access key id
        secret_access_key: MWS secret key used to sign requests
        auth_token: Optional MWSAuthToken for delegated access
        application_name: Sent in the x-amazon-user-agent header
        application_version: Sent in the x-amazon-user-agent header
        timeout: Transport timeout in seconds

    Raises:
        ConfigurationError: If a required field is empty or the marketplace is unknown
    """

    marketplace_id: str
    seller_id: str
    access_key_id: str
    secret_access_key: str
    auth_token: Optional[str] = None
    application_name: str = APPLICATION_NAME
    application_version: str = DEFAULT_APPLICATION_VERSION
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        for field_name in REQUIRED_FIELDS:
            if not getattr(self, field_name):
                raise ConfigurationError(f"Required field {field_name} is not set")

        if not validate_marketplace_id(self.marketplace_id):
            raise ConfigurationError(f"Invalid Marketplace Id: {self.marketplace_id}")

    @property
    def region_host(self) -> str:
        return MARKETPLACES[self.marketplace_id]

    @property
    def region_url(self) -> str:
        return f"https://{self.region_host}"

    @property
    def user_agent(self) -> str:
        return f"{self.application_name}/{self.application_version}"

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "MWSConfig":
        """Build a configuration from environment variables.

        A ``.env`` file is loaded first when present; variables already set in
        the environment take precedence.

        Environment variables:
        - MWS_MARKETPLACE_ID
        - MWS_SELLER_ID
        - MWS_ACCESS_KEY_ID
        - MWS_SECRET_ACCESS_KEY
        - MWS_AUTH_TOKEN (optional)
        - MWS_APPLICATION_VERSION (optional)
        - MWS_TIMEOUT (optional, seconds)
        """
        load_dotenv(dotenv_path)

        timeout = os.getenv("MWS_TIMEOUT")
        try:
            timeout_value = float(timeout) if timeout else DEFAULT_TIMEOUT
        except ValueError as e:
            raise ConfigurationError(f"MWS_TIMEOUT must be a number, got {timeout!r}") from e

        return cls(
            marketplace_id=os.getenv("MWS_MARKETPLACE_ID", ""),
            seller_id=os.getenv("MWS_SELLER_ID", ""),
            access_key_id=os.getenv("MWS_ACCESS_KEY_ID", ""),
            secret_access_key=os.getenv("MWS_SECRET_ACCESS_KEY", ""),
            auth_token=os.getenv("MWS_AUTH_TOKEN") or None,
            application_version=os.getenv("MWS_APPLICATION_VERSION") or DEFAULT_APPLICATION_VERSION,
            timeout=timeout_value,
        )
