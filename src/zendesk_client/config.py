"""
Zendesk client configuration.

Options are passed explicitly or read from the environment:

- ZENDESK_SUBDOMAIN: account subdomain (``acme`` for acme.zendesk.com)
- ZENDESK_USERNAME: agent email, used with a token or a password
- ZENDESK_TOKEN: API token
- ZENDESK_OAUTH_TOKEN: OAuth access token (takes precedence over the others)
- ZENDESK_PASSWORD: password for basic authentication
- ZENDESK_ENDPOINT_GROUP: core, helpcenter, nps, services or voice
- ZENDESK_ENDPOINT_URI: full base URL, overrides the subdomain
- ZENDESK_SIDELOAD: comma separated list of sideloads sent as ``include``
- ZENDESK_TIMEOUT: request timeout in seconds
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .error_handler import ConfigurationError

DEFAULT_TIMEOUT = 30.0


@dataclass
class ClientOptions:
    """Connection settings shared by every resource client of one session."""
    subdomain: Optional[str] = None
    username: Optional[str] = None
    token: Optional[str] = None
    oauth_token: Optional[str] = None
    password: Optional[str] = None
    endpoint_group: str = "core"
    endpoint_uri: Optional[str] = None
    sideload: List[str] = field(default_factory=list)
    timeout: float = DEFAULT_TIMEOUT
    use_dot_json: bool = True

    @classmethod
    def from_env(cls, environ=None) -> "ClientOptions":
        """Build options from ``ZENDESK_*`` environment variables."""
        env = os.environ if environ is None else environ
        sideload = [name.strip() for name in env.get("ZENDESK_SIDELOAD", "").split(",") if name.strip()]
        timeout = env.get("ZENDESK_TIMEOUT")
        try:
            timeout = float(timeout) if timeout else DEFAULT_TIMEOUT
        except ValueError:
            raise ConfigurationError(f"ZENDESK_TIMEOUT must be a number, got {timeout!r}")

        return cls(
            subdomain=env.get("ZENDESK_SUBDOMAIN") or None,
            username=env.get("ZENDESK_USERNAME") or None,
            token=env.get("ZENDESK_TOKEN") or None,
            oauth_token=env.get("ZENDESK_OAUTH_TOKEN") or None,
            password=env.get("ZENDESK_PASSWORD") or None,
            endpoint_group=env.get("ZENDESK_ENDPOINT_GROUP") or "core",
            endpoint_uri=env.get("ZENDESK_ENDPOINT_URI") or None,
            sideload=sideload,
            timeout=timeout,
        )

    def auth(self) -> Tuple[str, Optional[Tuple[str, str]], Optional[str]]:
        """
        Resolve the authentication scheme.

        Returns:
            (scheme, basic_auth, bearer_token) where scheme is one of
            "oauth", "token" or "password"

        Raises:
            ConfigurationError: If no usable credentials are configured
        """
        if self.oauth_token:
            return "oauth", None, self.oauth_token
        if self.username and self.token:
            return "token", (f"{self.username}/token", self.token), None
        if self.username and self.password:
            return "password", (self.username, self.password), None
        raise ConfigurationError(
            "Zendesk authentication not configured",
            {"reason": "set an OAuth token, a username with a token, or a username with a password"}
        )
