"""
SPDX-License-Identifier: MIT

Composed Zendesk client.

Builds one transport for the configured endpoint group and attaches one
resource-client instance per registry entry::

    client = ZendeskClient(ClientOptions(subdomain="acme", username="a@acme.com", token="..."))
    views = await client.views.list()
    counts = await client.views.show_counts([12345, 67890])
"""

import logging
from typing import Dict, Iterable, Optional

import requests

from .config import ClientOptions
from .error_handler import ConfigurationError
from .registry import EndpointGroupSpec, attribute_name, get_group, get_resource
from .resources.base import ResourceClient
from .transport import Transport

logger = logging.getLogger(__name__)


class ZendeskClient:
    """
    Namespace of resource clients sharing one transport.

    Args:
        options: Connection settings; read from the environment when omitted
        resources: Registry names to instantiate; every resource of the group when omitted
        session: A requests session to reuse instead of creating one; it is left
            open by ``close``

    Raises:
        ConfigurationError: For an unknown group or resource name, a missing
            subdomain or missing credentials. Raised before any request is sent.
    """

    def __init__(
        self,
        options: Optional[ClientOptions] = None,
        *,
        resources: Optional[Iterable[str]] = None,
        session: Optional[requests.Session] = None
    ):
        self.options = options or ClientOptions.from_env()
        self.group: EndpointGroupSpec = get_group(self.options.endpoint_group)

        names = list(self.group.resources) if resources is None else list(resources)
        classes = {name: get_resource(self.group.group, name) for name in names}

        self.transport = Transport(self._base_url(), self.options, session=session)
        self._resources: Dict[str, ResourceClient] = {}
        for name, cls in classes.items():
            instance = cls(self.transport)
            self._resources[name] = instance
            setattr(self, attribute_name(name), instance)

        logger.info(
            "Zendesk client ready: group=%s auth=%s resources=%s",
            self.group.group.value, self.transport.auth_scheme, list(self._resources)
        )

    def _base_url(self) -> str:
        if self.options.endpoint_uri:
            return self.options.endpoint_uri
        if not self.options.subdomain:
            raise ConfigurationError(
                "Zendesk subdomain not configured",
                {"reason": "set a subdomain or an explicit endpoint_uri"}
            )
        return self.group.base_url(self.options.subdomain)

    def resource(self, name: str) -> ResourceClient:
        """
        Return an attached resource client by registry name (``"Views"``).

        Raises:
            ConfigurationError: If the name was not instantiated on this client
        """
        try:
            return self._resources[name]
        except KeyError:
            raise ConfigurationError(
                f"Resource client '{name}' is not available on this client",
                {"available": list(self._resources)}
            )

    @property
    def resource_names(self) -> list[str]:
        return list(self._resources)

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> "ZendeskClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
