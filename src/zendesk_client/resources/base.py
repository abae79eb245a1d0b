"""
Base class for the Zendesk resource clients.
"""

from typing import Any, List, Optional, Sequence

from ..transport import PathSpec, Transport


class ResourceClient:
    """
    A named collection of operations over one Zendesk REST resource.

    Subclasses declare ``json_api_names``, the response roots used to unwrap
    results (plural first, singular second), and implement each operation as
    a path specification handed to the shared transport.

    Operations go through the underscore-prefixed helpers, which call the
    transport object. A public ``delete`` therefore reaches
    ``Transport.delete`` and never itself.
    """

    json_api_names: Sequence[str] = ()

    def __init__(self, transport: Transport):
        self.transport = transport

    def _roots(self, roots: Optional[Sequence[str]]) -> Sequence[str]:
        return self.json_api_names if roots is None else roots

    async def _get(self, path: PathSpec, roots: Optional[Sequence[str]] = None) -> Any:
        return await self.transport.get(path, roots=self._roots(roots))

    async def _post(self, path: PathSpec, body: Any = None, roots: Optional[Sequence[str]] = None) -> Any:
        return await self.transport.post(path, body, roots=self._roots(roots))

    async def _put(self, path: PathSpec, body: Any = None, roots: Optional[Sequence[str]] = None) -> Any:
        return await self.transport.put(path, body, roots=self._roots(roots))

    async def _delete(self, path: PathSpec, body: Any = None, roots: Optional[Sequence[str]] = None) -> Any:
        return await self.transport.delete(path, body, roots=self._roots(roots))

    async def _get_all(self, path: PathSpec, roots: Optional[Sequence[str]] = None) -> List[Any]:
        return await self.transport.get_all(path, roots=self._roots(roots))

    async def _request_all(
        self,
        method: str,
        path: PathSpec,
        body: Any = None,
        roots: Optional[Sequence[str]] = None
    ) -> List[Any]:
        return await self.transport.request_all(method, path, body, roots=self._roots(roots))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={getattr(self.transport, 'base_url', None)!r})"
