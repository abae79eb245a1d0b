"""
SPDX-License-Identifier: MIT

Shared HTTP transport for the Zendesk resource clients.

A path specification is a list of segments: strings and ids become URL path
segments, dicts become the query string. ``["views", "count_many", {"ids": [1, 2]}]``
turns into ``<base>/views/count_many.json?ids=1%2C2``.
"""

import asyncio
import logging
from typing import Any, AsyncIterator, Dict, List, Optional, Sequence, Union
from urllib.parse import quote, urlencode

import requests

from .config import ClientOptions
from .error_handler import APIError, handle_api_response

logger = logging.getLogger(__name__)

PathSpec = Union[str, Sequence[Union[str, int, Dict[str, Any]]]]


def _create_session() -> requests.Session:
    """Create a requests session configured for connection pooling."""
    session = requests.Session()
    adapter = requests.adapters.HTTPAdapter(
        pool_connections=10,
        pool_maxsize=20,
        max_retries=0
    )
    session.mount('https://', adapter)
    session.mount('http://', adapter)
    return session


def _format_param(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple, set)):
        return ",".join(str(v) for v in value)
    return str(value)


def _is_absolute(segment: Any) -> bool:
    return isinstance(segment, str) and segment.startswith(("http://", "https://"))


def unwrap(body: Any, roots: Sequence[str]) -> Any:
    """Return ``body[root]`` for the first root present, else the body itself."""
    if isinstance(body, dict):
        for root in roots:
            if root in body:
                return body[root]
    return body


def next_page_url(page: Dict[str, Any]) -> Optional[str]:
    """Find the link to the following page, supporting offset, cursor and incremental pagination."""
    if page.get("end_of_stream"):
        return None
    meta = page.get("meta")
    if isinstance(meta, dict) and "has_more" in meta:
        if not meta["has_more"]:
            return None
        return (page.get("links") or {}).get("next") or None
    return page.get("next_page") or page.get("after_url") or None


class Transport:
    """
    Performs the HTTP exchange for every resource client of one session.

    Credentials and JSON headers are sent with each request rather than
    stored on the session, so a caller-supplied session is left as it was
    and stays open after ``close``. It holds no per-call state, so several
    resource clients may await it concurrently.
    """

    def __init__(self, base_url: str, options: ClientOptions, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.options = options
        self.timeout = options.timeout
        self._owns_session = session is None
        self.session = session if session is not None else _create_session()

        scheme, basic_auth, bearer = options.auth()
        self.auth_scheme = scheme
        self.auth = basic_auth
        self.headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        if bearer:
            self.headers["Authorization"] = f"Bearer {bearer}"

    def build_url(self, path: PathSpec) -> str:
        """Turn a path specification into an absolute URL."""
        if isinstance(path, str):
            path = [path]
        if path and _is_absolute(path[0]):
            return path[0]

        segments: List[str] = []
        params: Dict[str, Any] = {}
        for segment in path:
            if isinstance(segment, dict):
                params.update(segment)
            else:
                segments.append(quote(str(segment), safe=""))

        url = f"{self.base_url}/{'/'.join(segments)}"
        if self.options.use_dot_json:
            url += ".json"

        if self.options.sideload and "include" not in params:
            params["include"] = self.options.sideload
        query = urlencode({k: _format_param(v) for k, v in params.items() if v is not None})
        return f"{url}?{query}" if query else url

    def _send_sync(self, method: str, url: str, body: Any) -> requests.Response:
        logger.debug("%s %s", method, url)
        kwargs = {"headers": self.headers, "timeout": self.timeout}
        if self.auth is not None:
            kwargs["auth"] = self.auth
        if body is not None:
            kwargs["json"] = body
        response = self.session.request(method, url, **kwargs)
        return handle_api_response(response, method, url)

    async def _send(self, method: str, url: str, body: Any = None) -> requests.Response:
        return await asyncio.to_thread(self._send_sync, method, url, body)

    @staticmethod
    def _parse(response: requests.Response, method: str, url: str) -> Any:
        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            raise APIError(method, url, response.status_code, response.text)

    async def request(self, method: str, path: PathSpec, body: Any = None, *, roots: Sequence[str] = ()) -> Any:
        """
        Perform a single request.

        Returns:
            The parsed JSON body unwrapped by ``roots``, or None for empty responses

        Raises:
            APIError: If Zendesk answers with a 4xx/5xx status or a body that is not JSON
            requests.RequestException: On network failures and timeouts
        """
        url = self.build_url(path)
        response = await self._send(method, url, body)
        return unwrap(self._parse(response, method, url), roots)

    async def get(self, path: PathSpec, *, roots: Sequence[str] = ()) -> Any:
        return await self.request("GET", path, roots=roots)

    async def post(self, path: PathSpec, body: Any = None, *, roots: Sequence[str] = ()) -> Any:
        return await self.request("POST", path, body, roots=roots)

    async def put(self, path: PathSpec, body: Any = None, *, roots: Sequence[str] = ()) -> Any:
        return await self.request("PUT", path, body, roots=roots)

    async def delete(self, path: PathSpec, body: Any = None, *, roots: Sequence[str] = ()) -> Any:
        return await self.request("DELETE", path, body, roots=roots)

    async def iterate(
        self,
        method: str,
        path: PathSpec,
        body: Any = None,
        *,
        roots: Sequence[str] = ()
    ) -> AsyncIterator[Any]:
        """
        Yield items across every page of a list endpoint.

        Items come from the first root holding a list. A page without such a
        root is yielded as a whole.
        """
        url = self.build_url(path)
        pages = 0
        total = 0

        while url:
            response = await self._send(method, url, body)
            page = self._parse(response, method, url)
            pages += 1

            if not isinstance(page, dict):
                if page is not None:
                    yield page
                break

            items = next((page[root] for root in roots if isinstance(page.get(root), list)), None)
            if items is None:
                yield page
            else:
                total += len(items)
                for item in items:
                    yield item

            following = next_page_url(page)
            if following == url:
                logger.info("Next page URL same as current, ending pagination")
                break
            url = following

        logger.info("Pagination completed: %d pages, %d items", pages, total)

    async def request_all(self, method: str, path: PathSpec, body: Any = None, *, roots: Sequence[str] = ()) -> List[Any]:
        return [item async for item in self.iterate(method, path, body, roots=roots)]

    async def get_all(self, path: PathSpec, *, roots: Sequence[str] = ()) -> List[Any]:
        return await self.request_all("GET", path, roots=roots)

    def close(self) -> None:
        """Close the session, unless it was handed in by the caller."""
        if self._owns_session:
            self.session.close()
