"""
Zendesk Client Error Handler

Provides the error taxonomy shared by the transport, the registry and the
MCP tool surface, plus standardized error handling decorators for tools and
resources.
"""

import json
import logging
from typing import Any, Dict, Optional
from functools import wraps

import requests
from fastmcp import Context

logger = logging.getLogger(__name__)


class ZendeskClientError(Exception):
    """Base exception for Zendesk client errors."""
    def __init__(self, message: str, error_code: str = "UNKNOWN", details: Optional[Dict] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(message)


class ConfigurationError(ZendeskClientError):
    """Raised when the client is configured with an unknown group, resource or missing credentials."""
    def __init__(self, message: str, details: Optional[Dict] = None):
        super().__init__(message, "CONFIGURATION_ERROR", details)


class APIError(ZendeskClientError):
    """Raised when the Zendesk API answers with a 4xx/5xx status or an unreadable body."""
    def __init__(self, method: str, endpoint: str, status_code: int, response_text: str):
        message = f"Zendesk API error on {method} {endpoint}: HTTP {status_code}"
        self.body = _parse_body(response_text)
        details = {"status_code": status_code, "response": self.body}
        super().__init__(message, "API_ERROR", details)
        self.method = method
        self.endpoint = endpoint
        self.status_code = status_code
        self.response_text = response_text

    @property
    def retryable(self) -> bool:
        """Rate limiting (429) and server-side failures may succeed when repeated."""
        return self.status_code == 429 or self.status_code >= 500


class ResourceNotFoundError(APIError):
    """Raised when a requested resource does not exist (HTTP 404)."""
    def __init__(self, method: str, endpoint: str, response_text: str):
        super().__init__(method, endpoint, 404, response_text)
        self.error_code = "RESOURCE_NOT_FOUND"


class JobStatusTimeoutError(ZendeskClientError):
    """Raised when a background job does not finish within the polling budget."""
    def __init__(self, job_id: str, attempts: int, last_status: Optional[Dict] = None):
        message = f"Job {job_id} did not finish after {attempts} attempts"
        super().__init__(message, "JOB_TIMEOUT", {"job_id": job_id, "last_status": last_status})
        self.job_id = job_id
        self.attempts = attempts


def _parse_body(response_text: str) -> Any:
    if not response_text:
        return None
    try:
        return json.loads(response_text)
    except ValueError:
        return response_text


def handle_api_response(response: requests.Response, method: str, endpoint: str) -> requests.Response:
    """
    Raise the matching error for a failed Zendesk API response.

    Args:
        response: The requests Response object
        method: HTTP verb that was used
        endpoint: URL that was called

    Returns:
        The response unchanged when the status is below 400

    Raises:
        ResourceNotFoundError: On HTTP 404
        APIError: On any other 4xx/5xx status
    """
    if response.status_code == 404:
        raise ResourceNotFoundError(method, endpoint, response.text)
    if response.status_code >= 400:
        raise APIError(method, endpoint, response.status_code, response.text)
    return response


def create_error_response(
    error: Exception,
    resource_type: str = "resource",
    resource_id: str = "",
    additional_data: Optional[Dict] = None
) -> str:
    """
    Render an error as the JSON document returned by MCP resources.

    API errors also carry the request (method and URL), the HTTP status,
    whether a retry could succeed, and the ``error``/``description`` pair
    Zendesk puts in its error bodies.

    Args:
        error: The exception that occurred
        resource_type: Kind of resource that was read (ticket, view, ...)
        resource_id: ID of the resource that failed
        additional_data: Extra keys merged into the document

    Returns:
        JSON string containing error information
    """
    document: Dict[str, Any] = {
        "error": True,
        "error_code": getattr(error, "error_code", "INTERNAL_ERROR"),
        "message": str(error),
        "exception": type(error).__name__,
        "resource": {"type": resource_type, "id": resource_id},
        "details": getattr(error, "details", {}),
    }

    if isinstance(error, APIError):
        document["request"] = {"method": error.method, "url": error.endpoint}
        document["status_code"] = error.status_code
        document["retryable"] = error.retryable
        if isinstance(error.body, dict):
            document["zendesk_error"] = error.body.get("error")
            document["description"] = error.body.get("description")

    if additional_data:
        document.update(additional_data)

    return json.dumps(document, indent=2, default=str)


def _find_context(args, kwargs) -> Optional[Context]:
    for arg in args:
        if isinstance(arg, Context):
            return arg
    ctx = kwargs.get("ctx")
    return ctx if isinstance(ctx, Context) else None


def _find_resource_id(args, kwargs) -> str:
    if args and not isinstance(args[0], Context):
        return str(args[0])
    for name, value in kwargs.items():
        if name.endswith("_id"):
            return str(value)
    return "unknown"


def _summary(error: Exception) -> str:
    if isinstance(error, APIError):
        return f"HTTP {error.status_code} on {error.method} {error.endpoint}"
    if isinstance(error, ZendeskClientError):
        return error.message
    return f"{type(error).__name__}: {error}"


async def _report(ctx: Optional[Context], label: str, error: Exception) -> None:
    logger.warning("%s failed: %s", label, _summary(error))
    if ctx:
        await ctx.error(f"{label} failed: {_summary(error)}")


def resource_error_handler(resource_type: str):
    """
    Decorator for MCP resource handlers.

    Any failure is reported through the context and returned as the JSON
    document built by ``create_error_response``; unexpected exceptions get
    the ``INTERNAL_ERROR`` code.

    Args:
        resource_type: The type of resource (e.g., "ticket", "view")
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            resource_id = _find_resource_id(args, kwargs)
            try:
                return await func(*args, **kwargs)
            except Exception as e:
                await _report(_find_context(args, kwargs), f"{resource_type} {resource_id}", e)
                if not isinstance(e, ZendeskClientError):
                    e = ZendeskClientError(
                        f"Unexpected error: {e}",
                        "INTERNAL_ERROR",
                        details={"original_exception": type(e).__name__, "cause": str(e)}
                    )
                return create_error_response(e, resource_type, resource_id)

        return wrapper
    return decorator


def tool_error_handler(tool_name: str):
    """
    Decorator for MCP tool handlers.

    Client errors are reported and re-raised unchanged. Other exceptions are
    re-raised as ``ZendeskClientError`` with a code naming the failure:
    ``INVALID_ARGUMENT`` for rejected input, ``NETWORK_ERROR`` when Zendesk
    could not be reached, ``TOOL_ERROR`` otherwise.

    Args:
        tool_name: The name of the tool
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except Exception as e:
                await _report(_find_context(args, kwargs), tool_name, e)
                if isinstance(e, ZendeskClientError):
                    raise
                if isinstance(e, ValueError):
                    code = "INVALID_ARGUMENT"
                elif isinstance(e, requests.RequestException):
                    code = "NETWORK_ERROR"
                else:
                    code = "TOOL_ERROR"
                raise ZendeskClientError(f"Tool {tool_name} failed: {e}", code) from e

        return wrapper
    return decorator
