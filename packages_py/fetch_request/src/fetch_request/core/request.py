"""
Request value and its fluent builder.
"""
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional, Union

from ..completion import CompletionStrategy
from ..headers import get_header, merge_headers
from ..types import FORM_ENCODED, JSON, HttpMethod

if TYPE_CHECKING:
    from ..auth.base import AuthorizationHook

DEFAULT_HEADERS = {
    "Content-Type": FORM_ENCODED,
    "Accept": JSON,
}


def _to_method(method: Union[HttpMethod, str]) -> HttpMethod:
    return method if isinstance(method, HttpMethod) else HttpMethod(method.upper())


@dataclass(frozen=True)
class Request:
    """
    One logical HTTP call: method, target, headers, parameters and the
    completion strategy chosen at construction.

    ``headers`` are applied over the default Content-Type and Accept with
    case-insensitive names, last write winning. Instances are immutable;
    the ``with_*`` helpers return modified copies.
    """
    method: HttpMethod
    base_url: str
    on_complete: CompletionStrategy
    headers: Mapping[str, str] = field(default_factory=dict)
    parameters: Mapping[str, Any] = field(default_factory=dict)
    authorization_hook: Optional["AuthorizationHook"] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.on_complete, CompletionStrategy):
            raise TypeError("on_complete must be a CompletionStrategy")
        object.__setattr__(self, "method", _to_method(self.method))
        headers = merge_headers(DEFAULT_HEADERS, self.headers)
        object.__setattr__(self, "headers", MappingProxyType(headers))
        object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))

    @property
    def url(self) -> str:
        return self.base_url

    @property
    def content_type(self) -> Optional[str]:
        return get_header(self.headers, "Content-Type")

    @property
    def accept(self) -> Optional[str]:
        return get_header(self.headers, "Accept")

    def with_header(self, name: str, value: str) -> "Request":
        return self.with_headers({name: value})

    def with_headers(self, headers: Mapping[str, str]) -> "Request":
        return replace(self, headers=merge_headers(self.headers, headers))

    def with_parameters(self, parameters: Mapping[str, Any]) -> "Request":
        """Replace the parameter set."""
        return replace(self, parameters=dict(parameters))

    def authenticate(self, hook: "AuthorizationHook") -> "Request":
        return replace(self, authorization_hook=hook)


class RequestBuilder:
    """Fluent builder for Request."""

    def __init__(self, url: str = "", method: Union[HttpMethod, str] = HttpMethod.GET):
        self._url = url
        self._method = _to_method(method)
        self._headers: Dict[str, str] = dict(DEFAULT_HEADERS)
        self._params: Dict[str, Any] = {}
        self._hook: Optional["AuthorizationHook"] = None
        self._on_complete: Optional[CompletionStrategy] = None

    def url(self, url: str) -> "RequestBuilder":
        self._url = url
        return self

    def method(self, method: Union[HttpMethod, str]) -> "RequestBuilder":
        self._method = _to_method(method)
        return self

    def header(self, key: str, value: str) -> "RequestBuilder":
        self._headers = merge_headers(self._headers, {key: value})
        return self

    def headers(self, headers: Mapping[str, str]) -> "RequestBuilder":
        self._headers = merge_headers(self._headers, headers)
        return self

    def content_type(self, value: str) -> "RequestBuilder":
        return self.header("Content-Type", value)

    def accept(self, value: str) -> "RequestBuilder":
        return self.header("Accept", value)

    def param(self, key: str, value: Any) -> "RequestBuilder":
        self._params[key] = value
        return self

    def params(self, params: Mapping[str, Any]) -> "RequestBuilder":
        self._params.update(params)
        return self

    def authenticate(self, hook: "AuthorizationHook") -> "RequestBuilder":
        self._hook = hook
        return self

    def on_complete(self, strategy: CompletionStrategy) -> "RequestBuilder":
        if self._on_complete is not None:
            raise ValueError("A completion strategy has already been set")
        self._on_complete = strategy
        return self

    def build(self) -> Request:
        """Get the constructed request."""
        if self._on_complete is None:
            raise ValueError("A completion strategy is required")
        if not self._url:
            raise ValueError("url is required")
        return Request(
            method=self._method,
            base_url=self._url,
            on_complete=self._on_complete,
            headers=self._headers,
            parameters=self._params,
            authorization_hook=self._hook,
        )
