"""Redirect configuration.

RedirectConfig is a frozen dataclass: immutable after creation,
IDE-autocompletable, no string-key dict lookups on the request path.
``validate_config()`` is the single gate every handler passes through
before it can serve a request.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

from siteredirect.errors import (
    ConfigurationError,
    EmptyRedirectionMapError,
    MissingBaseURLError,
    MissingDefaultPathError,
    MissingSignalSourceError,
)

# Keys accepted by ``RedirectConfig.from_mapping`` -> dataclass field names
_MAPPING_KEYS = {
    "baseUrl": "base_url",
    "defaultPath": "default_path",
    "redirectCookies": "redirect_cookies",
    "redirectHeaders": "redirect_headers",
    "redirectionMap": "redirection_map",
}


@dataclass(frozen=True, slots=True)
class RedirectConfig:
    """Root redirect configuration. Immutable after creation.

    Lists and dicts passed in are copied: sequences become tuples and the
    map becomes a read-only proxy, so changing the caller's objects later
    has no effect on a running handler::

        config = RedirectConfig(
            base_url="https://www.mysite.com",
            default_path="en/",
            redirect_cookies=["site_lang"],
            redirect_headers=["CF-IPCountry"],
            redirection_map={"FR": "fr", "DE": "de"},
        )
    """

    base_url: str = ""
    default_path: str = ""
    redirect_cookies: tuple[str, ...] = ()
    redirect_headers: tuple[str, ...] = ()
    redirection_map: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "redirect_cookies", tuple(self.redirect_cookies))
        object.__setattr__(self, "redirect_headers", tuple(self.redirect_headers))
        object.__setattr__(self, "redirection_map", MappingProxyType(dict(self.redirection_map)))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RedirectConfig":
        """Build a config from plain structured data.

        Uses the camelCase keys of the pipeline configuration format
        (``baseUrl``, ``defaultPath``, ``redirectCookies``,
        ``redirectHeaders``, ``redirectionMap``). Missing keys fall back to
        the empty default; validation is left to ``validate_config()``.

        Raises:
            ConfigurationError: On unknown keys or wrongly shaped values.
        """
        unknown = sorted(set(data) - set(_MAPPING_KEYS))
        if unknown:
            msg = f"Unknown redirect configuration keys: {', '.join(unknown)}"
            raise ConfigurationError(msg)

        kwargs: dict[str, Any] = {}
        for key, name in _MAPPING_KEYS.items():
            if key not in data or data[key] is None:
                continue
            value = data[key]
            if name in ("base_url", "default_path"):
                if not isinstance(value, str):
                    msg = f"{key} must be a string, got {type(value).__name__}"
                    raise ConfigurationError(msg)
            elif name == "redirection_map":
                if not isinstance(value, Mapping) or not all(
                    isinstance(k, str) and isinstance(v, str) for k, v in value.items()
                ):
                    msg = f"{key} must be a mapping of strings to strings"
                    raise ConfigurationError(msg)
            elif not isinstance(value, (list, tuple)) or not all(
                isinstance(item, str) for item in value
            ):
                msg = f"{key} must be a list of strings"
                raise ConfigurationError(msg)
            kwargs[name] = value
        return cls(**kwargs)


def create_config() -> RedirectConfig:
    """Return the empty default configuration.

    Every field is empty, so the result does not pass ``validate_config()``
    until the pipeline fills it in.
    """
    return RedirectConfig()


def validate_config(config: RedirectConfig) -> RedirectConfig:
    """Validate *config* and return a normalized copy.

    Rules run in a fixed order and the first failure wins:

    1. at least one of ``redirect_cookies`` / ``redirect_headers``
    2. a non-empty ``redirection_map``
    3. a non-empty ``base_url``, with exactly one trailing ``/`` removed
    4. a non-empty ``default_path``

    Raises:
        MissingSignalSourceError: No cookie or header to inspect.
        EmptyRedirectionMapError: The map has no entries.
        MissingBaseURLError: ``base_url`` is empty.
        MissingDefaultPathError: ``default_path`` is empty.
    """
    if not config.redirect_cookies and not config.redirect_headers:
        raise MissingSignalSourceError()

    if not config.redirection_map:
        raise EmptyRedirectionMapError()

    if not config.base_url:
        raise MissingBaseURLError()
    base_url = config.base_url.removesuffix("/")

    if not config.default_path:
        raise MissingDefaultPathError()

    return replace(config, base_url=base_url)
