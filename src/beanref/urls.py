from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Literal

from beanref.errors import NamingError, UnmatchedURLError

logger = logging.getLogger(__name__)

# Only the start of the string is anchored; anything after a match is ignored.
APP_URL_PATTERN = re.compile(
    r"php:app/(?P<className>\w+)(/(?P<interface>remote|local))?",
    re.ASCII,
)
GLOBAL_URL_PATTERN = re.compile(
    r"php:global/(?P<contextName>\w+)/(?P<className>\w+)(/(?P<interface>remote|local))?",
    re.ASCII,
)

_SEGMENT = re.compile(r"\w+", re.ASCII)
_INTERFACES = ("local", "remote")


@dataclass(frozen=True)
class ParsedBeanUrl:
    original: str
    form: Literal["app", "global"]
    class_name: str
    context_name: str | None = None
    interface: str | None = None


def parse_bean_url(url: str) -> ParsedBeanUrl:
    """Match ``url`` against the app form, then the global form.

    php:app/UserProcessor[/remote|/local]
    php:global/example/UserProcessor[/remote|/local]
    """
    if not isinstance(url, str):
        raise TypeError(f"url must be a str, got {type(url).__name__}")

    m = APP_URL_PATTERN.match(url)
    if m is not None:
        parsed = ParsedBeanUrl(
            original=url,
            form="app",
            class_name=m.group("className"),
            interface=m.group("interface"),
        )
    else:
        m = GLOBAL_URL_PATTERN.match(url)
        if m is None:
            raise UnmatchedURLError(url)
        parsed = ParsedBeanUrl(
            original=url,
            form="global",
            class_name=m.group("className"),
            context_name=m.group("contextName"),
            interface=m.group("interface"),
        )

    logger.debug("parsed %s-form bean url %r: %s", parsed.form, url, parsed)
    return parsed


def build_bean_url(
    class_name: str,
    *,
    context_name: str | None = None,
    interface: str | None = None,
) -> str:
    if not _SEGMENT.fullmatch(class_name or ""):
        raise NamingError(f"class name must be one or more word characters, got {class_name!r}")
    if context_name is not None and not _SEGMENT.fullmatch(context_name):
        raise NamingError(
            f"context name must be one or more word characters, got {context_name!r}"
        )
    if interface is not None and interface not in _INTERFACES:
        raise NamingError(f"interface must be 'local' or 'remote', got {interface!r}")

    if context_name is None:
        url = f"php:app/{class_name}"
    else:
        url = f"php:global/{context_name}/{class_name}"
    if interface is not None:
        url = f"{url}/{interface}"
    return url
