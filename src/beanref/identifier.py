from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any, ClassVar, TypeVar

from beanref.errors import NamingError
from beanref.properties import PropertiesSource
from beanref.urls import build_bean_url, parse_bean_url

logger = logging.getLogger(__name__)

_R = TypeVar("_R", bound="ResourceIdentifier")


def member(name: str) -> Any:
    """An optional string field stored under the member ``name``."""
    return field(default=None, metadata={"member": name})


@dataclass(kw_only=True)
class ResourceIdentifier:
    """Base for identifiers whose dataclass fields are their members.

    Each field declared with :func:`member` is addressable by its member
    name through :meth:`get_value` / :meth:`set_value`. There are no other
    members: unknown names raise ``KeyError``.
    """

    @classmethod
    def _member_fields(cls) -> dict[str, str]:
        return {f.metadata["member"]: f.name for f in fields(cls) if "member" in f.metadata}

    @classmethod
    def supported_members(cls) -> tuple[str, ...]:
        return tuple(cls._member_fields())

    def _attr(self, name: str) -> str:
        try:
            return self._member_fields()[name]
        except KeyError as e:
            raise KeyError(f"{type(self).__name__} has no member {name!r}") from e

    def get_value(self, name: str) -> str | None:
        return getattr(self, self._attr(name))

    def set_value(self, name: str, value: str | None) -> None:
        setattr(self, self._attr(name), value)

    def to_values(self) -> dict[str, str]:
        values: dict[str, str] = {}
        for name, attr in self._member_fields().items():
            value = getattr(self, attr)
            if value is not None:
                values[name] = value
        return values

    @classmethod
    def from_values(cls: type[_R], values: Mapping[str, Any]) -> _R:
        members = cls._member_fields()
        kwargs: dict[str, str] = {}
        for name, value in values.items():
            attr = members.get(name)
            if attr is None:
                logger.debug("ignoring unsupported member %r for %s", name, cls.__name__)
                continue
            if value is not None:
                kwargs[attr] = str(value)
        return cls(**kwargs)


@dataclass(kw_only=True)
class EnterpriseBeanResourceIdentifier(ResourceIdentifier):
    """Resource identifier for enterprise beans with a JNDI like syntax.

    Not thread-safe: share an instance between threads only with external
    locking.
    """

    LOCAL_INTERFACE: ClassVar[str] = "local"
    REMOTE_INTERFACE: ClassVar[str] = "remote"

    PROPERTY_CONTEXT_NAME: ClassVar[str] = "contextName"
    PROPERTY_CLASS_NAME: ClassVar[str] = "className"
    PROPERTY_INDEX_FILE: ClassVar[str] = "indexFile"
    PROPERTY_INTERFACE: ClassVar[str] = "interface"

    context_name: str | None = member(PROPERTY_CONTEXT_NAME)
    class_name: str | None = member(PROPERTY_CLASS_NAME)
    index_file: str | None = member(PROPERTY_INDEX_FILE)
    interface: str | None = member(PROPERTY_INTERFACE)

    def get_index_file(self) -> str | None:
        return self.index_file

    def set_index_file(self, index_file: str | None) -> None:
        self.index_file = index_file

    def get_context_name(self) -> str | None:
        return self.context_name

    def set_context_name(self, context_name: str | None) -> None:
        self.context_name = context_name

    def get_class_name(self) -> str | None:
        return self.class_name

    def set_class_name(self, class_name: str | None) -> None:
        self.class_name = class_name

    def get_interface(self) -> str | None:
        return self.interface

    def set_interface(self, interface: str | None) -> None:
        # Not checked against local/remote; only parsed URLs are restricted.
        self.interface = interface

    def is_local(self) -> bool:
        return self.interface == self.LOCAL_INTERFACE

    def is_remote(self) -> bool:
        return self.interface == self.REMOTE_INTERFACE

    def populate_from_url(self, url: str) -> None:
        """Populate the members from ``url``.

        Accepted forms::

            php:app/UserProcessor[/remote|/local]
            php:global/example/UserProcessor[/remote|/local]

        Members the URL does not carry keep their current value. Raises
        :class:`~beanref.errors.UnmatchedURLError` (leaving the instance
        untouched) if ``url`` matches neither form.
        """
        parsed = parse_bean_url(url)

        self.class_name = parsed.class_name
        if parsed.context_name is not None:
            self.context_name = parsed.context_name
        if parsed.interface is not None:
            self.interface = parsed.interface

    def to_url(self) -> str:
        if self.class_name is None:
            raise NamingError(f"cannot build a URL for {self!r}: class name is not set")
        return build_bean_url(
            self.class_name,
            context_name=self.context_name,
            interface=self.interface,
        )

    @classmethod
    def from_url(cls, url: str) -> EnterpriseBeanResourceIdentifier:
        ident = cls()
        ident.populate_from_url(url)
        return ident

    @classmethod
    def create_from_properties(
        cls, properties: PropertiesSource | Mapping[str, Any]
    ) -> EnterpriseBeanResourceIdentifier:
        if isinstance(properties, Mapping):
            values = dict(properties)
        else:
            values = properties.to_indexed_array()
        return cls.from_values(values)
