from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Protocol

from beanref.errors import ConfigurationError

logger = logging.getLogger(__name__)

_COMMENT_PREFIXES = ("#", "!")


class PropertiesSource(Protocol):
    def to_indexed_array(self) -> dict[str, str]: ...


def _split_line(line: str) -> tuple[str, str]:
    # Key ends at the first unescaped '=', ':' or whitespace.
    escaped = False
    for i, ch in enumerate(line):
        if escaped:
            escaped = False
            continue
        if ch == "\\":
            escaped = True
            continue
        if ch in "=:":
            return line[:i].rstrip(), line[i + 1 :].lstrip()
        if ch.isspace():
            rest = line[i:].lstrip()
            if rest[:1] in ("=", ":"):
                rest = rest[1:].lstrip()
            return line[:i], rest
    return line, ""


_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _unescape(text: str) -> str:
    out: list[str] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch != "\\" or i + 1 == len(text):
            out.append(ch)
            i += 1
            continue
        nxt = text[i + 1]
        if nxt == "u":
            digits = text[i + 2 : i + 6]
            if len(digits) == 4 and all(d in _HEX_DIGITS for d in digits):
                out.append(chr(int(digits, 16)))
                i += 6
                continue
        # Unknown escapes (and a malformed \u) drop the backslash.
        out.append(_ESCAPES.get(nxt, nxt))
        i += 2
    return "".join(out)


def _logical_lines(text: str) -> Iterator[str]:
    pending = ""
    for raw in text.splitlines():
        line = raw.lstrip()
        if not pending and (not line or line.startswith(_COMMENT_PREFIXES)):
            continue
        # An odd number of trailing backslashes continues onto the next line.
        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2 == 1:
            pending += line[:-1]
            continue
        yield pending + line
        pending = ""
    if pending:
        yield pending


class Properties:
    """Ordered string-keyed configuration properties.

    Reads the Java-style ``.properties`` format::

        # comment
        className = UserProcessor
        interface: remote
    """

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = {str(k): str(v) for k, v in (values or {}).items()}

    @classmethod
    def loads(cls, text: str) -> Properties:
        props = cls()
        for line in _logical_lines(text):
            key, value = _split_line(line)
            props.set_property(_unescape(key), _unescape(value))
        return props

    @classmethod
    def load(cls, path: str | Path) -> Properties:
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8-sig")
        except FileNotFoundError as e:
            raise ConfigurationError(f"properties file not found: {path}") from e
        except OSError as e:
            raise ConfigurationError(f"could not read properties file {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise ConfigurationError(f"properties file {path} is not valid UTF-8: {e}") from e
        props = cls.loads(text)
        logger.debug("loaded %d properties from %s", len(props), path)
        return props

    def get_property(self, key: str, default: str | None = None) -> str | None:
        return self._values.get(key, default)

    def set_property(self, key: str, value: str) -> None:
        self._values[str(key)] = str(value)

    def to_indexed_array(self) -> dict[str, str]:
        return dict(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Properties({self._values!r})"
