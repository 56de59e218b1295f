"""Typed configuration model for the highlighter.

The model mirrors the TOML layout of ``config.toml``::

    [groups.date]
    style = { fg = "magenta" }

    [[groups.keywords]]
    words = ["null", "true", "false"]
    style = { fg = "red", italic = true }

Each dataclass has a ``from_dict`` constructor that validates one table of
parsed TOML and raises ConfigSchemaError naming the dotted field path on the
first violation. Unknown keys are ignored so newer files still load.
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import date, datetime, time
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

from core.exceptions import ConfigSchemaError


def _toml_type(value: Any) -> str:
    """Name a parsed TOML value's type the way TOML does."""
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "table"
    if isinstance(value, (datetime, date, time)):
        return "datetime"
    return type(value).__name__


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _expect_table(value: Any, path: str) -> Mapping[str, Any]:
    if not isinstance(value, dict):
        raise ConfigSchemaError(f"expected a table, found {_toml_type(value)}", field=path)
    return value


def _required(data: Mapping[str, Any], key: str, path: str) -> Any:
    if key not in data:
        raise ConfigSchemaError(f"missing field `{key}`", field=path or None)
    return data[key]


def _bool(data: Mapping[str, Any], key: str, path: str) -> bool:
    value = data.get(key, False)
    if not isinstance(value, bool):
        raise ConfigSchemaError(f"expected a boolean, found {_toml_type(value)}", field=_join(path, key))
    return value


class Color(str, Enum):
    """Terminal colors accepted for ``fg`` and ``bg``."""

    NONE = "none"
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"

    @classmethod
    def parse(cls, value: Any, path: str) -> "Color":
        if not isinstance(value, str):
            raise ConfigSchemaError(f"expected a color name, found {_toml_type(value)}", field=path)
        try:
            return cls(value)
        except ValueError:
            names = ", ".join(color.value for color in cls)
            raise ConfigSchemaError(
                f"unknown color '{value}', expected one of: {names}", field=path
            ) from None


@dataclass(frozen=True)
class Style:
    """A single rendering directive.

    Attributes:
        fg: Foreground color
        bg: Background color
        bold: Bold text
        faint: Dimmed text
        italic: Italic text
        underline: Underlined text
    """
    fg: Color = Color.NONE
    bg: Color = Color.NONE
    bold: bool = False
    faint: bool = False
    italic: bool = False
    underline: bool = False

    def is_plain(self) -> bool:
        """Whether this style leaves text unchanged."""
        return self == Style()

    @classmethod
    def from_dict(cls, data: Any, path: str) -> "Style":
        table = _expect_table(data, path)
        return cls(
            fg=Color.parse(table["fg"], _join(path, "fg")) if "fg" in table else Color.NONE,
            bg=Color.parse(table["bg"], _join(path, "bg")) if "bg" in table else Color.NONE,
            bold=_bool(table, "bold", path),
            faint=_bool(table, "faint", path),
            italic=_bool(table, "italic", path),
            underline=_bool(table, "underline", path),
        )


def _style(data: Mapping[str, Any], key: str, path: str) -> Style:
    return Style.from_dict(_required(data, key, path), _join(path, key))


@dataclass(frozen=True)
class Keyword:
    """Literal words rendered with a shared style."""
    style: Style
    words: Tuple[str, ...]

    @classmethod
    def from_dict(cls, data: Any, path: str) -> "Keyword":
        table = _expect_table(data, path)
        style = _style(table, "style", path)
        raw_words = _required(table, "words", path)
        words_path = _join(path, "words")
        if not isinstance(raw_words, list):
            raise ConfigSchemaError(f"expected an array, found {_toml_type(raw_words)}", field=words_path)
        for index, word in enumerate(raw_words):
            if not isinstance(word, str):
                raise ConfigSchemaError(
                    f"expected a string, found {_toml_type(word)}", field=f"{words_path}[{index}]"
                )
        return cls(style=style, words=tuple(raw_words))


@dataclass(frozen=True)
class _SegmentedGroup:
    """Values split into segments by a fixed separator character."""
    segment: Style
    separator: Style

    @classmethod
    def from_dict(cls, data: Any, path: str):
        table = _expect_table(data, path)
        return cls(
            segment=_style(table, "segment", path),
            separator=_style(table, "separator", path),
        )


@dataclass(frozen=True)
class Uuid(_SegmentedGroup):
    """UUIDs: hex segments separated by hyphens."""


@dataclass(frozen=True)
class Ip(_SegmentedGroup):
    """IPv4 addresses: octets separated by dots."""


@dataclass(frozen=True)
class FilePath(_SegmentedGroup):
    """Filesystem paths: components separated by slashes."""


@dataclass(frozen=True)
class Date:
    style: Style

    @classmethod
    def from_dict(cls, data: Any, path: str) -> "Date":
        return cls(style=_style(_expect_table(data, path), "style", path))


@dataclass(frozen=True)
class Number:
    style: Style

    @classmethod
    def from_dict(cls, data: Any, path: str) -> "Number":
        return cls(style=_style(_expect_table(data, path), "style", path))


DEFAULT_QUOTES_TOKEN = '"'


@dataclass(frozen=True)
class Quotes:
    """Substrings delimited by ``token``.

    Attributes:
        style: Style of the quoted content
        token: Single delimiter character
    """
    style: Style
    token: str = DEFAULT_QUOTES_TOKEN

    @classmethod
    def from_dict(cls, data: Any, path: str) -> "Quotes":
        table = _expect_table(data, path)
        style = _style(table, "style", path)
        token = table.get("token", DEFAULT_QUOTES_TOKEN)
        if not isinstance(token, str) or len(token) != 1:
            found = f"string of length {len(token)}" if isinstance(token, str) else _toml_type(token)
            raise ConfigSchemaError(f"expected a single character, found {found}", field=_join(path, "token"))
        return cls(style=style, token=token)


@dataclass(frozen=True)
class Url:
    """URL parts: scheme (http/https), host, path, query pairs and symbols."""
    http: Style
    https: Style
    host: Style
    path: Style
    query_params_key: Style
    query_params_value: Style
    symbols: Style

    @classmethod
    def from_dict(cls, data: Any, path: str) -> "Url":
        table = _expect_table(data, path)
        return cls(**{f.name: _style(table, f.name, path) for f in fields(cls)})


# TOML key -> group schema for every single-table group
_GROUP_TABLES = {
    "date": Date,
    "number": Number,
    "quotes": Quotes,
    "uuid": Uuid,
    "url": Url,
    "ip": Ip,
    "path": FilePath,
}


@dataclass(frozen=True)
class Groups:
    """Every highlightable group. ``None`` means the group is never highlighted."""
    date: Optional[Date] = None
    number: Optional[Number] = None
    quotes: Optional[Quotes] = None
    uuid: Optional[Uuid] = None
    url: Optional[Url] = None
    ip: Optional[Ip] = None
    path: Optional[FilePath] = None
    keywords: Optional[Tuple[Keyword, ...]] = None

    @classmethod
    def from_dict(cls, data: Any, path: str = "groups") -> "Groups":
        table = _expect_table(data, path)
        groups: Dict[str, Any] = {}
        for key, schema in _GROUP_TABLES.items():
            if key in table:
                groups[key] = schema.from_dict(table[key], _join(path, key))

        if "keywords" in table:
            raw = table["keywords"]
            keywords_path = _join(path, "keywords")
            if not isinstance(raw, list):
                raise ConfigSchemaError(f"expected an array of tables, found {_toml_type(raw)}", field=keywords_path)
            groups["keywords"] = tuple(
                Keyword.from_dict(item, f"{keywords_path}[{index}]") for index, item in enumerate(raw)
            )
        return cls(**groups)

    def enabled(self) -> List[str]:
        """Names of the groups that are present, in declaration order."""
        return [f.name for f in fields(self) if getattr(self, f.name) is not None]


def _plain(value: Any) -> Any:
    """Convert model values into TOML-shaped plain data."""
    if isinstance(value, Color):
        return value.value
    if isinstance(value, tuple):
        return [_plain(item) for item in value]
    if hasattr(value, "__dataclass_fields__"):
        return {
            f.name: _plain(getattr(value, f.name))
            for f in fields(value)
            if getattr(value, f.name) is not None
        }
    return value


@dataclass(frozen=True)
class Config:
    """Root of the configuration.

    Attributes:
        groups: Highlight groups
    """
    groups: Groups = field(default_factory=Groups)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Config":
        """Build a Config from a parsed TOML document.

        A document without ``groups`` yields a Config with every group absent.

        Raises:
            ConfigSchemaError: If the document violates the schema
        """
        table = _expect_table(data, "")
        if "groups" not in table:
            return cls()
        return cls(groups=Groups.from_dict(table["groups"], "groups"))

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data view of the configuration, absent groups omitted."""
        return _plain(self)


__all__ = [
    "Color",
    "Style",
    "Keyword",
    "Uuid",
    "Ip",
    "FilePath",
    "Date",
    "Number",
    "Quotes",
    "Url",
    "Groups",
    "Config",
    "DEFAULT_QUOTES_TOKEN",
]
