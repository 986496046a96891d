"""Runtime value classes for the XML Schema built-in types used by generated services.

Each value starts out null. Assigning ``value`` stores it and clears the null
flag. ``deserialize`` reads either an :class:`xml.etree.ElementTree.Element`,
using all of its text content, or a plain string holding an attribute value.
"""

from __future__ import annotations

import math
import re
import struct
from datetime import datetime, timedelta, timezone
from typing import Any
from xml.etree.ElementTree import Element

__all__ = [
    "XsValue",
    "String",
    "AnySimpleType",
    "AnyType",
    "AnyURI",
    "Base64Binary",
    "HexBinary",
    "NCName",
    "QName",
    "Token",
    "Boolean",
    "DateTime",
    "Double",
    "Duration",
    "Float",
    "Integer",
    "UnsignedInteger",
    "NonNegativeInteger",
    "UnsignedLong",
]

_UNSET: Any = object()

_SIGNED_RE = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_RE = re.compile(r"\+?[0-9]+")
_ISO_RE = re.compile(
    r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"(?:[T ](?P<hour>\d{2}):(?P<minute>\d{2})"
    r"(?::(?P<second>\d{2})(?:[.,](?P<fraction>\d+))?)?)?"
    r"(?P<tz>Z|[+-]\d{2}(?::?\d{2})?)?"
)


def _node_text(node: Element | str) -> tuple[str, bool]:
    """Return the text held by ``node`` and whether it came from an attribute."""
    if isinstance(node, str):
        return node, True
    if isinstance(node, Element):
        return "".join(node.itertext()), False
    raise TypeError(f"cannot read a value from {type(node).__name__}")


class XsValue:
    """Common behaviour of every schema value: a value, a null flag, text I/O."""

    _default: Any = None

    def __init__(self, value: Any = _UNSET) -> None:
        self._value = self._default
        self._null = True
        if value is not _UNSET:
            self.value = value

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, new_value: Any) -> None:
        self._value = self._coerce(new_value)
        self._null = False

    def _coerce(self, new_value: Any) -> Any:
        return new_value

    def serialize(self) -> str:
        """Return the value as schema text."""
        return str(self._value)

    def deserialize(self, node: Element | str) -> None:
        """Load the value from an element's text or an attribute's value."""
        text, from_attribute = _node_text(node)
        self._load(text, from_attribute)

    def _load(self, text: str, from_attribute: bool) -> None:
        self.value = text.strip()

    def is_null(self) -> bool:
        """Return True while no value has been set."""
        return self._null

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value and self.is_null() == other.is_null()

    def __repr__(self) -> str:
        if self.is_null():
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}({self._value!r})"


class String(XsValue):
    """xs:string; null while the value is None."""

    def _coerce(self, new_value: Any) -> str | None:
        if new_value is not None and not isinstance(new_value, str):
            raise TypeError("String value must be a str or None")
        return new_value

    def serialize(self) -> str:
        return self._value if self._value is not None else ""

    def is_null(self) -> bool:
        return self._value is None


class AnySimpleType(String):
    """xs:anySimpleType, held as text."""


class AnyType(String):
    """xs:anyType, held as text."""


class AnyURI(String):
    """xs:anyURI, held as text."""


class Base64Binary(String):
    """xs:base64Binary, held as its encoded text."""


class HexBinary(String):
    """xs:hexBinary, held as its encoded text."""


class NCName(String):
    """xs:NCName, held as text."""


class QName(String):
    """xs:QName, held as text."""


class Token(String):
    """xs:token, held as text."""


class Boolean(XsValue):
    """xs:boolean; only the exact words ``true`` and ``false`` are read."""

    _default = False

    def _coerce(self, new_value: Any) -> bool:
        if not isinstance(new_value, bool):
            raise TypeError("Boolean value must be a bool")
        return new_value

    def serialize(self) -> str:
        return "true" if self._value else "false"

    def _load(self, text: str, from_attribute: bool) -> None:
        word = text.strip()
        if word == "true":
            self.value = True
        elif word == "false":
            self.value = False


def _parse_iso_datetime(text: str) -> datetime | None:
    match = _ISO_RE.fullmatch(text)
    if match is None:
        return None
    parts = match.groupdict()
    fraction = parts["fraction"] or ""
    microsecond = int((fraction + "000000")[:6]) if fraction else 0
    tzinfo = None
    tz = parts["tz"]
    if tz == "Z":
        tzinfo = timezone.utc
    elif tz:
        digits = tz[1:].replace(":", "")
        hours = int(digits[:2])
        minutes = int(digits[2:4]) if len(digits) > 2 else 0
        offset = timedelta(hours=hours, minutes=minutes)
        try:
            tzinfo = timezone(-offset if tz[0] == "-" else offset)
        except ValueError:
            return None
    try:
        return datetime(
            int(parts["year"]),
            int(parts["month"]),
            int(parts["day"]),
            int(parts["hour"] or 0),
            int(parts["minute"] or 0),
            int(parts["second"] or 0),
            microsecond,
            tzinfo=tzinfo,
        )
    except ValueError:
        return None


class DateTime(XsValue):
    """xs:dateTime; unreadable text leaves an empty (None) but non-null value."""

    def _coerce(self, new_value: Any) -> datetime | None:
        if new_value is not None and not isinstance(new_value, datetime):
            raise TypeError("DateTime value must be a datetime or None")
        return new_value

    def serialize(self) -> str:
        if self._value is None:
            return ""
        return self._value.strftime("%Y-%m-%dT%H:%M:%S")

    def _load(self, text: str, from_attribute: bool) -> None:
        self.value = _parse_iso_datetime(text)


def _parse_float(text: str) -> float:
    if "_" in text:
        return 0.0
    try:
        return float(text)
    except ValueError:
        return 0.0


class Double(XsValue):
    """xs:double; unreadable text reads as 0."""

    _default = 0.0

    def _coerce(self, new_value: Any) -> float:
        if isinstance(new_value, bool) or not isinstance(new_value, (int, float)):
            raise TypeError("Double value must be a number")
        return float(new_value)

    def serialize(self) -> str:
        return f"{self._value:g}"

    def _load(self, text: str, from_attribute: bool) -> None:
        self.value = _parse_float(text.strip())


def _to_float32(number: float) -> float:
    return struct.unpack("f", struct.pack("f", number))[0]


class Float(XsValue):
    """xs:float, stored at single precision; unreadable text reads as 0."""

    _default = 0.0

    def _coerce(self, new_value: Any) -> float:
        if isinstance(new_value, bool) or not isinstance(new_value, (int, float)):
            raise TypeError("Float value must be a number")
        try:
            return _to_float32(float(new_value))
        except OverflowError:
            raise ValueError(f"{new_value!r} is out of single-precision range") from None

    def serialize(self) -> str:
        return f"{self._value:g}"

    def _load(self, text: str, from_attribute: bool) -> None:
        number = _parse_float(text.strip())
        try:
            self.value = number
        except ValueError:
            self.value = 0.0
        if math.isnan(number):
            self.value = number


class Duration(XsValue):
    """xs:duration, kept as its lexical text."""

    _default = ""

    def _coerce(self, new_value: Any) -> str:
        if not isinstance(new_value, str):
            raise TypeError("Duration value must be a str")
        return new_value


class _BoundedInteger(XsValue):
    _default = 0
    _minimum = 0
    _maximum = 0
    _pattern = _SIGNED_RE

    def _coerce(self, new_value: Any) -> int:
        if isinstance(new_value, bool) or not isinstance(new_value, int):
            raise TypeError(f"{type(self).__name__} value must be an int")
        if not self._minimum <= new_value <= self._maximum:
            raise ValueError(
                f"{new_value} is outside [{self._minimum}, {self._maximum}]"
            )
        return new_value

    def _parse(self, text: str, maximum: int) -> int:
        text = text.strip()
        if self._pattern.fullmatch(text) is None:
            return 0
        number = int(text)
        return number if self._minimum <= number <= maximum else 0

    def _load(self, text: str, from_attribute: bool) -> None:
        self.value = self._parse(text, self._maximum)


class Integer(_BoundedInteger):
    """xs:integer as a 32-bit signed value; unreadable text reads as 0."""

    _minimum = -(2**31)
    _maximum = 2**31 - 1


class UnsignedInteger(_BoundedInteger):
    """xs:unsignedInt as a 32-bit unsigned value; unreadable text reads as 0."""

    _maximum = 2**32 - 1
    _pattern = _UNSIGNED_RE


class NonNegativeInteger(UnsignedInteger):
    """xs:nonNegativeInteger, held like an unsigned 32-bit value."""


class UnsignedLong(_BoundedInteger):
    """xs:unsignedLong as a 64-bit unsigned value.

    Element text is read within the 32-bit unsigned range, attribute values
    within the full 64-bit range.
    """

    _maximum = 2**64 - 1
    _pattern = _UNSIGNED_RE

    def _load(self, text: str, from_attribute: bool) -> None:
        limit = self._maximum if from_attribute else UnsignedInteger._maximum
        self.value = self._parse(text, limit)