"""Names, include paths and include guards of the generated C++ files.

The functions here accept any model object that offers the attributes listed
in the protocols below, so they work with every kind of type, message element
and service the parser produces.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Protocol

from soapero.classname import secure_string
from soapero.file_helper import build_file_name, build_path

__all__ = [
    "FileCategory",
    "TypeMode",
    "header_path",
    "type_header_path",
    "simple_type_header_path",
    "complex_type_header_path",
    "element_header_path",
    "type_define",
    "element_define",
    "service_define",
    "type_header_file_name",
    "type_cpp_file_name",
    "simple_type_header_file_name",
    "simple_type_namespace",
    "element_header_file_name",
    "element_cpp_file_name",
]

logger = logging.getLogger(__name__)

TYPES_DIR = "types"
MESSAGES_DIR = "messages"


class FileCategory(Enum):
    """Kind of generated file that an include line is written into."""

    UNKNOWN = "unknown"
    TYPE = "type"
    MESSAGE = "message"
    SERVICE = "service"


class TypeMode(Enum):
    """Whether a schema type is simple, complex or not yet resolved."""

    UNKNOWN = "unknown"
    SIMPLE = "simple"
    COMPLEX = "complex"


class NamedItem(Protocol):
    """Anything with a namespace prefix and a local name."""

    namespace: str
    local_name: str


class TypeLike(NamedItem, Protocol):
    """A schema type."""

    type_mode: TypeMode


class SimpleTypeLike(TypeLike, Protocol):
    """A simple schema type that may map to a runtime value class."""

    def has_variable_type(self) -> bool: ...

    def exported_typename(self) -> str: ...

    def exported_namespace(self) -> str: ...


class ServiceLike(Protocol):
    """A service with a class name."""

    name: str


def header_path(namespace: str, category: str, filename: str, origin: FileCategory) -> str:
    """Return the include path of a header as seen from a file of kind ``origin``.

    Type and message files sit two directories deep, so their includes climb
    back to the output root first.
    """
    root = "../../" if origin in (FileCategory.TYPE, FileCategory.MESSAGE) else ""
    return build_path(root, namespace, category, filename)


def type_header_path(type_: TypeLike, origin: FileCategory) -> str:
    """Return the include path of the header declaring ``type_``."""
    if type_.type_mode is TypeMode.SIMPLE:
        return simple_type_header_path(type_, origin)  # type: ignore[arg-type]
    if type_.type_mode is TypeMode.COMPLEX:
        return complex_type_header_path(type_, origin)
    logger.warning("[TypeListBuilder] Unknown type: %s", type_.local_name)
    return header_path(type_.namespace, TYPES_DIR, type_header_file_name(type_), origin)


def simple_type_header_path(simple_type: SimpleTypeLike, origin: FileCategory) -> str:
    """Return the include path for a simple type, or '' when it needs no header."""
    if not simple_type.has_variable_type():
        return ""
    namespace = simple_type_namespace(simple_type)
    filename = simple_type_header_file_name(simple_type)
    return header_path(namespace, TYPES_DIR, filename, origin)


def complex_type_header_path(complex_type: TypeLike, origin: FileCategory) -> str:
    """Return the include path of the header declaring a complex type."""
    filename = type_header_file_name(complex_type)
    return header_path(complex_type.namespace, TYPES_DIR, filename, origin)


def element_header_path(element: NamedItem, origin: FileCategory) -> str:
    """Return the include path of the header declaring a request/response element."""
    filename = element_header_file_name(element)
    return header_path(element.namespace, MESSAGES_DIR, filename, origin)


def _prefix_part(prefix: str) -> str:
    return f"{secure_string(prefix).upper()}_" if prefix else ""


def _part(text: str) -> str:
    return f"{secure_string(text).upper()}_" if text else ""


def type_define(prefix: str, type_: NamedItem) -> str:
    """Return the include-guard macro of a type header."""
    return (
        _prefix_part(prefix)
        + _part(type_.namespace)
        + "TYPES_"
        + _part(type_.local_name)
        + "H_"
    )


def element_define(prefix: str, element: NamedItem) -> str:
    """Return the include-guard macro of a message header."""
    return (
        _prefix_part(prefix)
        + _part(element.namespace)
        + "MSG_"
        + _part(element.local_name)
        + "H_"
    )


def service_define(prefix: str, service: ServiceLike) -> str:
    """Return the include-guard macro of the service header."""
    return _prefix_part(prefix) + _part(service.name) + "H_"


def type_header_file_name(type_: NamedItem) -> str:
    """Return the header file name of a type."""
    return build_file_name(type_.namespace, type_.local_name, "h")


def type_cpp_file_name(type_: NamedItem) -> str:
    """Return the source file name of a type."""
    return build_file_name(type_.namespace, type_.local_name, "cpp")


def simple_type_header_file_name(simple_type: SimpleTypeLike) -> str:
    """Return the header file name of a simple type's value class.

    Built-in schema types carry no namespace prefix in their file name.
    """
    namespace = simple_type_namespace(simple_type)
    if namespace == "xs":
        namespace = ""
    return build_file_name(namespace, simple_type.exported_typename(), "h")


def simple_type_namespace(simple_type: SimpleTypeLike) -> str:
    """Return the namespace of a simple type, with the schema aliases folded to 'xs'."""
    namespace = simple_type.exported_namespace()
    if namespace in ("xsd", "s"):
        return "xs"
    return namespace


def element_header_file_name(element: NamedItem) -> str:
    """Return the header file name of a message element."""
    return build_file_name(element.namespace, element.local_name, "h")


def element_cpp_file_name(element: NamedItem) -> str:
    """Return the source file name of a message element."""
    return build_file_name(element.namespace, element.local_name, "cpp")