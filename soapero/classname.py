"""Names of generated classes: namespace prefix, local name and category."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

__all__ = ["secure_string", "ClassCategory", "Classname"]

_UNSAFE_RE = re.compile(r"[^0-9A-Za-z_]")


def secure_string(text: str) -> str:
    """Return ``text`` with every character not allowed in an identifier replaced by '_'."""
    return _UNSAFE_RE.sub("_", text)


class ClassCategory(Enum):
    """Where a generated class lives inside its namespace."""

    UNKNOWN = "unknown"
    TYPE = "type"
    MESSAGE = "message"


@dataclass
class Classname:
    """A schema name split into namespace prefix and local name."""

    category: ClassCategory
    local_name: str = ""
    namespace: str = ""
    namespace_uri: str = ""

    def set_qualified_name(self, namespace: str, local_name: str) -> None:
        """Set both the namespace prefix and the local name."""
        self.namespace = namespace
        self.local_name = local_name

    def set_name(self, name: str) -> None:
        """Set from ``prefix:local`` or a bare local name (keeping the namespace)."""
        if ":" in name:
            parts = name.split(":")
            self.namespace = parts[0]
            self.local_name = parts[1]
        else:
            self.local_name = name

    def tag_qualified_name(self) -> str:
        """Return the name as written in XML tags: ``prefix:local`` or ``local``."""
        if not self.namespace:
            return self.local_name
        return f"{self.namespace}:{self.local_name}"

    def _scoped(self, local: str) -> str:
        scope = self.namespace.upper().replace("-", "_")
        return f"{scope}{self.category_namespace()}::{local}"

    def name_with_namespace(self) -> str:
        """Return the C++ scoped name, with the local name made identifier-safe."""
        safe_local = secure_string(self.local_name)
        if not self.namespace:
            return safe_local
        return self._scoped(safe_local)

    def qualified_name(self) -> str:
        """Return the C++ scoped name; without namespace the raw local name."""
        if not self.namespace:
            return self.local_name
        return self._scoped(secure_string(self.local_name))

    def get_local_name(self, safe: bool = False) -> str:
        """Return the local name, made identifier-safe when ``safe`` is true."""
        return secure_string(self.local_name) if safe else self.local_name

    def category_namespace(self) -> str:
        """Return the inner scope for the category: ``::TYPES``, ``::MSG`` or empty."""
        if self.category is ClassCategory.TYPE:
            return "::TYPES"
        if self.category is ClassCategory.MESSAGE:
            return "::MSG"
        return ""