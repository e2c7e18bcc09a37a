"""
Canonical dispatch: map any value to exactly one kind name.

``type_of`` is the single authoritative label used for formatting, error
messages and operator overload resolution. It is total: unknown object
values degrade to ``"Object"`` instead of raising, since it runs on the
paths that build error messages.
"""

from __future__ import annotations

from typing import Any, Optional

from .catalog import TypeCatalog, default_catalog
from .core.logging import get_logger
from .kinds import Kind
from .markers import host_tag, is_native_date, is_native_regexp, is_native_sequence

logger = get_logger(__name__)


class Classifier:
    """
    ``type_of`` bound to a catalog.

    The module-level ``type_of`` uses the built-in catalog; a library that
    registered extra kinds builds its own ``Classifier``.
    """

    def __init__(self, catalog: Optional[TypeCatalog] = None):
        self.catalog = catalog if catalog is not None else default_catalog()

    def type_of(self, value: Any) -> str:
        """
        Return the kind name of ``value``.

        Order (earlier wins):

        1. object values: ``None`` -> ``"null"``, list/tuple -> ``"Array"``,
           ``"Date"``, ``"RegExp"``, then the catalog entries in
           precedence order (a node reports its own subtype), else
           ``"Object"``
        2. functions and classes -> ``"Function"``
        3. anything else -> the host tag (``"number"``, ``"string"``,
           ``"boolean"``, ``"undefined"``)

        Example:
            type_of(5)          -> 'number'
            type_of([1, 2, 3])  -> 'Array'
            type_of(None)       -> 'null'
        """
        tag = host_tag(value)

        if tag == "object":
            if value is None:
                return Kind.NULL.value
            if is_native_sequence(value):
                return Kind.ARRAY.value
            if is_native_date(value):
                return Kind.DATE.value
            if is_native_regexp(value):
                return Kind.REGEXP.value

            for entry in self.catalog:
                try:
                    if entry.predicate(value):
                        return entry.name_for(value)
                except Exception:
                    # Raising entries are skipped
                    logger.debug("Catalog entry %s failed", entry.name, exc_info=True)

            return Kind.OBJECT.value

        if tag == "function":
            return Kind.FUNCTION.value

        return tag

    def signature(self, *values: Any) -> str:
        return ",".join(self.type_of(value) for value in values)


_DEFAULT_CLASSIFIER = Classifier()


def type_of(value: Any) -> str:
    """Kind name of ``value`` under the built-in catalog."""
    return _DEFAULT_CLASSIFIER.type_of(value)


def type_signature(*values: Any) -> str:
    """
    Comma-joined kind names of ``values``, the key format of typed-function
    dispatch tables.

    Example:
        type_signature(2, big)  -> 'number,BigNumber'
    """
    return _DEFAULT_CLASSIFIER.signature(*values)
