"""
The dispatch catalog: which composite kinds ``type_of`` tests, in what order.

A catalog is an immutable, ordered collection of ``CatalogEntry`` records.
The built-in catalog is created once and shared. Third parties that add a
numeric type derive a new catalog with ``extend()``; the built-in one is
never modified, and nothing here is reachable from the expression language.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Callable, Iterable, Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field

from .core.config import get_settings
from .core.errors import CatalogFrozenError, DuplicateKindError
from .core.logging import get_logger
from .kinds import Kind
from .markers import declared_type
from .predicates import PREDICATES

logger = get_logger(__name__)

PRECEDENCE_STEP = 10

DEFAULT_ORDER: tuple[Kind, ...] = (
    Kind.BIG_NUMBER,
    Kind.COMPLEX,
    Kind.FRACTION,
    Kind.MATRIX,
    Kind.UNIT,
    Kind.INDEX,
    Kind.RANGE,
    Kind.RESULT_SET,
    Kind.NODE,
    Kind.CHAIN,
    Kind.HELP,
)
"""Composite kinds tested by ``type_of``, earliest first"""


class CatalogEntry(BaseModel):
    """
    One composite kind known to ``type_of``.

    Entries are frozen. ``label`` computes the reported name from the value
    when the name is not fixed (nodes report their own subtype).
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(min_length=1, description="Canonical kind name")
    predicate: Callable[[Any], bool] = Field(description="Membership test")
    precedence: int = Field(description="Dispatch position; lower is tested first")
    label: Optional[Callable[[Any], str]] = Field(
        default=None, description="Computes the reported name from the value"
    )

    def name_for(self, value: Any) -> str:
        if self.label is None:
            return self.name
        return self.label(value)


def _ordered(entries: Iterable[CatalogEntry]) -> tuple[CatalogEntry, ...]:
    entries = tuple(entries)
    seen: set[str] = set()
    for entry in entries:
        if entry.name in seen:
            raise DuplicateKindError(entry.name)
        seen.add(entry.name)
    # sorted() is stable, so ties keep registration order
    return tuple(sorted(entries, key=lambda entry: entry.precedence))


class TypeCatalog:
    """
    Ordered, immutable collection of catalog entries.

    Entries are kept sorted by precedence; entries with equal precedence
    keep their registration order. While extension is disabled in settings,
    only the built-in entries can be assembled into a catalog.

    Example:
        catalog = default_catalog().extend("Quaternion", is_quaternion, precedence=35)
        Classifier(catalog).type_of(Quaternion(1, 0, 0, 0))  # 'Quaternion'
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[CatalogEntry] = ()):
        self._entries = _ordered(entries)
        if not get_settings().ALLOW_CATALOG_EXTENSION:
            builtin = default_catalog().entries
            if self._entries != builtin:
                changed = [entry.name for entry in self._entries if entry not in builtin]
                changed += [entry.name for entry in builtin if entry not in self._entries]
                raise CatalogFrozenError(changed[0])

    @classmethod
    def _builtin(cls, entries: Iterable[CatalogEntry]) -> TypeCatalog:
        catalog = cls.__new__(cls)
        catalog._entries = _ordered(entries)
        return catalog

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return any(entry.name == name for entry in self._entries)

    def __repr__(self) -> str:
        return f"TypeCatalog({', '.join(self.names())})"

    @property
    def entries(self) -> tuple[CatalogEntry, ...]:
        return self._entries

    def names(self) -> list[str]:
        """Kind names in dispatch order."""
        return [entry.name for entry in self._entries]

    def get(self, name: str) -> Optional[CatalogEntry]:
        for entry in self._entries:
            if entry.name == name:
                return entry
        return None

    def extend(
        self,
        name: str,
        predicate: Callable[[Any], bool],
        precedence: Optional[int] = None,
        label: Optional[Callable[[Any], str]] = None,
    ) -> TypeCatalog:
        """
        Derive a catalog with one more kind.

        Args:
            name: Canonical name reported by ``type_of``
            predicate: Total membership test for the new kind
            precedence: Dispatch position (default: after every existing entry)
            label: Optional callable computing the reported name from the value

        Returns:
            A new catalog; this one is left unchanged

        Raises:
            CatalogFrozenError: If extension is disabled in settings
            DuplicateKindError: If ``name`` is already registered
        """
        if not get_settings().ALLOW_CATALOG_EXTENSION:
            raise CatalogFrozenError(name)
        if name in self:
            raise DuplicateKindError(name)

        if precedence is None:
            last = self._entries[-1].precedence if self._entries else 0
            precedence = last + PRECEDENCE_STEP

        entry = CatalogEntry(name=name, predicate=predicate, precedence=precedence, label=label)
        logger.debug("Catalog extended with %s at precedence %d", name, precedence)
        return TypeCatalog(self._entries + (entry,))


def _node_label(value: Any) -> str:
    return declared_type(value, Kind.NODE.value)


@lru_cache(maxsize=None)
def default_catalog() -> TypeCatalog:
    """The built-in catalog, created on first use and shared afterwards."""
    entries = []
    for position, kind in enumerate(DEFAULT_ORDER, start=1):
        entries.append(
            CatalogEntry(
                name=kind.value,
                predicate=PREDICATES[kind],
                precedence=position * PRECEDENCE_STEP,
                label=_node_label if kind is Kind.NODE else None,
            )
        )
    catalog = TypeCatalog._builtin(entries)
    logger.debug("Built default catalog: %s", ", ".join(catalog.names()))
    return catalog
