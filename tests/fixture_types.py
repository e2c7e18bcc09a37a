"""
Genuine value types for the classifier tests.

Two flavours:

- the "home" library below, whose classes are stamped with ``stamp()``
  (pydantic value objects declare their markers as ClassVars instead);
- ``build_foreign_library()``, which defines a fresh, independent set of
  classes with hand-written markers and no shared base, the way a second
  copy of the library loaded in the same process would.
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime
from decimal import Decimal
from types import SimpleNamespace
from typing import Any, Callable, ClassVar

from pydantic import BaseModel

from mathkind import NODE_VARIANTS, UNDEFINED, Kind, stamp


@stamp(Kind.BIG_NUMBER)
class BigNumber:
    """Arbitrary-precision number backed by Decimal."""

    def __init__(self, value: Any):
        self.value = Decimal(str(value))

    def __bool__(self) -> bool:
        return not self.value.is_zero()

    def __repr__(self) -> str:
        return f"BigNumber({self.value})"


class Complex(BaseModel):
    """Complex value object."""

    is_complex: ClassVar[bool] = True

    re: float
    im: float = 0.0


class Fraction(BaseModel):
    """Rational value object."""

    is_fraction: ClassVar[bool] = True

    numerator: int
    denominator: int = 1


@stamp(Kind.UNIT)
class Unit:
    def __init__(self, value: float, name: str):
        self.value = value
        self.name = name


@stamp(Kind.MATRIX)
class Matrix:
    """Base of the matrix encodings."""

    def size(self) -> list[int]:
        raise NotImplementedError


@stamp(Kind.DENSE_MATRIX)
class DenseMatrix(Matrix):
    def __init__(self, data: list[list[float]]):
        self.data = data

    def size(self) -> list[int]:
        return [len(self.data), len(self.data[0]) if self.data else 0]


@stamp(Kind.SPARSE_MATRIX)
class SparseMatrix(Matrix):
    def __init__(self, values: list[float], index: list[int], ptr: list[int], shape: list[int]):
        self.values = values
        self.index = index
        self.ptr = ptr
        self.shape = shape

    def size(self) -> list[int]:
        return list(self.shape)


@stamp(Kind.RANGE)
class Range:
    def __init__(self, start: int, end: int, step: int = 1):
        self.start = start
        self.end = end
        self.step = step


@stamp(Kind.INDEX)
class Index:
    def __init__(self, *ranges: Any):
        self.dimensions = list(ranges)


@stamp(Kind.RESULT_SET)
class ResultSet:
    def __init__(self, entries: list[Any]):
        self.entries = entries


@stamp(Kind.HELP)
class Help:
    def __init__(self, doc: dict[str, Any]):
        self.doc = doc


@stamp(Kind.CHAIN)
class Chain:
    """Fluent wrapper; callable like the real chain."""

    def __init__(self, value: Any):
        self.value = value

    def __call__(self) -> Any:
        return self.value


@stamp(Kind.NODE)
class Node:
    """Abstract expression tree node."""

    type = "Node"


def _node_variant(kind: Kind) -> type:
    return stamp(kind)(type(kind.value, (Node,), {}))


NODE_CLASSES: dict[Kind, type] = {kind: _node_variant(kind) for kind in NODE_VARIANTS}

OperatorNode = NODE_CLASSES[Kind.OPERATOR_NODE]
SymbolNode = NODE_CLASSES[Kind.SYMBOL_NODE]
ConstantNode = NODE_CLASSES[Kind.CONSTANT_NODE]


GENUINE: dict[Kind, Callable[[], Any]] = {
    Kind.BIG_NUMBER: lambda: BigNumber("1.5"),
    Kind.COMPLEX: lambda: Complex(re=1, im=2),
    Kind.FRACTION: lambda: Fraction(numerator=1, denominator=3),
    Kind.UNIT: lambda: Unit(5.0, "cm"),
    Kind.MATRIX: lambda: DenseMatrix([[1, 2], [3, 4]]),
    Kind.DENSE_MATRIX: lambda: DenseMatrix([[1, 0], [0, 1]]),
    Kind.SPARSE_MATRIX: lambda: SparseMatrix([1.0], [0], [0, 1, 1], [2, 2]),
    Kind.RANGE: lambda: Range(0, 10, 2),
    Kind.INDEX: lambda: Index(Range(0, 2)),
    Kind.RESULT_SET: lambda: ResultSet([1, 2]),
    Kind.HELP: lambda: Help({"name": "sqrt"}),
    Kind.CHAIN: lambda: Chain(3),
    Kind.NODE: lambda: SymbolNode(),
    **{kind: cls for kind, cls in NODE_CLASSES.items()},
}
"""Factory of a genuine value for every composite kind"""


def build_foreign_library() -> SimpleNamespace:
    """
    A second, independent copy of the value types.

    Nothing is shared with the home library: new class objects, markers
    written by hand, no ``stamp()``.
    """

    class BigNumber:
        is_big_number = True

        def __init__(self, value):
            self.value = Decimal(str(value))

    class Complex:
        is_complex = True

        def __init__(self, re, im=0.0):
            self.re = re
            self.im = im

    class Fraction:
        is_fraction = True

        def __init__(self, n, d=1):
            self.n = n
            self.d = d

    class Unit:
        is_unit = True

    class DenseMatrix:
        is_matrix = True
        is_dense_matrix = True

    class ResultSet:
        is_result_set = True

    class Node:
        is_node = True
        type = "Node"

    class OperatorNode(Node):
        is_operator_node = True
        type = "OperatorNode"

    class SymbolNode(Node):
        is_symbol_node = True
        type = "SymbolNode"

    return SimpleNamespace(
        BigNumber=BigNumber,
        Complex=Complex,
        Fraction=Fraction,
        Unit=Unit,
        DenseMatrix=DenseMatrix,
        ResultSet=ResultSet,
        Node=Node,
        OperatorNode=OperatorNode,
        SymbolNode=SymbolNode,
    )


# Totality grid


class RaisingAttributes:
    """Every attribute access, truth test and comparison raises."""

    def __getattribute__(self, name):
        raise RuntimeError(f"attribute access: {name}")

    def __getattr__(self, name):
        raise RuntimeError(f"missing attribute: {name}")

    def __bool__(self):
        raise RuntimeError("truth test")

    def __eq__(self, other):
        raise RuntimeError("comparison")

    __hash__ = object.__hash__


class RaisingClassProperty:
    """Lies about its class, and fails when asked."""

    @property
    def __class__(self):
        raise RuntimeError("__class__")


class UnsetSlotNode:
    """Node-shaped class whose variant marker slot is never assigned."""

    __slots__ = ("is_operator_node",)
    is_node = True


def _circular_list():
    items = [1]
    items.append(items)
    return items


def _circular_dict():
    mapping = {}
    mapping["self"] = mapping
    return mapping


def hostile_values():
    """Values that try to break a careless classifier."""
    return [
        RaisingAttributes(),
        RaisingClassProperty(),
        UnsetSlotNode(),
        _circular_list(),
        _circular_dict(),
    ]


def value_grid():
    """Every kind of host value a predicate might receive."""
    return [
        None,
        UNDEFINED,
        0,
        1,
        -2.5,
        "",
        "text",
        False,
        True,
        [],
        (),
        {},
        set(),
        b"bytes",
        1 + 2j,
        lambda: None,
        len,
        object,
        object(),
        math.nan,
        math.inf,
        -math.inf,
        date(2024, 1, 1),
        datetime(2024, 1, 1, 12, 0),
        re.compile("a+"),
        math,
        *hostile_values(),
    ]

