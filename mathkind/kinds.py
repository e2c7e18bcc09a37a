"""
The closed enumeration of value kinds known to mathkind.

Every kind has a canonical name (the string ``type_of`` reports), a marker
attribute that producers set on their classes, and a proof strategy that
decides where the marker must be found before it is trusted.

Proof strategies:

- ``PRIMITIVE``: the native Python type is the proof. Builtins cannot be
  forged into composite identities.
- ``CLASS_MARKER``: the value's class (not the instance) carries the marker.
  An instance attribute or a dict key with the same name never counts.
- ``VALUE_MARKER``: like ``CLASS_MARKER``, restricted to object-shaped
  values. Used by the value-object kinds (Complex, Fraction).
- ``NODE_MARKER``: the value exposes its variant marker AND its class
  separately carries the generic ``is_node`` marker. A forgery would need
  to fake both, and one of them lives on a class it does not control.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Proof(str, Enum):
    """How membership of a kind is proven."""

    PRIMITIVE = "primitive"
    CLASS_MARKER = "class_marker"
    VALUE_MARKER = "value_marker"
    NODE_MARKER = "node_marker"


class Kind(str, Enum):
    """
    Recognised kinds, valued by their canonical name.

    The canonical name is what ``type_of`` returns for that kind, except
    for the matrix encodings (reported as ``"Matrix"``) and node variants
    (reported by the node's own ``type``).
    """

    # Host values
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    FUNCTION = "Function"
    NULL = "null"
    UNDEFINED = "undefined"
    ARRAY = "Array"
    DATE = "Date"
    REGEXP = "RegExp"
    OBJECT = "Object"

    # Numeric algebra types
    BIG_NUMBER = "BigNumber"
    COMPLEX = "Complex"
    FRACTION = "Fraction"
    UNIT = "Unit"
    MATRIX = "Matrix"
    DENSE_MATRIX = "DenseMatrix"
    SPARSE_MATRIX = "SparseMatrix"

    # Control and wrapper types
    RANGE = "Range"
    INDEX = "Index"
    RESULT_SET = "ResultSet"
    HELP = "Help"
    CHAIN = "Chain"

    # Expression tree
    NODE = "Node"
    ACCESSOR_NODE = "AccessorNode"
    ARRAY_NODE = "ArrayNode"
    ASSIGNMENT_NODE = "AssignmentNode"
    BLOCK_NODE = "BlockNode"
    CONDITIONAL_NODE = "ConditionalNode"
    CONSTANT_NODE = "ConstantNode"
    FUNCTION_ASSIGNMENT_NODE = "FunctionAssignmentNode"
    FUNCTION_NODE = "FunctionNode"
    INDEX_NODE = "IndexNode"
    OBJECT_NODE = "ObjectNode"
    OPERATOR_NODE = "OperatorNode"
    PARENTHESIS_NODE = "ParenthesisNode"
    RANGE_NODE = "RangeNode"
    SYMBOL_NODE = "SymbolNode"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class KindSpec:
    """Where the proof of a kind lives."""

    kind: Kind
    proof: Proof
    marker: str | None = None
    """Marker attribute set to True by producers (None for primitives)"""

    class_marker: str | None = None
    """Second marker required on the class (node variants, matrix encodings)"""


NODE_VARIANTS: tuple[Kind, ...] = (
    Kind.ACCESSOR_NODE,
    Kind.ARRAY_NODE,
    Kind.ASSIGNMENT_NODE,
    Kind.BLOCK_NODE,
    Kind.CONDITIONAL_NODE,
    Kind.CONSTANT_NODE,
    Kind.FUNCTION_ASSIGNMENT_NODE,
    Kind.FUNCTION_NODE,
    Kind.INDEX_NODE,
    Kind.OBJECT_NODE,
    Kind.OPERATOR_NODE,
    Kind.PARENTHESIS_NODE,
    Kind.RANGE_NODE,
    Kind.SYMBOL_NODE,
)

NODE_MARKER = "is_node"
MATRIX_MARKER = "is_matrix"


def marker_name(kind: Kind) -> str:
    """
    Marker attribute for a kind: ``BigNumber`` -> ``is_big_number``.

    Example:
        marker_name(Kind.FUNCTION_ASSIGNMENT_NODE) -> "is_function_assignment_node"
    """
    name = kind.value
    chars = []
    for i, ch in enumerate(name):
        if ch.isupper() and i > 0:
            chars.append("_")
        chars.append(ch.lower())
    return "is_" + "".join(chars)


def _build_specs() -> dict[Kind, KindSpec]:
    specs: dict[Kind, KindSpec] = {}

    for kind in (
        Kind.NUMBER,
        Kind.STRING,
        Kind.BOOLEAN,
        Kind.FUNCTION,
        Kind.NULL,
        Kind.UNDEFINED,
        Kind.ARRAY,
        Kind.DATE,
        Kind.REGEXP,
        Kind.OBJECT,
    ):
        specs[kind] = KindSpec(kind, Proof.PRIMITIVE)

    for kind in (
        Kind.BIG_NUMBER,
        Kind.UNIT,
        Kind.MATRIX,
        Kind.RANGE,
        Kind.INDEX,
        Kind.RESULT_SET,
        Kind.HELP,
        Kind.CHAIN,
    ):
        specs[kind] = KindSpec(kind, Proof.CLASS_MARKER, marker_name(kind))

    for kind in (Kind.COMPLEX, Kind.FRACTION):
        specs[kind] = KindSpec(kind, Proof.VALUE_MARKER, marker_name(kind))

    # Matrix encodings are checked like node variants, against is_matrix
    for kind in (Kind.DENSE_MATRIX, Kind.SPARSE_MATRIX):
        specs[kind] = KindSpec(kind, Proof.NODE_MARKER, marker_name(kind), MATRIX_MARKER)

    specs[Kind.NODE] = KindSpec(Kind.NODE, Proof.NODE_MARKER, NODE_MARKER, NODE_MARKER)
    for kind in NODE_VARIANTS:
        specs[kind] = KindSpec(kind, Proof.NODE_MARKER, marker_name(kind), NODE_MARKER)

    return specs


KIND_SPECS: Mapping[Kind, KindSpec] = MappingProxyType(_build_specs())

ALL_MARKERS: frozenset[str] = frozenset(
    spec.marker for spec in KIND_SPECS.values() if spec.marker is not None
)
