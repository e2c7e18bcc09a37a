"""
Type predicates for every known kind.

Notes:

- Kinds are recognised by markers such as ``is_unit``, never with
  ``isinstance``. Values have to pass between independent copies of the
  library, and each copy has its own ``Unit`` class.
- Class-level markers are read from the value's class, so plain data
  carrying a marker key or attribute (``{"is_unit": True}``) never matches.
  Untrusted expressions must not be able to impersonate internal types.
- These functions are not exposed to the expression language, so the
  checks used internally cannot be overridden from there.

Every predicate is total: it returns a ``bool`` for any input and never
raises.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Callable, Mapping

from .kinds import MATRIX_MARKER, NODE_MARKER, Kind
from .markers import (
    UNDEFINED,
    class_marker,
    host_tag,
    instance_marker,
    is_native_date,
    is_native_regexp,
    is_native_sequence,
    is_object_shaped,
)


def _present(x: Any) -> bool:
    return x is not None and x is not UNDEFINED


def _node_check(x: Any, marker: str) -> bool:
    return _present(x) and instance_marker(x, marker) and class_marker(x, NODE_MARKER)


# Host values


def is_number(x: Any) -> bool:
    """True for int and float values (NaN and infinities included), never bool."""
    return host_tag(x) == "number"


def is_string(x: Any) -> bool:
    return host_tag(x) == "string"


def is_boolean(x: Any) -> bool:
    return host_tag(x) == "boolean"


def is_function(x: Any) -> bool:
    """True for functions, builtins, bound methods, partials and classes."""
    return host_tag(x) == "function"


def is_array(x: Any) -> bool:
    """True for native ordered sequences (list and tuple)."""
    return is_native_sequence(x)


def is_date(x: Any) -> bool:
    return is_native_date(x)


def is_regexp(x: Any) -> bool:
    return is_native_regexp(x)


def is_object(x: Any) -> bool:
    """
    True for plain mappings only (exactly ``dict``).

    Complex and Fraction values, and every other marked class, are never
    plain objects even though they are object shaped.
    """
    return type(x) is dict


def is_null(x: Any) -> bool:
    return x is None


def is_undefined(x: Any) -> bool:
    return x is UNDEFINED


# Numeric algebra types


def is_big_number(x: Any) -> bool:
    """
    True for arbitrary-precision numbers.

    A zero BigNumber is falsy in arithmetic but still a BigNumber: the
    check does not depend on truthiness.
    """
    return _present(x) and class_marker(x, "is_big_number")


def is_complex(x: Any) -> bool:
    return is_object_shaped(x) and class_marker(x, "is_complex")


def is_fraction(x: Any) -> bool:
    return is_object_shaped(x) and class_marker(x, "is_fraction")


def is_unit(x: Any) -> bool:
    return _present(x) and class_marker(x, "is_unit")


def is_matrix(x: Any) -> bool:
    """True for any matrix encoding (dense, sparse, or third party)."""
    return _present(x) and class_marker(x, MATRIX_MARKER)


def is_dense_matrix(x: Any) -> bool:
    return _present(x) and instance_marker(x, "is_dense_matrix") and class_marker(x, MATRIX_MARKER)


def is_sparse_matrix(x: Any) -> bool:
    return _present(x) and instance_marker(x, "is_sparse_matrix") and class_marker(x, MATRIX_MARKER)


def is_collection(x: Any) -> bool:
    """
    Test whether a value is a collection: an Array or a Matrix.

    Used wherever sequences and matrices are handled uniformly, e.g.
    element-wise operations.
    """
    return is_array(x) or is_matrix(x)


# Control and wrapper types


def is_range(x: Any) -> bool:
    return _present(x) and class_marker(x, "is_range")


def is_index(x: Any) -> bool:
    return _present(x) and class_marker(x, "is_index")


def is_result_set(x: Any) -> bool:
    return _present(x) and class_marker(x, "is_result_set")


def is_help(x: Any) -> bool:
    return _present(x) and class_marker(x, "is_help")


def is_chain(x: Any) -> bool:
    return _present(x) and class_marker(x, "is_chain")


# Expression tree nodes
#
# A node needs two independent facts: its variant marker (on the instance or
# its class) and the generic is_node marker on its class.


def is_node(x: Any) -> bool:
    return _node_check(x, NODE_MARKER)


def is_accessor_node(x: Any) -> bool:
    return _node_check(x, "is_accessor_node")


def is_array_node(x: Any) -> bool:
    return _node_check(x, "is_array_node")


def is_assignment_node(x: Any) -> bool:
    return _node_check(x, "is_assignment_node")


def is_block_node(x: Any) -> bool:
    return _node_check(x, "is_block_node")


def is_conditional_node(x: Any) -> bool:
    return _node_check(x, "is_conditional_node")


def is_constant_node(x: Any) -> bool:
    return _node_check(x, "is_constant_node")


def is_function_assignment_node(x: Any) -> bool:
    return _node_check(x, "is_function_assignment_node")


def is_function_node(x: Any) -> bool:
    return _node_check(x, "is_function_node")


def is_index_node(x: Any) -> bool:
    return _node_check(x, "is_index_node")


def is_object_node(x: Any) -> bool:
    return _node_check(x, "is_object_node")


def is_operator_node(x: Any) -> bool:
    return _node_check(x, "is_operator_node")


def is_parenthesis_node(x: Any) -> bool:
    return _node_check(x, "is_parenthesis_node")


def is_range_node(x: Any) -> bool:
    return _node_check(x, "is_range_node")


def is_symbol_node(x: Any) -> bool:
    return _node_check(x, "is_symbol_node")


PREDICATES: Mapping[Kind, Callable[[Any], bool]] = MappingProxyType({
    Kind.NUMBER: is_number,
    Kind.STRING: is_string,
    Kind.BOOLEAN: is_boolean,
    Kind.FUNCTION: is_function,
    Kind.NULL: is_null,
    Kind.UNDEFINED: is_undefined,
    Kind.ARRAY: is_array,
    Kind.DATE: is_date,
    Kind.REGEXP: is_regexp,
    Kind.OBJECT: is_object,
    Kind.BIG_NUMBER: is_big_number,
    Kind.COMPLEX: is_complex,
    Kind.FRACTION: is_fraction,
    Kind.UNIT: is_unit,
    Kind.MATRIX: is_matrix,
    Kind.DENSE_MATRIX: is_dense_matrix,
    Kind.SPARSE_MATRIX: is_sparse_matrix,
    Kind.RANGE: is_range,
    Kind.INDEX: is_index,
    Kind.RESULT_SET: is_result_set,
    Kind.HELP: is_help,
    Kind.CHAIN: is_chain,
    Kind.NODE: is_node,
    Kind.ACCESSOR_NODE: is_accessor_node,
    Kind.ARRAY_NODE: is_array_node,
    Kind.ASSIGNMENT_NODE: is_assignment_node,
    Kind.BLOCK_NODE: is_block_node,
    Kind.CONDITIONAL_NODE: is_conditional_node,
    Kind.CONSTANT_NODE: is_constant_node,
    Kind.FUNCTION_ASSIGNMENT_NODE: is_function_assignment_node,
    Kind.FUNCTION_NODE: is_function_node,
    Kind.INDEX_NODE: is_index_node,
    Kind.OBJECT_NODE: is_object_node,
    Kind.OPERATOR_NODE: is_operator_node,
    Kind.PARENTHESIS_NODE: is_parenthesis_node,
    Kind.RANGE_NODE: is_range_node,
    Kind.SYMBOL_NODE: is_symbol_node,
})
"""Predicate for every kind in the catalog"""
