"""
mathkind - runtime type identification for numeric and symbolic values

Recognises BigNumbers, Complex numbers, Fractions, Units, Matrices,
expression tree nodes and wrapper types by markers on their classes:

- works across independent copies of a library in one process
- rejects plain data that forges a marker
- ``type_of`` gives one canonical name per value for dispatch and formatting
"""

from .catalog import CatalogEntry, TypeCatalog, default_catalog
from .classify import Classifier, type_of, type_signature
from .core import (
    CatalogFrozenError,
    DuplicateKindError,
    MathKindError,
    Settings,
    UnknownKindError,
    UnsupportedTypeError,
    get_settings,
    setup_logging,
)
from .kinds import KIND_SPECS, NODE_VARIANTS, Kind, KindSpec, Proof
from .markers import UNDEFINED, host_tag, markers_of, stamp
from .predicates import (
    PREDICATES,
    is_accessor_node,
    is_array,
    is_array_node,
    is_assignment_node,
    is_big_number,
    is_block_node,
    is_boolean,
    is_chain,
    is_collection,
    is_complex,
    is_conditional_node,
    is_constant_node,
    is_date,
    is_dense_matrix,
    is_fraction,
    is_function,
    is_function_assignment_node,
    is_function_node,
    is_help,
    is_index,
    is_index_node,
    is_matrix,
    is_node,
    is_null,
    is_number,
    is_object,
    is_object_node,
    is_operator_node,
    is_parenthesis_node,
    is_range,
    is_range_node,
    is_regexp,
    is_result_set,
    is_sparse_matrix,
    is_string,
    is_symbol_node,
    is_undefined,
    is_unit,
)

__version__ = "0.1.0"

__all__ = [
    # Catalog
    "Kind",
    "KindSpec",
    "Proof",
    "KIND_SPECS",
    "NODE_VARIANTS",
    "CatalogEntry",
    "TypeCatalog",
    "default_catalog",
    "UNDEFINED",
    "stamp",
    "markers_of",
    # Classifier
    "Classifier",
    "type_of",
    "type_signature",
    "host_tag",
    "PREDICATES",
    "is_number",
    "is_string",
    "is_boolean",
    "is_function",
    "is_array",
    "is_date",
    "is_regexp",
    "is_object",
    "is_null",
    "is_undefined",
    "is_big_number",
    "is_complex",
    "is_fraction",
    "is_unit",
    "is_matrix",
    "is_dense_matrix",
    "is_sparse_matrix",
    "is_collection",
    "is_range",
    "is_index",
    "is_result_set",
    "is_help",
    "is_chain",
    "is_node",
    "is_accessor_node",
    "is_array_node",
    "is_assignment_node",
    "is_block_node",
    "is_conditional_node",
    "is_constant_node",
    "is_function_assignment_node",
    "is_function_node",
    "is_index_node",
    "is_object_node",
    "is_operator_node",
    "is_parenthesis_node",
    "is_range_node",
    "is_symbol_node",
    # Core
    "Settings",
    "get_settings",
    "setup_logging",
    "MathKindError",
    "UnknownKindError",
    "DuplicateKindError",
    "CatalogFrozenError",
    "UnsupportedTypeError",
]
