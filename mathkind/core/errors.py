"""
Library exceptions.

Classification itself never raises. These errors come from building or
extending a type catalog, and from downstream dispatchers that found no
implementation for a value's kind.
"""

from typing import Any, Dict, Optional


class MathKindError(Exception):
    """Base exception for mathkind errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class UnknownKindError(MathKindError):
    """Raised when a kind name is not in the catalog"""

    def __init__(self, kind: Any, reason: str = "not a catalog kind"):
        super().__init__(
            message=f"Unknown kind '{kind}': {reason}",
            details={"kind": str(kind), "reason": reason}
        )


class DuplicateKindError(MathKindError):
    """Raised when a catalog is extended with a name it already holds"""

    def __init__(self, name: str):
        super().__init__(
            message=f"Kind '{name}' is already registered",
            details={"kind": name}
        )


class CatalogFrozenError(MathKindError):
    """Raised when catalog extension is disabled by configuration"""

    def __init__(self, name: str):
        super().__init__(
            message=f"Cannot register kind '{name}': catalog extension is disabled",
            details={"kind": name}
        )


class UnsupportedTypeError(MathKindError, TypeError):
    """
    Raised by dispatchers when no implementation matches the argument kinds.

    The message carries the ``type_of`` signature of the arguments, e.g.
    ``Unexpected type of argument in function add (signature: number,Object)``.
    """

    def __init__(self, function_name: str, signature: str):
        super().__init__(
            message=f"Unexpected type of argument in function {function_name} (signature: {signature})",
            details={"function": function_name, "signature": signature}
        )
        self.function_name = function_name
        self.signature = signature

    @classmethod
    def for_values(cls, function_name: str, *values: Any) -> "UnsupportedTypeError":
        """Build the error from the offending argument values."""
        # Import here to avoid circular imports
        from ..classify import type_signature

        return cls(function_name, type_signature(*values))
