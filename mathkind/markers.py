"""
Type markers: where they live, how they are read, and how producers set them.

Markers are boolean class attributes such as ``is_big_number = True``.
Identity checks (``isinstance`` against one class object) cannot be used to
recognise values, because two copies of a library loaded in one process
each define their own classes. A marker on the class is recognised by
every copy.

Markers are read statically: no descriptors, ``__getattr__`` hooks or
metaclass code run, and the value is never converted with ``bool()``. The
one exception is a node's ``type`` name, read only after the class has
proven itself a node.
Native type tests go through ``type(value)`` rather than ``isinstance`` so a
forged ``__class__`` cannot impersonate a builtin.
"""

from __future__ import annotations

import functools
import inspect
import types
from datetime import date
from re import Pattern
from typing import Any, Callable, TypeVar

from .core.errors import UnknownKindError
from .core.logging import get_logger
from .kinds import ALL_MARKERS, KIND_SPECS, NODE_MARKER, Kind, Proof

logger = get_logger(__name__)

T = TypeVar("T", bound=type)


class _Undefined:
    """
    The "no value at all" sentinel, distinct from ``None``.

    ``None`` classifies as ``"null"``; ``UNDEFINED`` classifies as
    ``"undefined"``.
    """

    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _Undefined()

_MISSING = object()

_TYPE_MRO = type.__dict__["__mro__"]
_TYPE_DICT = type.__dict__["__dict__"]

_ROUTINE_TYPES: tuple[type, ...] = (
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.MethodWrapperType,
    types.WrapperDescriptorType,
    types.MethodDescriptorType,
    types.ClassMethodDescriptorType,
    functools.partial,
    type,
)


def has_type(value: Any, classes: type | tuple[type, ...]) -> bool:
    """``isinstance`` that trusts only ``type(value)``, never ``__class__``."""
    return issubclass(type(value), classes)


def host_tag(value: Any) -> str:
    """
    Coarse host-level tag of a value.

    Returns one of ``"undefined"``, ``"boolean"``, ``"number"``,
    ``"string"``, ``"function"`` or ``"object"``. ``None`` is ``"object"``;
    the null check belongs to the object branch of ``type_of``.
    """
    if value is UNDEFINED:
        return "undefined"
    if has_type(value, bool):
        return "boolean"
    if has_type(value, (int, float)):
        return "number"
    if has_type(value, str):
        return "string"
    if has_type(value, _ROUTINE_TYPES):
        return "function"
    return "object"


def is_object_shaped(value: Any) -> bool:
    """True for values that can carry a class marker at all."""
    return value is not None and host_tag(value) == "object"


def is_native_sequence(value: Any) -> bool:
    return has_type(value, (list, tuple))


def is_native_date(value: Any) -> bool:
    return has_type(value, date)


def is_native_regexp(value: Any) -> bool:
    return has_type(value, Pattern)


def _class_lookup(cls: type, name: str) -> Any:
    # Static walk of the MRO namespaces; no metaclass hooks run
    for base in _TYPE_MRO.__get__(cls):
        namespace = _TYPE_DICT.__get__(base)
        if name in namespace:
            return namespace[name]
    return _MISSING


def class_marker(value: Any, marker: str) -> bool:
    """
    True when the class of ``value`` (or one of its bases) has ``marker``
    set to ``True``.

    Instance attributes are never consulted, so ``{"is_unit": True}`` and
    ``SimpleNamespace(is_unit=True)`` are both rejected.
    """
    try:
        return _class_lookup(type(value), marker) is True
    except Exception:
        logger.debug("Class marker lookup for %r failed", marker, exc_info=True)
        return False


def instance_marker(value: Any, marker: str) -> bool:
    """
    True when ``value`` exposes ``marker`` set to ``True``, either as its
    own attribute or inherited from its class.

    Slot attributes are resolved; properties and other descriptors are not
    executed and therefore never count.
    """
    try:
        found = inspect.getattr_static(value, marker, _MISSING)
        if has_type(found, types.MemberDescriptorType):
            found = found.__get__(value, type(value))
    except Exception:
        logger.debug("Instance marker lookup for %r failed", marker, exc_info=True)
        return False
    return found is True


def declared_type(value: Any, default: str = Kind.NODE.value) -> str:
    """
    The subtype name a node declares in its ``type`` attribute.

    Only called once the class-level ``is_node`` check has passed, so the
    class is trusted and the attribute is read normally: a ``type``
    property is evaluated. Falls back to ``default`` when reading fails or
    the result is not a non-empty string.
    """
    try:
        found = getattr(value, "type")
    except Exception:
        logger.debug("Reading node type failed", exc_info=True)
        return default
    if has_type(found, str) and str.__len__(found):
        return str.__str__(found)
    return default


def markers_of(cls: type) -> tuple[str, ...]:
    """Sorted names of the markers a class carries."""
    found = []
    for marker in ALL_MARKERS:
        try:
            if _class_lookup(cls, marker) is True:
                found.append(marker)
        except Exception:
            logger.debug("Marker scan of %r failed", cls, exc_info=True)
            return ()
    return tuple(sorted(found))


def _resolve(kind: Kind | str) -> Kind:
    try:
        return Kind(kind)
    except ValueError:
        raise UnknownKindError(kind) from None


def stamp(*kinds: Kind | str) -> Callable[[T], T]:
    """
    Class decorator for trusted producers: set the markers of ``kinds``.

    Node variants also get ``is_node`` and, unless the class defines its
    own, a ``type`` attribute naming the variant. Matrix encodings also get
    ``is_matrix``.

    Example:
        @stamp(Kind.OPERATOR_NODE)
        class OperatorNode(Node):
            ...

    Raises:
        UnknownKindError: If a kind is unknown or is a primitive kind
    """
    resolved = [_resolve(kind) for kind in kinds]
    for kind in resolved:
        if KIND_SPECS[kind].proof is Proof.PRIMITIVE:
            raise UnknownKindError(kind, "primitive kinds cannot be stamped")

    def decorate(cls: T) -> T:
        for kind in resolved:
            spec = KIND_SPECS[kind]
            setattr(cls, spec.marker, True)
            if spec.class_marker is not None:
                setattr(cls, spec.class_marker, True)
            if spec.class_marker == NODE_MARKER and kind is not Kind.NODE and "type" not in cls.__dict__:
                cls.type = kind.value
        logger.debug("Stamped %s with %s", cls.__qualname__, ", ".join(k.value for k in resolved))
        return cls

    return decorate
