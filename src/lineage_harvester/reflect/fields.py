# src/lineage_harvester/reflect/fields.py
# Reading named fields off opaque objects, bypassing public accessors.

"""
Field access for objects whose interesting state is private.

Python has no enforced visibility, but libraries hide state behind leading
underscores and name mangling (`__field` inside class `Reader` is stored as
`_Reader__field`). Callers pass the stored name; read_field looks it up in the
instance dict and falls back to getattr, which also covers slots.
"""

import dataclasses
from typing import Any, Sequence, TypeVar

from lineage_harvester.exceptions import FieldExtractionError

T = TypeVar("T")

_MISSING = object()


def _slot_names(cls: type) -> list[str]:
    names: list[str] = []
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if slot in ("__dict__", "__weakref__"):
                continue
            # slot names are mangled just like attribute names
            if slot.startswith("__") and not slot.endswith("__"):
                slot = f"_{klass.__name__.lstrip('_')}{slot}"
            if slot not in names:
                names.append(slot)
    return names


def _lookup(target: Any, field_name: str) -> Any:
    instance_dict = getattr(target, "__dict__", None)
    if isinstance(instance_dict, dict) and field_name in instance_dict:
        return instance_dict[field_name]
    try:
        return getattr(target, field_name, _MISSING)
    except Exception:
        # a raising property is as good as an absent field here
        return _MISSING


def read_field(target: Any, field_name: str, expected_type: type[T] = object) -> T:  # type: ignore[assignment]
    """Read `field_name` off `target`, checking the value is an `expected_type`."""
    value = _lookup(target, field_name)
    if value is _MISSING:
        raise FieldExtractionError(
            f"Field '{field_name}' not found on {type(target).__name__}"
        )
    if not isinstance(value, expected_type):
        raise FieldExtractionError(
            f"Field '{field_name}' of {type(target).__name__} is "
            f"{type(value).__name__}, expected {expected_type.__name__}"
        )
    return value


def first_field(
    target: Any, field_names: Sequence[str], expected_type: type[T] = object  # type: ignore[assignment]
) -> T:
    """Read the first field of `field_names` present on `target`."""
    errors = []
    for name in field_names:
        try:
            return read_field(target, name, expected_type)
        except FieldExtractionError as e:
            errors.append(str(e))
    raise FieldExtractionError("; ".join(errors) or "No field names given")


def declared_fields(target: Any) -> list[str]:
    """
    Names of the fields an object declares.

    Dataclasses report their fields, slotted classes their slots, anything else
    its instance attributes.
    """
    if dataclasses.is_dataclass(target) and not isinstance(target, type):
        return [f.name for f in dataclasses.fields(target)]
    slots = _slot_names(type(target))
    instance_dict = getattr(target, "__dict__", None)
    names = list(instance_dict) if isinstance(instance_dict, dict) else []
    return slots + [name for name in names if name not in slots]
