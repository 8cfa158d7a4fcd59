# src/lineage_harvester/reflect/accessors.py
# Ordered fallback over accessor names that changed between library versions.

from typing import Any, Sequence, TypeVar

from lineage_harvester.exceptions import AccessorResolutionError

T = TypeVar("T")

_MISSING = object()


def invoke_first(target: Any, names: Sequence[str], expected_type: type[T] = object) -> T:  # type: ignore[assignment]
    """
    Return the value of the first accessor in `names` that works.

    Methods are called without arguments, plain attributes and properties are
    read as-is. An accessor that is missing, raises, or yields a value that is
    not an `expected_type` is skipped.
    """
    failures: list[str] = []
    for name in names:
        try:
            accessor = getattr(target, name, _MISSING)
            if accessor is _MISSING:
                failures.append(f"{name}: missing")
                continue
            value = accessor() if callable(accessor) else accessor
        except Exception as e:
            failures.append(f"{name}: {e!r}")
            continue
        if isinstance(value, expected_type):
            return value
        failures.append(f"{name}: got {type(value).__name__}")

    raise AccessorResolutionError(
        f"None of the accessors {list(names)} could be invoked on "
        f"{type(target).__name__} ({'; '.join(failures)})"
    )
