# src/lineage_harvester/reflect/probe.py
# Capability probing by fully-qualified type name.

"""
Matches objects against types that may not be importable in this process.

The check walks the MRO of the candidate's runtime type and compares
`module.qualname` strings, so it never imports the named type's module and a
missing add-on component simply means "no match".
"""

from typing import Any, Optional


def qualified_name(cls: type) -> str:
    """Return the fully-qualified name of a class, e.g. 'pkg.mod.Outer.Inner'."""
    return f"{cls.__module__}.{cls.__qualname__}"


def matches(candidate: Any, type_name: str) -> bool:
    """Check whether candidate is an instance of the class named type_name."""
    try:
        mro = type(candidate).__mro__
    except AttributeError:
        return False
    return any(qualified_name(cls) == type_name for cls in mro)


class TypeProbe:
    """
    Reusable probe bound to one type name.

    Calling the probe returns the candidate when it matches and None otherwise,
    so it can be used directly in a walrus-style branch:

        if (relation := JDBC_RELATION(obj)) is not None:
            ...
    """

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name

    def __call__(self, candidate: Any) -> Optional[Any]:
        return candidate if matches(candidate, self.type_name) else None

    def __repr__(self) -> str:
        return f"TypeProbe({self.type_name!r})"
