# src/lineage_harvester/reflect/__init__.py
# Reflection helpers for reading opaque, version-skewed relation objects.

"""
Relations from optional add-on components cannot be imported or type-checked
directly. This package provides:
- probe: match an object's runtime type by fully-qualified name
- accessors: call the first accessor that exists out of several historical names
- fields: read named (possibly private) fields and enumerate declared fields
"""

from lineage_harvester.reflect.accessors import invoke_first
from lineage_harvester.reflect.fields import declared_fields, first_field, read_field
from lineage_harvester.reflect.probe import TypeProbe, matches, qualified_name

__all__ = [
    "TypeProbe",
    "declared_fields",
    "first_field",
    "invoke_first",
    "matches",
    "qualified_name",
    "read_field",
]
