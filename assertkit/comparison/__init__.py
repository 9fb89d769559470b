"""
Comparison engine for arbitrary values.

This package decides whether values are equal, empty, zero, or contain
one another, without raising on odd inputs.

Usage:
    from assertkit.comparison import equal_objects, equal_values, contains_element

    equal_objects({"a": [1, 2]}, {"a": [1, 2]})    # True
    equal_objects(1, 1.0)                          # False, types differ
    equal_values(1, 1.0)                           # True, lossless conversion
    contains_element(["a", "b"], "b")              # (True, True)
    contains_element(42, "b")                      # (False, False)
"""

# Models
from .models import Kind, classify, deref, exported_fields, type_name

# Equality
from .equality import convert, equal_exact, equal_objects, equal_values

# Emptiness
from .emptiness import is_empty, is_nil, is_zero, zero_value

# Containment
from .containment import contains_element, get_len

__all__ = [
    # Models
    "Kind",
    "classify",
    "deref",
    "exported_fields",
    "type_name",
    # Equality
    "convert",
    "equal_exact",
    "equal_objects",
    "equal_values",
    # Emptiness
    "is_empty",
    "is_nil",
    "is_zero",
    "zero_value",
    # Containment
    "contains_element",
    "get_len",
]
