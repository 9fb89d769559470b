"""
Diffs for assertion failure messages.

Usage:
    from assertkit.diff import diff_values, render_value

    print(render_value({"b": 1, "a": [1, 2]}))
    # dict{
    #   'a': list[
    #     1,
    #     2,
    #   ],
    #   'b': 1,
    # }

    diff_values({"foo": "hello"}, {"foo": "bar"})
    # \\n\\n--- Expected\\n+++ Actual\\n@@ -1,3 +1,3 @@\\n dict{\\n-  'foo': 'hello',\\n+  'foo': 'bar',\\n }\\n
"""

# Rendering
from .render import render_inline, render_value, strip_addresses

# Diffing
from .differ import colorize, diff_values, value_diff

__all__ = [
    # Rendering
    "render_inline",
    "render_value",
    "strip_addresses",
    # Diffing
    "colorize",
    "diff_values",
    "value_diff",
]
