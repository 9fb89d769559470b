"""
Containment probing.

contains_element answers two questions at once: can containment be
applied to this container at all, and if so, is the element inside it.
"""

from __future__ import annotations

import logging
from typing import Any

from .equality import equal_objects
from .models import Kind, channel_len, channel_snapshot, classify, deref, exported_fields

logger = logging.getLogger(__name__)


def contains_element(container: Any, element: Any) -> tuple[bool, bool]:
    """
    Check whether container includes element.

    Works with:
    - Text: substring check
    - Mappings: element equals some key
    - Records: element equals some exported field name (serialized name first)
    - Sequences, sets, queues: element equals some item

    Returns:
        (False, False) if containment cannot be applied to the container
        (True, False) if the element was not found
        (True, True) if the element was found
    """
    container = deref(container)
    element = deref(element)
    kind = classify(container)

    try:
        if kind == Kind.TEXT:
            return True, _text_contains(container, element)

        if kind == Kind.MAPPING:
            return True, any(equal_objects(key, element) for key in container.keys())

        if kind == Kind.RECORD:
            return True, any(
                equal_objects(serialized, element)
                for _, serialized, _ in exported_fields(container)
            )

        if kind in (Kind.SEQUENCE, Kind.SET):
            return True, any(equal_objects(item, element) for item in container)

        if kind == Kind.CHANNEL:
            return True, any(equal_objects(item, element) for item in channel_snapshot(container))

    except (TypeError, ValueError, AttributeError, RuntimeError) as e:
        logger.debug(f"Containment probe failed on {type(container).__name__}: {e}")
        return False, False

    logger.debug(f"Containment does not apply to {kind.value} value")
    return False, False


def get_len(v: Any) -> tuple[int, bool]:
    """
    Try to get the length of v.

    Returns:
        Tuple of (length, ok). (0, False) if v has no length.
    """
    v = deref(v)
    if classify(v) == Kind.CHANNEL:
        return channel_len(v), True

    try:
        return len(v), True
    except TypeError:
        return 0, False


def _text_contains(text: str | bytes | bytearray, element: Any) -> bool:
    if isinstance(text, str):
        return isinstance(element, str) and element in text

    if isinstance(element, str):
        element = element.encode("utf-8")
    if isinstance(element, bool):
        return False
    if isinstance(element, int):
        # a byte value outside 0..255 cannot occur in binary text
        return 0 <= element <= 255 and element in text
    if isinstance(element, (bytes, bytearray)):
        return element in text
    return False
