"""
Failure data models.

A FailureRecord captures everything an assertion failure reports: where it
happened, what went wrong, the diff and any user message. Records are
built once per failure, rendered, and dropped.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class LabeledContent:
    """One labeled entry of a failure block, e.g. ("Error", "Not equal")."""
    label: str
    content: str


@dataclass
class FailureRecord:
    """
    Record of a single assertion failure.

    Attributes:
        trace: Call-site frames, innermost first ("dir/file.py:line")
        message: The assertion's own failure message
        diff: Diff text appended to the message, may be empty
        extra: The user's formatted message, may be empty
    """
    trace: list[str] = field(default_factory=list)
    message: str = ""
    diff: str = ""
    extra: str = ""

    def labeled(self) -> list[LabeledContent]:
        """Labeled entries in output order: Trace, Error, then Messages."""
        content = [
            LabeledContent("Trace", "\n".join(self.trace)),
            LabeledContent("Error", self.message + self.diff),
        ]
        if self.extra:
            content.append(LabeledContent("Messages", self.extra))
        return content
