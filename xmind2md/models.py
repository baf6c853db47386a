"""Data models for XMind content.json documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True)
class Topic:
    """A single topic node in a sheet.

    Topics form a tree through two independent child collections:
    `attached` (the main subtree) and `detached` (floating topics that
    belong to the same parent). Both are rendered, attached first.
    """
    # Core
    id: str = ""
    class_name: str = ""  # JSON "class"
    title: str = ""

    # Layout tags, carried through but not rendered
    structure_class: str = ""
    branch: str = ""

    # When set, the topic renders as a hyperlink instead of a heading
    href: str = ""

    # Tree structure
    attached: tuple[Topic, ...] = field(default_factory=tuple)
    detached: tuple[Topic, ...] = field(default_factory=tuple)

    @property
    def is_link(self) -> bool:
        return self.href != ""

    @property
    def children(self) -> tuple[Topic, ...]:
        """Attached children followed by detached children."""
        return self.attached + self.detached

    @property
    def is_leaf(self) -> bool:
        return not self.attached and not self.detached

    def walk(self) -> Iterator[Topic]:
        """Yield this topic and all descendants depth-first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def count(self) -> int:
        """Total number of topics in this subtree (including self)."""
        return sum(1 for _ in self.walk())

    def __str__(self) -> str:
        return self.title

    def __repr__(self) -> str:
        child_count = len(self.attached) + len(self.detached)
        suffix = f" ({child_count} children)" if child_count else ""
        return f"Topic({self.title!r}{suffix})"


@dataclass(frozen=True)
class Sheet:
    """One page of an XMind document, holding exactly one root topic."""
    id: str = ""
    class_name: str = ""  # JSON "class"
    root_topic: Topic = field(default_factory=Topic)

    @property
    def title(self) -> str:
        return self.root_topic.title

    @property
    def topic_count(self) -> int:
        return self.root_topic.count()

    def walk(self) -> Iterator[Topic]:
        """Iterate all topics depth-first."""
        yield from self.root_topic.walk()

    def __repr__(self) -> str:
        return f"Sheet({self.title!r}, {self.topic_count} topics)"
