"""S-expression trees, used to describe parse results compactly."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Union

TreeLike = Union["Tree", str]


def _coerce(tree: TreeLike) -> Tree:
    return tree if isinstance(tree, Tree) else Tree(tree)


@dataclass
class Tree:
    """Either an atom holding text or a list of child trees."""

    value: str | list[Tree]

    @property
    def is_atom(self) -> bool:
        return isinstance(self.value, str)

    @classmethod
    def atom(cls, text: str) -> Tree:
        """Construct an atom."""
        return cls(text)

    @classmethod
    def list(cls, children: Iterable[TreeLike]) -> Tree:
        """Construct a list from trees or atom texts."""
        return cls([_coerce(child) for child in children])

    @classmethod
    def string(cls, contents: str) -> Tree:
        """Construct an atom holding quoted text."""
        return cls(f'"{contents}"')

    def _children(self) -> list[Tree]:
        if isinstance(self.value, str):
            return [Tree(self.value)]
        return [*self.value]

    def push(self, tree: TreeLike) -> Tree:
        """Return a list with `tree` appended, turning an atom into a list."""
        return Tree([*self._children(), _coerce(tree)])

    def extend(self, tail: Iterable[TreeLike]) -> Tree:
        """Return a list with every tree of `tail` appended."""
        return Tree([*self._children(), *(_coerce(child) for child in tail)])

    def push_mut(self, tree: TreeLike) -> None:
        """Like `push`, but modify this tree in place."""
        self.value = self.push(tree).value

    def __str__(self) -> str:
        if isinstance(self.value, str):
            return self.value
        return "(" + " ".join(str(child) for child in self.value) + ")"