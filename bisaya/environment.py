"""Variable environment.

Scopes are a chain of :class:`Frame` objects. The :class:`Environment` owns
the chain as a stack: a frame is pushed when a block is entered and popped
when it is left, and every frame only keeps a back-reference to its parent
for name resolution. Lookups walk from the innermost frame outwards.

Declarations always bind in the innermost frame (re-declaring a name in the
same frame overwrites it). Reads and writes resolve the nearest frame that
defines the name. The declared type is stored next to the value but is not
enforced when the value is later replaced.


File: environment.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional

from bisaya.exceptions import UndefinedVariableException
from bisaya.nodes import DataType

logger = logging.getLogger(__name__)


@dataclass
class Variable:
    """A declared variable slot."""
    declared_type: DataType
    value: Any


@dataclass
class Frame:
    """One lexical scope."""
    parent: Optional[Frame] = None
    variables: dict[str, Variable] = field(default_factory=dict)


class Environment:
    """Stack of scope frames rooted at a single global frame."""

    def __init__(self, file: str | None = None):
        """Initialize the environment with an empty root frame."""
        self.file = file
        self.root = Frame()
        self.current = self.root

    @property
    def depth(self) -> int:
        """Number of frames between the current frame and the root (root is 0)."""
        depth = 0
        frame = self.current
        while frame.parent is not None:
            depth += 1
            frame = frame.parent
        return depth

    def define(self, name: str, declared_type: DataType, value: Any) -> None:
        """
        Bind ``name`` in the current frame, replacing any binding already there.
        """
        self.current.variables[name] = Variable(declared_type, value)

    def resolve(self, name: str, line=None, column=None) -> Variable:
        """
        Find the nearest variable named ``name``.

        Raises:
            UndefinedVariableException: If no frame in the chain defines it.
        """
        frame = self.current
        while frame is not None:
            if name in frame.variables:
                return frame.variables[name]
            frame = frame.parent
        raise UndefinedVariableException(name, line, column, self.file)

    def read(self, name: str, line=None, column=None) -> Any:
        """Return the value of the nearest variable named ``name``."""
        return self.resolve(name, line, column).value

    def write(self, name: str, value: Any, line=None, column=None) -> None:
        """Replace the value of the nearest variable named ``name``."""
        self.resolve(name, line, column).value = value

    def push_frame(self) -> Frame:
        """Enter a new child scope of the current frame."""
        self.current = Frame(parent=self.current)
        return self.current

    def pop_frame(self) -> None:
        """
        Leave the current scope, making its parent current again.

        Raises:
            RuntimeError: If called on the root frame.
        """
        if self.current.parent is None:
            raise RuntimeError("Cannot pop the root frame")
        self.current = self.current.parent

    @contextmanager
    def scope(self) -> Iterator[Frame]:
        """
        Run the ``with`` body in a new frame and always restore the previous one.
        """
        previous = self.current
        frame = self.push_frame()
        try:
            yield frame
        except BaseException:
            logger.debug("Unwinding frame at depth %d", self.depth)
            raise
        finally:
            self.current = previous
