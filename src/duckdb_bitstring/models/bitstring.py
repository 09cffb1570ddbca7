"""Bitstring value type.

A Bitstring is an immutable, ordered sequence of bits. Index 0 is the
first (most significant) bit. It either owns a private copy of its bits or
is a borrowed view over a sequence the caller already holds.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Iterable, Iterator, overload

from ..constants import ONE_CHAR, ZERO_CHAR


def _reject_text(bits: Any, constructor: str) -> None:
    if isinstance(bits, (str, bytes, bytearray, memoryview)):
        raise TypeError(
            f"{constructor} expects a sequence of booleans, got {type(bits).__name__}; "
            "use Bitstring.from_str() or decode() instead"
        )


class Bitstring(Sequence):
    """Ordered sequence of booleans mapping to a DuckDB BIT value.

    ``Bitstring(bits)`` copies ``bits`` into an owned tuple.
    ``Bitstring.view(bits)`` wraps an existing sequence without copying;
    the caller must not mutate it while the view is in use. Both behave
    identically for reading, comparison and rendering.

    Example:
        >>> bs = Bitstring.from_str("10110")
        >>> len(bs), bs[0], str(bs)
        (5, True, '10110')
        >>> Bitstring.view([True, False]) == Bitstring([True, False])
        True
    """

    __slots__ = ("_bits", "_borrowed")

    def __init__(self, bits: Iterable[Any] = ()) -> None:
        """Create an owned Bitstring.

        Args:
            bits: Iterable of truthy/falsy values, one per bit

        Raises:
            TypeError: If ``bits`` is a str or bytes-like object
        """
        _reject_text(bits, "Bitstring")
        self._bits: Sequence[bool] = tuple(bool(bit) for bit in bits)
        self._borrowed = False

    @classmethod
    def view(cls, bits: Sequence[bool]) -> Bitstring:
        """Wrap a caller-owned sequence of booleans without copying it.

        Args:
            bits: Sequence of booleans (list, tuple, ...)

        Returns:
            Borrowed Bitstring reading through to ``bits``

        Raises:
            TypeError: If ``bits`` is a str or bytes-like object
        """
        if isinstance(bits, Bitstring):
            return bits
        _reject_text(bits, "Bitstring.view")
        instance = cls.__new__(cls)
        instance._bits = bits
        instance._borrowed = True
        return instance

    @classmethod
    def from_str(cls, text: str) -> Bitstring:
        """Parse the ``0``/``1`` text form.

        Args:
            text: String made only of ``'0'`` and ``'1'`` characters

        Returns:
            Owned Bitstring (empty for an empty string)

        Raises:
            ValueError: If ``text`` contains any other character
        """
        for index, char in enumerate(text):
            if char != ZERO_CHAR and char != ONE_CHAR:
                raise ValueError(
                    f"Invalid bit character {char!r} at position {index}, expected '0' or '1'"
                )
        return cls(char == ONE_CHAR for char in text)

    @property
    def is_borrowed(self) -> bool:
        """Whether this Bitstring reads through to a caller-owned sequence."""
        return self._borrowed

    def as_bits(self) -> Sequence[bool]:
        """Return the underlying sequence (the borrowed one for views)."""
        return self._bits

    def to_owned(self) -> Bitstring:
        """Return an owned Bitstring, copying the bits of a view."""
        if not self._borrowed:
            return self
        return Bitstring(self._bits)

    def to_str(self) -> str:
        """Render one ``'1'``/``'0'`` character per bit."""
        return "".join(ONE_CHAR if bit else ZERO_CHAR for bit in self._bits)

    def __len__(self) -> int:
        return len(self._bits)

    @overload
    def __getitem__(self, index: int) -> bool: ...

    @overload
    def __getitem__(self, index: slice) -> Bitstring: ...

    def __getitem__(self, index: int | slice) -> bool | Bitstring:
        if isinstance(index, slice):
            return Bitstring(self._bits[index])
        return bool(self._bits[index])

    def __iter__(self) -> Iterator[bool]:
        for bit in self._bits:
            yield bool(bit)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Bitstring):
            return tuple(self) == tuple(other)
        if isinstance(other, (list, tuple)):
            return tuple(self) == tuple(bool(bit) for bit in other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __str__(self) -> str:
        return self.to_str()

    def __repr__(self) -> str:
        return f"Bitstring({self.to_str()!r})"
