"""
Option encoding strategy.

Provides the OptionEncoder interface and a registry that maps
OptionFamily → encoder.

Each family's merge rule lives in its own encoder class; new rules are
added by subclassing OptionEncoder and registering via ``register()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, NamedTuple

from .exceptions import EncoderNotFoundError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .families import OptionFamily
    from .options.base import ImageOption


class QueryPair(NamedTuple):
    """A key/value unit destined for the query string."""

    key: str
    value: str


class OptionEncoder(ABC):
    """
    Strategy interface for encoding one option family.

    Encoders are pure: the same ordered input always yields the same
    ordered pairs, and no input raises.
    """

    @property
    @abstractmethod
    def family(self) -> OptionFamily:
        """The family this strategy encodes."""
        ...

    @abstractmethod
    def encode(self, values: Sequence[ImageOption]) -> list[QueryPair]:
        """
        Encode the applied values of the family.

        Args:
            values: Options in application order.

        Returns:
            Query pairs in the order they must appear in the query string.
        """
        ...


class EncoderRegistry:
    """
    Registry of OptionEncoder instances keyed by OptionFamily.

    Usage::

        registry = EncoderRegistry()
        registry.register(ListMergeEncoder(OptionFamily.SIZE))

        pairs = registry.encode(OptionFamily.SIZE, [Width(pixels=300)])
    """

    def __init__(self) -> None:
        self._encoders: dict[OptionFamily, OptionEncoder] = {}

    # -- registration --------------------------------------------------------

    def register(self, encoder: OptionEncoder) -> None:
        """Register an encoder, replacing any previous one for its family."""
        self._encoders[encoder.family] = encoder

    def register_all(self, *encoders: OptionEncoder) -> None:
        for encoder in encoders:
            self.register(encoder)

    def unregister(self, family: OptionFamily) -> None:
        self._encoders.pop(family, None)

    # -- look-up -------------------------------------------------------------

    def get(self, family: OptionFamily) -> OptionEncoder | None:
        """Return the registered encoder or ``None``."""
        return self._encoders.get(family)

    def has(self, family: OptionFamily) -> bool:
        return family in self._encoders

    @property
    def supported_families(self) -> set[OptionFamily]:
        return set(self._encoders.keys())

    # -- encoding shortcut ---------------------------------------------------

    def encode(
        self,
        family: OptionFamily,
        values: Sequence[ImageOption],
    ) -> list[QueryPair]:
        """
        Look up the family's encoder and encode ``values``.

        Raises:
            EncoderNotFoundError: If the family has no registered encoder.
        """
        encoder = self.get(family)
        if encoder is None:
            raise EncoderNotFoundError(family)
        return encoder.encode(values)
