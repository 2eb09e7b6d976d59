from __future__ import annotations

from typing import TYPE_CHECKING

from ..encoder import OptionEncoder, QueryPair

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..families import OptionFamily
    from ..options.base import ImageOption


class RepeatedKeyEncoder(OptionEncoder):
    """One pair per applied value; a key repeats once per application."""

    def __init__(self, family: OptionFamily) -> None:
        self._family = family

    @property
    def family(self) -> OptionFamily:
        return self._family

    def encode(self, values: Sequence[ImageOption]) -> list[QueryPair]:
        return [QueryPair(option.key, option.token()) for option in values]
