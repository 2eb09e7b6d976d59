"""Merge rules that collapse values sharing a query key."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..encoder import OptionEncoder, QueryPair
from ..utils import unique

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..families import OptionFamily
    from ..options.base import ImageOption


class ListMergeEncoder(OptionEncoder):
    """
    One pair per distinct key, tokens of the same key joined in order.

    Keys appear in the order of their first application, so
    ``[Width(300), Height(200), Width(400)]`` encodes to
    ``w=300,400`` followed by ``h=200``. Flag options such as ``Invert``
    contribute their token once.
    """

    def __init__(self, family: OptionFamily, separator: str = ",") -> None:
        self._family = family
        self._separator = separator

    @property
    def family(self) -> OptionFamily:
        return self._family

    def encode(self, values: Sequence[ImageOption]) -> list[QueryPair]:
        grouped: dict[str, list[str]] = {}
        for option in values:
            tokens = grouped.setdefault(option.key, [])
            if option.flag and tokens:
                continue
            tokens.append(option.token())
        return [
            QueryPair(key, self._separator.join(tokens))
            for key, tokens in grouped.items()
        ]


class SingleKeyEncoder(OptionEncoder):
    """All tokens of the family under a single key; nothing when empty."""

    def __init__(self, family: OptionFamily, key: str, separator: str = ",") -> None:
        self._family = family
        self._key = key
        self._separator = separator

    @property
    def family(self) -> OptionFamily:
        return self._family

    def encode(self, values: Sequence[ImageOption]) -> list[QueryPair]:
        if not values:
            return []
        return [QueryPair(self._key, self._separator.join(v.token() for v in values))]


class SingletonEncoder(OptionEncoder):
    """
    Exactly one pair holding the de-duplicated tokens of the family.

    While ``always_emit`` is set the pair is produced even when nothing
    was applied, yielding ``key=`` in the query string.
    """

    def __init__(
        self,
        family: OptionFamily,
        key: str,
        separator: str = ",",
        *,
        always_emit: bool = True,
    ) -> None:
        self._family = family
        self._key = key
        self._separator = separator
        self._always_emit = always_emit

    @property
    def family(self) -> OptionFamily:
        return self._family

    def encode(self, values: Sequence[ImageOption]) -> list[QueryPair]:
        if not values and not self._always_emit:
            return []
        tokens = unique(v.token() for v in values)
        return [QueryPair(self._key, self._separator.join(tokens))]
