"""Immutable base class for option values."""

from __future__ import annotations

from abc import abstractmethod
from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from ..families import OptionFamily


class ImageOption(BaseModel):
    """Base class for a single typed image-transformation instruction.

    Options are immutable value objects: equality is structural and
    instances are hashable. Each concrete class belongs to exactly one
    :class:`OptionFamily` and targets one query key; ``token()`` renders
    the payload as that key's value fragment.
    """

    model_config = ConfigDict(frozen=True)

    family: ClassVar[OptionFamily]
    key: ClassVar[str]
    # Flags carry no payload; repeats within a family collapse to one token.
    flag: ClassVar[bool] = False

    @abstractmethod
    def token(self) -> str:
        """Render the payload as a query value fragment."""
        ...

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.model_dump() == other.model_dump()

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, *sorted(self.model_dump().items())))

    def __str__(self) -> str:
        return f"{self.key}={self.token()}"
