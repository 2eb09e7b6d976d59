from enum import Enum


class OptionFamily(str, Enum):
    """Independent categories of image-transformation options."""

    SIZE = "size"
    ROTATION = "rotation"
    ADJUSTMENT = "adjustment"
    AUTOMATIC = "automatic"
    STYLIZE = "stylize"


# Serialization order of the families in the query string.
FAMILY_ORDER: tuple[OptionFamily, ...] = (
    OptionFamily.SIZE,
    OptionFamily.ROTATION,
    OptionFamily.ADJUSTMENT,
    OptionFamily.AUTOMATIC,
    OptionFamily.STYLIZE,
)
