"""
Option vocabularies, one module per family.

Every option is an immutable :class:`ImageOption`; payload ranges are
validated by pydantic when the option is constructed.
"""

from __future__ import annotations

from .adjustment import (
    AdjustmentOption,
    Brightness,
    Contrast,
    Exposure,
    Gamma,
    Highlight,
    HueShift,
    Invert,
    Saturation,
    Shadow,
    Sharpen,
    UnsharpMask,
    UnsharpRadius,
    Vibrance,
)
from .automatic import Auto, AutomaticOption, AutoMode
from .base import ImageOption
from .rotation import Flip, FlipAxis, RotationOption
from .size import (
    AspectRatio,
    Crop,
    CropMode,
    DevicePixelRatio,
    Fit,
    FitMode,
    Height,
    SizeOption,
    Width,
)
from .stylize import Blur, Halftone, Monochrome, Pixellate, Sepia, StylizeOption

__all__ = [
    "ImageOption",
    # Size
    "SizeOption",
    "Width",
    "Height",
    "Fit",
    "FitMode",
    "Crop",
    "CropMode",
    "DevicePixelRatio",
    "AspectRatio",
    # Rotation
    "RotationOption",
    "Flip",
    "FlipAxis",
    # Adjustment
    "AdjustmentOption",
    "Brightness",
    "Contrast",
    "Exposure",
    "Gamma",
    "Highlight",
    "Shadow",
    "HueShift",
    "Saturation",
    "Vibrance",
    "Sharpen",
    "UnsharpMask",
    "UnsharpRadius",
    "Invert",
    # Automatic
    "AutomaticOption",
    "Auto",
    "AutoMode",
    # Stylize
    "StylizeOption",
    "Blur",
    "Halftone",
    "Monochrome",
    "Pixellate",
    "Sepia",
]
