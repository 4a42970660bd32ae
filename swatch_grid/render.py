"""Render entry point: request in, ordered encoded swatches out.

:func:`render` validates the request, picks the grid shape, walks a fresh
:class:`~swatch_grid.hues.HueSequence` and encodes one swatch per sample.
The result is all-or-nothing: any failure propagates and no partial sequence
is returned. Two calls with the same request produce byte-identical output.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from pyrsistent import pvector
from pyrsistent.typing import PVector

from swatch_grid.color import hue_to_rgb
from swatch_grid.encoder import (
    DEFAULT_ENCODER_CONFIG,
    EncodedImage,
    EncoderConfig,
    encode_swatch,
)
from swatch_grid.hues import HueSequence
from swatch_grid.layout import compute_grid_shape
from swatch_grid.request import GridShape, SwatchRequest, check_request

logger = logging.getLogger(__name__)

DEFAULT_MAX_COUNT = 400


@dataclass(frozen=True)
class RendererConfig:
    """Render tunables.

    Attributes:
        encoder: Settings for each swatch image.
        max_count: Largest accepted ``count``; ``None`` disables the limit.
    """

    encoder: EncoderConfig = DEFAULT_ENCODER_CONFIG
    max_count: Optional[int] = DEFAULT_MAX_COUNT


DEFAULT_RENDERER_CONFIG = RendererConfig()


@dataclass(frozen=True)
class RenderResult:
    """Swatches for one request together with the grid they fill.

    Attributes:
        shape: Grid chosen for ``request.count``.
        images: Exactly ``request.count`` images in row-major cell order.
    """

    shape: GridShape
    images: PVector[EncodedImage]


def render_grid(
    request: SwatchRequest, config: RendererConfig = DEFAULT_RENDERER_CONFIG
) -> RenderResult:
    """Render ``request`` and return the images with their grid shape.

    Raises:
        InvalidCount, InvalidSeed, InvalidStep: Malformed request.
        EncodingOverflow: A swatch does not fit the encoder buffer.
        InternalInvariantViolation: A hue fell outside ``[0, 1)``.
    """
    check_request(request, config.max_count)
    shape = compute_grid_shape(request.count)
    logger.debug(
        "Rendering %d swatches in %dx%d grid (seed=%r, step=%r)",
        request.count,
        shape.rows,
        shape.cols,
        request.seed,
        request.step,
    )
    hues = HueSequence(seed=request.seed, step=request.step)
    images = [
        encode_swatch(hue_to_rgb(angle), angle, config.encoder)
        for angle in hues.take(request.count)
    ]
    return RenderResult(shape=shape, images=pvector(images))


def render(
    request: SwatchRequest, config: RendererConfig = DEFAULT_RENDERER_CONFIG
) -> PVector[EncodedImage]:
    """Return exactly ``request.count`` encoded swatches in display order."""
    return render_grid(request, config).images


class SwatchRenderer:
    config: RendererConfig

    def __init__(self, config: Optional[RendererConfig] = None):
        self.config = config or DEFAULT_RENDERER_CONFIG

    def render(self, request: SwatchRequest) -> PVector[EncodedImage]:
        return render(request, self.config)

    def render_grid(self, request: SwatchRequest) -> RenderResult:
        return render_grid(request, self.config)
