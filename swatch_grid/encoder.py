"""Solid-color swatch encoder.

Each swatch is a square Pillow image filled with one color and saved as a
compressed raster (JPEG by default) into a preallocated, fixed-capacity
buffer. The result keeps only the bytes actually written. Output that would
not fit raises :class:`~swatch_grid.errors.EncodingOverflow`; nothing is ever
cut short silently.

The identifier (``uri``) embeds the source angle to two decimals so a host can
reuse images across frames. Distinct angles that round to the same two
decimals share an identifier.
"""

import io
import logging
from dataclasses import dataclass, field
from typing import Optional

from PIL import Image

from swatch_grid.color import hue_to_rgb
from swatch_grid.errors import EncodingOverflow
from swatch_grid.types import HueSample, RGBColor

logger = logging.getLogger(__name__)

DEFAULT_RESOLUTION = 256
DEFAULT_BUFFER_CAPACITY = 1 << 16
DEFAULT_FORMAT = "JPEG"
DEFAULT_QUALITY = 75

_EXTENSIONS = {"JPEG": "jpeg", "PNG": "png", "WEBP": "webp"}


class BoundedBuffer(io.RawIOBase):
    """Write-only sink backed by a preallocated ``bytearray``.

    Writes past ``capacity`` raise :class:`EncodingOverflow` before any byte
    of the offending chunk is stored.
    """

    def __init__(self, capacity: int = DEFAULT_BUFFER_CAPACITY):
        super().__init__()
        self.capacity = capacity
        self._buffer = bytearray(capacity)
        self._position = 0

    def writable(self) -> bool:
        return True

    def write(self, data) -> int:  # type: ignore[override]
        view = memoryview(data).cast("B")
        end = self._position + view.nbytes
        if end > self.capacity:
            raise EncodingOverflow(self.capacity, end)
        self._buffer[self._position : end] = view
        self._position = end
        return view.nbytes

    def tell(self) -> int:
        return self._position

    def getvalue(self) -> bytes:
        """Return the written bytes, truncated to the written length."""
        return bytes(self._buffer[: self._position])


@dataclass(frozen=True)
class EncoderConfig:
    """Encoder tunables.

    Attributes:
        resolution: Edge length of the square raster in pixels.
        buffer_capacity: Maximum encoded size in bytes.
        format: Pillow format name of the compressed output.
        quality: Quality setting passed to lossy encoders.
    """

    resolution: int = DEFAULT_RESOLUTION
    buffer_capacity: int = DEFAULT_BUFFER_CAPACITY
    format: str = DEFAULT_FORMAT
    quality: int = DEFAULT_QUALITY

    @property
    def extension(self) -> str:
        return _EXTENSIONS.get(self.format.upper(), self.format.lower())


DEFAULT_ENCODER_CONFIG = EncoderConfig()


@dataclass(frozen=True)
class EncodedImage:
    """An encoded swatch owned by the caller.

    Attributes:
        data: Encoded bytes, no longer than the buffer capacity.
        format: Pillow format name of ``data``.
        uri: Identifier derived from the source angle.
        angle: Hue the swatch was generated from.
        color: RGB fill color.
    """

    data: bytes = field(repr=False)
    format: str
    uri: str
    angle: HueSample
    color: RGBColor

    def decode(self) -> Image.Image:
        image = Image.open(io.BytesIO(self.data))
        image.load()
        return image


def swatch_uri(angle: HueSample, extension: str = "jpeg") -> str:
    return f"bytes://texture_{angle:.2f}.{extension}"


def encode_swatch(
    color: RGBColor,
    angle: HueSample,
    config: EncoderConfig = DEFAULT_ENCODER_CONFIG,
) -> EncodedImage:
    """Encode a ``config.resolution`` square filled with ``color``.

    Raises:
        EncodingOverflow: If the encoded image exceeds ``config.buffer_capacity``.
    """
    image = Image.new("RGB", (config.resolution, config.resolution), color)
    buffer = BoundedBuffer(config.buffer_capacity)
    try:
        image.save(buffer, format=config.format, quality=config.quality)
    except EncodingOverflow as exc:
        raise EncodingOverflow(exc.capacity, exc.required, angle) from exc
    data = buffer.getvalue()
    logger.debug("Encoded swatch %.4f %s as %d bytes", angle, color, len(data))
    return EncodedImage(
        data=data,
        format=config.format,
        uri=swatch_uri(angle, config.extension),
        angle=angle,
        color=color,
    )


class SwatchEncoder:
    config: EncoderConfig

    def __init__(self, config: Optional[EncoderConfig] = None):
        self.config = config or DEFAULT_ENCODER_CONFIG

    def encode(self, color: RGBColor, angle: HueSample) -> EncodedImage:
        return encode_swatch(color, angle, self.config)

    def encode_hue(self, angle: HueSample) -> EncodedImage:
        """Convert ``angle`` to RGB and encode it."""
        return encode_swatch(hue_to_rgb(angle), angle, self.config)
