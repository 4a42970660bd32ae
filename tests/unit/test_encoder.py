import pytest

from swatch_grid.encoder import (
    DEFAULT_BUFFER_CAPACITY,
    BoundedBuffer,
    EncoderConfig,
    SwatchEncoder,
    encode_swatch,
    swatch_uri,
)
from swatch_grid.errors import EncodingOverflow
from swatch_grid.types import RGBColor
from tests.test_utils import assert_uniform_color, decoded_array


@pytest.mark.parametrize(
    "color",
    [
        (255, 0, 0),
        (0, 255, 0),
        (0, 0, 255),
        (255, 255, 0),
        (0, 255, 255),
        (255, 0, 191),
        (127, 255, 0),
    ],
)
def test_jpeg_swatch_round_trip(color: RGBColor) -> None:
    image = encode_swatch(color, 0.5)
    assert 0 < len(image.data) <= DEFAULT_BUFFER_CAPACITY
    assert image.format == "JPEG"
    decoded = image.decode()
    assert decoded.size == (256, 256)
    assert decoded.format == "JPEG"
    assert_uniform_color(image, color)


def test_png_swatch_is_exact() -> None:
    config = EncoderConfig(format="PNG")
    image = encode_swatch((12, 200, 99), 0.25, config)
    assert image.uri == "bytes://texture_0.25.png"
    assert_uniform_color(image, (12, 200, 99), tolerance=0)


def test_resolution_is_configurable() -> None:
    image = encode_swatch((0, 0, 255), 0.0, EncoderConfig(resolution=32))
    assert decoded_array(image).shape == (32, 32, 3)


def test_encoding_is_deterministic() -> None:
    first = encode_swatch((255, 95, 0), 0.1)
    second = encode_swatch((255, 95, 0), 0.1)
    assert first.data == second.data


def test_uri_embeds_angle_to_two_decimals() -> None:
    assert encode_swatch((0, 255, 255), 0.5).uri == "bytes://texture_0.50.jpeg"
    assert swatch_uri(0.618033988749895) == "bytes://texture_0.62.jpeg"


def test_uri_aliases_close_angles() -> None:
    # known limitation: identifiers only distinguish angles to 0.01
    assert swatch_uri(0.121) == swatch_uri(0.124)


def test_overflow_raises_with_context() -> None:
    config = EncoderConfig(buffer_capacity=64)
    with pytest.raises(EncodingOverflow) as exc_info:
        encode_swatch((255, 0, 0), 0.3, config)
    err = exc_info.value
    assert err.capacity == 64
    assert err.required > 64
    assert err.angle == 0.3


def test_bounded_buffer_truncates_to_written_length() -> None:
    buffer = BoundedBuffer(8)
    assert buffer.write(b"abc") == 3
    assert buffer.write(bytearray(b"de")) == 2
    assert buffer.tell() == 5
    assert buffer.getvalue() == b"abcde"


def test_bounded_buffer_rejects_write_past_capacity() -> None:
    buffer = BoundedBuffer(4)
    buffer.write(b"abc")
    with pytest.raises(EncodingOverflow) as exc_info:
        buffer.write(b"de")
    assert exc_info.value.required == 5
    assert buffer.getvalue() == b"abc"


def test_swatch_encoder_encode_hue() -> None:
    encoder = SwatchEncoder(EncoderConfig(format="PNG"))
    image = encoder.encode_hue(0.5)
    assert image.color == (0, 255, 255)
    assert image.angle == 0.5
    assert_uniform_color(image, (0, 255, 255), tolerance=0)
    assert encoder.encode((0, 255, 255), 0.5).data == image.data
