from concurrent.futures import ThreadPoolExecutor

import pytest

from swatch_grid.color import hue_to_rgb
from swatch_grid.encoder import EncoderConfig
from swatch_grid.errors import (
    EncodingOverflow,
    InvalidCount,
    InvalidSeed,
    InvalidStep,
)
from swatch_grid.hues import HueSequence, PHI
from swatch_grid.layout import compute_grid_shape
from swatch_grid.render import RendererConfig, SwatchRenderer, render, render_grid
from swatch_grid.request import GridShape
from tests.test_utils import assert_uniform_color, make_request


def test_render_golden_ratio_scenario() -> None:
    result = render_grid(make_request(count=20, seed=0.0, step=PHI))
    assert result.shape == GridShape(rows=4, cols=5)
    assert result.shape == compute_grid_shape(20)
    assert len(result.images) == 20
    assert result.images[0].angle == 0.0
    assert result.images[1].angle == pytest.approx(0.618033988749895)
    assert result.images[0].uri == "bytes://texture_0.00.jpeg"
    assert result.images[1].uri == "bytes://texture_0.62.jpeg"


def test_render_follows_hue_sequence() -> None:
    request = make_request(count=6, seed=0.3, step=0.1)
    images = render(request)
    expected = HueSequence(seed=0.3, step=0.1).take(6)
    assert [image.angle for image in images] == expected
    for image, angle in zip(images, expected):
        assert image.color == hue_to_rgb(angle)
        assert_uniform_color(image, image.color)


def test_render_is_idempotent() -> None:
    request = make_request(count=12, seed=0.77, step=1.41)
    first = [image.data for image in render(request)]
    second = [image.data for image in render(request)]
    assert first == second


def test_parallel_renders_match_sequential() -> None:
    request = make_request(count=8, seed=0.2)
    expected = [image.data for image in render(request)]
    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(lambda _: render(request), range(4)))
    for images in results:
        assert [image.data for image in images] == expected


def test_single_swatch() -> None:
    result = render_grid(make_request(count=1, seed=0.5))
    assert result.shape == GridShape(rows=1, cols=1)
    assert len(result.images) == 1
    assert result.images[0].color == (0, 255, 255)


def test_zero_count_fails() -> None:
    with pytest.raises(InvalidCount) as exc_info:
        render(make_request(count=0))
    assert exc_info.value.count == 0


def test_count_above_limit_fails() -> None:
    renderer = SwatchRenderer(RendererConfig(max_count=10))
    with pytest.raises(InvalidCount) as exc_info:
        renderer.render(make_request(count=11))
    assert exc_info.value.limit == 10
    assert len(renderer.render(make_request(count=10))) == 10


def test_non_finite_inputs_fail() -> None:
    with pytest.raises(InvalidStep):
        render(make_request(step=float("inf")))
    with pytest.raises(InvalidSeed):
        render(make_request(seed=float("nan")))


def test_overflow_fails_whole_render() -> None:
    config = RendererConfig(encoder=EncoderConfig(buffer_capacity=64))
    with pytest.raises(EncodingOverflow) as exc_info:
        render(make_request(count=3, seed=0.4), config)
    assert exc_info.value.angle == pytest.approx(0.4)
