import pytest

from raster_toolkit.core import Image, InvalidArgumentError, InvalidConfigurationError, OperationId, Pixel
from raster_toolkit.processing import (
    OPERATION_REGISTRY,
    BlurOperation,
    ColorMatrix,
    ColorTransformOperation,
    ConvolutionOperation,
    ImageOperation,
    Kernel,
    MonochromeOperation,
    SepiaOperation,
    SharpenOperation,
    build_registry,
    get_all_categories,
    get_operation,
    get_operations_by_category,
)

UNIFORM_3X3 = [[1 / 9] * 3 for _ in range(3)]


def _average(kernel=UNIFORM_3X3) -> ConvolutionOperation:
    return ConvolutionOperation(
        operation_id=OperationId.BLUR,
        name="Average",
        category="Filtering",
        kernel=kernel,
    )


def _reference_convolution(original: Image, weights) -> Image:
    """Straight evaluation of the neighborhood sum against an untouched snapshot."""
    size = len(weights)
    center = size // 2
    grid = []
    for x in range(original.width):
        column = []
        for y in range(original.height):
            acc = [0.0, 0.0, 0.0]
            for i in range(size):
                for j in range(size):
                    nx, ny = x + i - center, y + j - center
                    if 0 <= nx < original.width and 0 <= ny < original.height:
                        values = original.pixel_at(nx, ny).as_tuple()
                    else:
                        values = (0, 0, 0)
                    for c in range(3):
                        acc[c] += weights[i][j] * values[c]
            column.append(Pixel(int(acc[0]), int(acc[1]), int(acc[2])))
        grid.append(column)
    return Image(grid)


# ---------------------------------------------------------------------------
# Color transforms
# ---------------------------------------------------------------------------

def test_sepia_on_known_pixel():
    image = Image([[Pixel(100, 50, 20)]])
    SepiaOperation().apply(image)
    assert image.pixel_at(0, 0) == Pixel(81, 72, 56)


def test_sepia_clamps_bright_input():
    image = Image([[Pixel(255, 255, 255)]])
    SepiaOperation().apply(image)
    assert image.pixel_at(0, 0) == Pixel(255, 255, 238)


def test_sepia_output_channels_stay_in_range(distinct_image):
    SepiaOperation().apply(distinct_image)
    for x, y in distinct_image.coordinates():
        assert all(0 <= c <= 255 for c in distinct_image.pixel_at(x, y).as_tuple())


def test_sepia_twice_differs_from_once():
    once = Image([[Pixel(100, 50, 20)]])
    twice = once.copy()
    SepiaOperation().apply(once)
    SepiaOperation().apply(twice)
    SepiaOperation().apply(twice)
    assert once != twice


def test_monochrome_produces_gray_luma():
    image = Image([[Pixel(100, 50, 20)], [Pixel(0, 0, 0)]])
    MonochromeOperation().apply(image)
    assert image.pixel_at(0, 0) == Pixel(58, 58, 58)
    assert image.pixel_at(1, 0) == Pixel(0, 0, 0)


def test_color_transform_requires_image():
    with pytest.raises(InvalidArgumentError):
        SepiaOperation().apply(None)


def test_color_matrix_must_be_3x3():
    with pytest.raises(InvalidConfigurationError):
        ColorMatrix(((1, 0), (0, 1)))
    with pytest.raises(InvalidConfigurationError):
        ColorTransformOperation(OperationId.SEPIA, "Bad", "Color Transforms", matrix=[[1, 0, 0]])


# ---------------------------------------------------------------------------
# Convolutions
# ---------------------------------------------------------------------------

def test_blur_darkens_single_pixel_because_edges_are_black():
    image = Image([[Pixel(100, 100, 100)]])
    BlurOperation().apply(image)
    assert image.pixel_at(0, 0) == Pixel(25, 25, 25)


def test_uniform_average_on_single_pixel():
    image = Image([[Pixel(100, 100, 100)]])
    _average().apply(image)
    result = image.pixel_at(0, 0)
    assert result.red < 100
    assert result == Pixel(11, 11, 11)


def test_convolution_reads_only_original_values(distinct_image):
    expected = _reference_convolution(distinct_image, UNIFORM_3X3)
    _average().apply(distinct_image)
    assert distinct_image == expected


def test_backward_shift_kernel_does_not_see_overwritten_pixels(distinct_image):
    # Each output takes its upper-left neighbor, which an in-place pass
    # would already have overwritten.
    original = distinct_image.copy()
    _average([[1, 0, 0], [0, 0, 0], [0, 0, 0]]).apply(distinct_image)

    for x, y in distinct_image.coordinates():
        if x == 0 or y == 0:
            assert distinct_image.pixel_at(x, y) == Pixel(0, 0, 0)
        else:
            assert distinct_image.pixel_at(x, y) == original.pixel_at(x - 1, y - 1)


def test_sharpen_on_flat_image():
    image = Image.filled(3, 3, Pixel(100, 100, 100))
    SharpenOperation().apply(image)
    assert image.pixel_at(1, 1) == Pixel(255, 255, 255)
    # corner: center + three inner-ring neighbors - five outer-ring neighbors
    assert image.pixel_at(0, 0) == Pixel(112, 112, 112)


def test_sharpen_matches_reference_on_non_square_image(wide_image):
    expected = _reference_convolution(wide_image, SharpenOperation().kernel.weights)
    SharpenOperation().apply(wide_image)
    assert wide_image == expected


def test_even_kernel_fails_at_construction():
    with pytest.raises(InvalidConfigurationError):
        _average([[0.25, 0.25], [0.25, 0.25]])
    with pytest.raises(InvalidConfigurationError):
        Kernel(((1.0, 0.0, 0.0), (0.0, 1.0, 0.0)))


def test_non_finite_weights_fail_at_construction():
    with pytest.raises(InvalidConfigurationError):
        _average([[float("nan")]])
    with pytest.raises(InvalidConfigurationError):
        _average([[0, 0, 0], [0, float("inf"), 0], [0, 0, 0]])
    with pytest.raises(InvalidConfigurationError):
        ColorMatrix(((1, 0, 0), (0, float("nan"), 0), (0, 0, 1)))


def test_kernel_exposes_size_and_center():
    kernel = SharpenOperation().kernel
    assert kernel.size == 5
    assert kernel.center == 2


def test_convolution_requires_image():
    with pytest.raises(InvalidArgumentError):
        BlurOperation().apply(None)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

def test_registry_is_total_and_read_only():
    assert set(OPERATION_REGISTRY) == set(OperationId)
    for op_id, op in OPERATION_REGISTRY.items():
        assert op.operation_id is op_id
    with pytest.raises(TypeError):
        OPERATION_REGISTRY[OperationId.BLUR] = SepiaOperation()


def test_registry_rejects_duplicates():
    with pytest.raises(InvalidConfigurationError):
        build_registry([BlurOperation(), BlurOperation()])


def test_get_operation_returns_singletons():
    assert get_operation("blur") is get_operation(OperationId.BLUR)
    assert isinstance(get_operation("monochrome"), MonochromeOperation)
    with pytest.raises(InvalidArgumentError):
        get_operation("emboss")


def test_base_operation_is_abstract():
    with pytest.raises(TypeError):
        ImageOperation(OperationId.SEPIA, "Plain", "Color Transforms")


def test_get_operation_uses_given_registry():
    registry = build_registry([SepiaOperation()])
    assert isinstance(get_operation("sepia", registry), SepiaOperation)
    with pytest.raises(InvalidArgumentError, match="No operation registered for blur"):
        get_operation(OperationId.BLUR, registry)


def test_categories():
    assert get_all_categories() == ["Color Transforms", "Filtering"]
    names = sorted(op.name for op in get_operations_by_category("Filtering"))
    assert names == ["Blur", "Sharpen"]
