"""Unit tests for mapping design rectangles onto the rendered image."""

import pytest

from letterhouse.core import viewport
from letterhouse.core.layout import Rect
from letterhouse.core.viewport import DeviceClass, Offset, ViewportScaler


def assert_rect(rect: Rect, expected: tuple):
    assert (rect.left, rect.top, rect.width, rect.height) == pytest.approx(expected)


@pytest.mark.unit
class TestDeviceClass:
    @pytest.mark.parametrize(
        "width,expected",
        [
            (320, DeviceClass.COMPACT),
            (768, DeviceClass.COMPACT),
            (769, DeviceClass.REGULAR),
            (1920, DeviceClass.REGULAR),
        ],
    )
    def test_classify(self, width, expected):
        assert viewport.classify_device(width) == expected

    def test_unknown_width_is_regular(self):
        assert viewport.classify_device(None) == DeviceClass.REGULAR


@pytest.mark.unit
class TestScale:
    def test_scale_factor_regular(self):
        assert viewport.scale_factor(398, 398) == pytest.approx(1.0)
        assert viewport.scale_factor(796, 398) == pytest.approx(2.0)

    def test_scale_factor_compact(self):
        factor = viewport.scale_factor(199, 398, DeviceClass.COMPACT)
        assert factor == pytest.approx(0.175)

    def test_compact_rect(self):
        rect = viewport.scale(Rect(32, 100, 76, 102), 199, 398, DeviceClass.COMPACT)
        assert_rect(rect, (5.6, 17.5, 13.3, 17.85))

    def test_offset_is_added_after_scaling(self):
        rect = viewport.scale(
            Rect(32, 100, 76, 102), 796, 398, DeviceClass.REGULAR, Offset(10, 20)
        )
        assert_rect(rect, (74, 220, 152, 204))

    def test_image_offset(self):
        assert viewport.image_offset((100, 50), (130, 80)) == Offset(30, 30)

    @pytest.mark.parametrize("design_width", [0, -398])
    def test_design_width_must_be_positive(self, design_width):
        with pytest.raises(ValueError):
            viewport.scale_factor(398, design_width)


@pytest.mark.unit
class TestViewportScaler:
    def test_defaults_to_identity(self):
        scaler = ViewportScaler(398)
        assert_rect(scaler.place(Rect(1, 2, 3, 4)), (1, 2, 3, 4))

    def test_recompute(self):
        scaler = ViewportScaler(398).recompute(
            199, 375, container_origin=(0, 0), image_origin=(12, 8)
        )

        assert scaler.device_class == DeviceClass.COMPACT
        assert scaler.scale == pytest.approx(0.175)
        assert scaler.offset == Offset(12, 8)
        assert_rect(scaler.place(Rect(32, 100, 76, 102)), (17.6, 25.5, 13.3, 17.85))

    def test_recompute_is_idempotent(self):
        scaler = ViewportScaler(396)
        scaler.recompute(600, 1024, (5, 5), (25, 45))
        first = (scaler.scale, scaler.offset, scaler.device_class)

        scaler.recompute(600, 1024, (5, 5), (25, 45))

        assert (scaler.scale, scaler.offset, scaler.device_class) == first

    def test_resize_replaces_previous_state(self):
        scaler = ViewportScaler(398).recompute(199, 375)
        scaler.recompute(398, 1280)

        assert scaler.device_class == DeviceClass.REGULAR
        assert scaler.scale == pytest.approx(1.0)

    def test_custom_compact_settings(self):
        scaler = ViewportScaler(400, compact_threshold=500, compact_scale=0.5)
        scaler.recompute(400, 600)
        assert scaler.scale == pytest.approx(1.0)

        scaler.recompute(400, 500)
        assert scaler.scale == pytest.approx(0.5)

    def test_recompute_without_viewport_width(self):
        scaler = ViewportScaler(398).recompute(199)

        assert scaler.device_class == DeviceClass.REGULAR
        assert scaler.scale == pytest.approx(0.5)
