"""
Unit tests for limb_mirror_repair module.

Tests the repair precondition gate and the in-place left limb rebuild.
"""

import numpy as np
import pytest

from S64_Libs.SkinEditingLib.legacy_upgrader import upgrade_legacy_skin
from S64_Libs.SkinEditingLib.limb_mirror_repair import check_repair_gate, repair_limb_mirror
from S64_Libs.SkinEditingLib.model_detector import detect_variant
from S64_Libs.SkinEditingLib.skin_models import ModelVariant, Region, SkinCanvas

from conftest import clear_region, flip, paint_pattern


class TestCheckRepairGate:
    """Tests for check_repair_gate function."""

    def test_accepts_empty_left_limbs(self, right_only_skin):
        assert check_repair_gate(right_only_skin) is None

    def test_rejects_legacy_size(self, legacy_skin):
        assert "64x32" in check_repair_gate(legacy_skin)

    @pytest.mark.parametrize(
        "point",
        [
            (32, 48),   # left arm block corner
            (47, 63),   # left arm back
            (37, 49),   # left arm top cap
            (16, 48),   # left leg block corner
            (21, 55),   # left leg front
            (30, 60),   # left leg back
        ],
    )
    def test_rejects_drawn_left_limbs(self, right_only_skin, point):
        right_only_skin.set_pixel(*point, (10, 20, 30, 1))
        assert check_repair_gate(right_only_skin) is not None

    def test_zero_alpha_color_counts_as_empty(self, right_only_skin):
        for x in range(16, 48):
            right_only_skin.set_pixel(x, 60, (255, 0, 0, 0))
        assert check_repair_gate(right_only_skin) is None

    def test_ignores_rows_32_to_47(self, right_only_skin):
        paint_pattern(right_only_skin, Region(0, 32, 64, 16))
        assert check_repair_gate(right_only_skin) is None


class TestRepairLimbMirror:
    """Tests for repair_limb_mirror function."""

    def test_rejected_canvas_is_unchanged(self, right_only_skin, pixels):
        right_only_skin.set_pixel(40, 56, (1, 2, 3, 255))
        before = pixels(right_only_skin)

        result, success = repair_limb_mirror(right_only_skin)

        assert success is False
        assert result is right_only_skin
        assert np.array_equal(pixels(result), before)

    def test_rejects_drawn_leg(self, right_only_skin, pixels):
        paint_pattern(right_only_skin, Region(16, 48, 16, 16))
        before = pixels(right_only_skin)

        result, success = repair_limb_mirror(right_only_skin)

        assert success is False
        assert np.array_equal(pixels(result), before)

    def test_rejects_non_modern_sizes(self, legacy_skin, pixels):
        before = pixels(legacy_skin)

        result, success = repair_limb_mirror(legacy_skin)

        assert success is False
        assert np.array_equal(pixels(result), before)

    def test_repairs_in_place(self, right_only_skin):
        result, success = repair_limb_mirror(right_only_skin)

        assert success is True
        assert result is right_only_skin

    def test_classic_arm_faces_are_mirrored(self, right_only_skin, pixels):
        src = pixels(right_only_skin)

        result, _ = repair_limb_mirror(right_only_skin)
        out = pixels(result)

        # left face of the left arm mirrors the right face of the right arm
        assert np.array_equal(out[52:64, 40:44], flip(src[20:32, 40:44]))
        assert np.array_equal(out[52:64, 32:36], flip(src[20:32, 48:52]))
        assert np.array_equal(out[52:64, 36:40], flip(src[20:32, 44:48]))
        assert np.array_equal(out[52:64, 44:48], flip(src[20:32, 52:56]))
        assert np.array_equal(out[48:52, 36:40], flip(src[16:20, 44:48]))
        assert np.array_equal(out[48:52, 40:44], flip(src[16:20, 48:52]))

    def test_leg_faces_are_mirrored(self, right_only_skin, pixels):
        src = pixels(right_only_skin)

        out = pixels(repair_limb_mirror(right_only_skin)[0])

        assert np.array_equal(out[52:64, 24:28], flip(src[20:32, 0:4]))
        assert np.array_equal(out[52:64, 16:20], flip(src[20:32, 8:12]))
        assert np.array_equal(out[52:64, 20:24], flip(src[20:32, 4:8]))
        assert np.array_equal(out[52:64, 28:32], flip(src[20:32, 12:16]))
        assert np.array_equal(out[48:52, 20:24], flip(src[16:20, 4:8]))
        assert np.array_equal(out[48:52, 24:28], flip(src[16:20, 8:12]))

    def test_top_half_untouched(self, right_only_skin, pixels):
        before = pixels(right_only_skin)

        out = pixels(repair_limb_mirror(right_only_skin)[0])

        assert np.array_equal(out[0:48], before[0:48])

    def test_slim_arm(self, right_only_skin, pixels):
        clear_region(right_only_skin, Region(50, 16, 2, 4))
        clear_region(right_only_skin, Region(54, 20, 2, 12))
        assert detect_variant(right_only_skin) == ModelVariant(True, True)
        src = pixels(right_only_skin)

        result, success = repair_limb_mirror(right_only_skin)
        out = pixels(result)

        assert success is True
        assert np.array_equal(out[52:64, 36:39], flip(src[20:32, 44:47]))
        assert np.array_equal(out[52:64, 43:46], flip(src[20:32, 51:54]))
        assert np.array_equal(out[48:52, 36:39], flip(src[16:20, 44:47]))
        assert np.array_equal(out[48:52, 39:42], flip(src[16:20, 47:50]))

    def test_matches_legacy_upgrade(self, legacy_skin, pixels):
        """Repairing a right-only 64x64 skin rebuilds the same limbs as upgrading its 64x32 half."""
        upgraded = upgrade_legacy_skin(legacy_skin)
        modern = SkinCanvas.blank(64, 64)
        modern.paste(legacy_skin.to_image(), Region(0, 0, 64, 32))

        repaired, success = repair_limb_mirror(modern)

        assert success is True
        assert np.array_equal(pixels(repaired), pixels(upgraded))

    def test_is_deterministic(self, right_only_skin, pixels):
        first, _ = repair_limb_mirror(right_only_skin.copy())
        second, _ = repair_limb_mirror(right_only_skin.copy())
        assert pixels(first).tobytes() == pixels(second).tobytes()

    def test_second_repair_is_rejected(self, right_only_skin):
        repair_limb_mirror(right_only_skin)
        _, success = repair_limb_mirror(right_only_skin)
        assert success is False

    def test_variant_stable_after_repair(self, legacy_skin):
        """Re-probing the repaired canvas still reports a classic model."""
        modern = upgrade_legacy_skin(legacy_skin)
        modern.paste(SkinCanvas.blank(64, 16).to_image(), Region(0, 48, 64, 16))

        repaired, success = repair_limb_mirror(modern)

        assert success is True
        assert detect_variant(repaired) == ModelVariant(False, False)
