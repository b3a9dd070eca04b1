"""
SkinEditingLib - Core skin layout functionality

This module provides the canvas model, primitive region transforms and
the legacy upgrade / limb mirror repair algorithms for the Skin64 project.
"""

from S64_Libs.SkinEditingLib.skin_models import (
    ModelVariant,
    Region,
    RgbaColor,
    SkinCanvas,
    UnsupportedSkinSizeError,
)
from S64_Libs.SkinEditingLib.region_ops import (
    copy_region,
    mirror_copy_region,
    mirror_in_place,
    swap_mirror_regions,
    is_fully_transparent,
    count_transparent_from_right,
)
from S64_Libs.SkinEditingLib.model_detector import detect_variant
from S64_Libs.SkinEditingLib.legacy_upgrader import upgrade_legacy_skin
from S64_Libs.SkinEditingLib.limb_mirror_repair import check_repair_gate, repair_limb_mirror
from S64_Libs.SkinEditingLib.skin_normalizer import NormalizeResult, normalize_skin

__all__ = [
    "ModelVariant",
    "Region",
    "RgbaColor",
    "SkinCanvas",
    "UnsupportedSkinSizeError",
    "copy_region",
    "mirror_copy_region",
    "mirror_in_place",
    "swap_mirror_regions",
    "is_fully_transparent",
    "count_transparent_from_right",
    "detect_variant",
    "upgrade_legacy_skin",
    "check_repair_gate",
    "repair_limb_mirror",
    "NormalizeResult",
    "normalize_skin",
]
