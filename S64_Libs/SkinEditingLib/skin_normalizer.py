"""
Size dispatch between the legacy upgrade and the limb mirror repair.

Functions:
    normalize_skin: Route a canvas by its dimensions
"""

from dataclasses import dataclass

from S64_Libs.constants import (
    ACTION_CONVERTED,
    ACTION_FIXED,
    ACTION_SKIPPED,
    LEGACY_SIZE,
    MODERN_SIZE,
)
from S64_Libs.SkinEditingLib.legacy_upgrader import upgrade_legacy_skin
from S64_Libs.SkinEditingLib.limb_mirror_repair import repair_limb_mirror
from S64_Libs.SkinEditingLib.skin_models import SkinCanvas, UnsupportedSkinSizeError


@dataclass
class NormalizeResult:
    """Outcome of normalizing one skin.

    Attributes:
        canvas: Upgraded canvas, repaired canvas, or the untouched input
        action: 'converted' (64x32 upgraded), 'fixed' (64x64 repaired)
                or 'skipped' (64x64 rejected by the repair gate)
    """
    canvas: SkinCanvas
    action: str

    @property
    def changed(self) -> bool:
        return self.action != ACTION_SKIPPED


def normalize_skin(canvas: SkinCanvas) -> NormalizeResult:
    """
    Upgrade a 64x32 skin or repair a 64x64 skin.

    A 64x64 canvas is repaired in place; a 64x32 canvas is left untouched
    and a new 64x64 canvas is returned.

    Raises:
        UnsupportedSkinSizeError: If the canvas is neither 64x32 nor 64x64
    """
    if canvas.size == LEGACY_SIZE:
        return NormalizeResult(upgrade_legacy_skin(canvas), ACTION_CONVERTED)

    if canvas.size == MODERN_SIZE:
        repaired, success = repair_limb_mirror(canvas)
        return NormalizeResult(repaired, ACTION_FIXED if success else ACTION_SKIPPED)

    raise UnsupportedSkinSizeError(canvas.size)
