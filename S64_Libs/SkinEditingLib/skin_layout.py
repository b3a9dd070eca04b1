"""
Fixed skin geometry shared by the legacy upgrade and the limb mirror repair.

Every rectangle the algorithms touch is named here by its role in the skin
layout. Face names follow the texture layout: each limb block is a 4 row cap
strip (top, bottom) above a 12 row strip of side panels ordered
right face, front, left face, back.

Regions are only valid for a 64 pixel wide canvas; the "RIGHT_" limb blocks
sit in rows 16-31 (shared by both layouts), the "LEFT_" ones in rows 48-63
(modern layout only).
"""

from S64_Libs.SkinEditingLib.skin_models import Region

# Rows 0-31 are laid out identically in both layouts
LEGACY_AREA = Region(0, 0, 64, 32)

# Whole 16x16 limb blocks
RIGHT_LEG_BLOCK = Region(0, 16, 16, 16)
RIGHT_ARM_BLOCK = Region(40, 16, 16, 16)
LEFT_LEG_BLOCK = Region(16, 48, 16, 16)
LEFT_ARM_BLOCK = Region(32, 48, 16, 16)

# Variant probes on the right arm
SLEEVE_PROBE = Region(44, 16, 8, 4)
ARM_LAYER_PROBE = Region(40, 20, 16, 12)

# Left arm, classic (4px) geometry
LEFT_ARM_TOP = Region(36, 48, 4, 4)
LEFT_ARM_BOTTOM = Region(40, 48, 4, 4)
LEFT_ARM_RIGHT_FACE = Region(32, 52, 4, 12)
LEFT_ARM_FRONT = Region(36, 52, 4, 12)
LEFT_ARM_LEFT_FACE = Region(40, 52, 4, 12)
LEFT_ARM_BACK = Region(44, 52, 4, 12)

# Right arm, slim (3px) geometry
SLIM_RIGHT_ARM_TOP = Region(44, 16, 3, 4)
SLIM_RIGHT_ARM_BOTTOM = Region(47, 16, 3, 4)
SLIM_RIGHT_ARM_FRONT = Region(44, 20, 3, 12)
SLIM_RIGHT_ARM_BACK = Region(51, 20, 3, 12)

# Left arm, slim (3px) geometry
SLIM_LEFT_ARM_TOP = Region(36, 48, 3, 4)
SLIM_LEFT_ARM_BOTTOM = Region(39, 48, 3, 4)
SLIM_LEFT_ARM_FRONT = Region(36, 52, 3, 12)
SLIM_LEFT_ARM_BACK = Region(43, 52, 3, 12)

# Left leg (legs are always classic width)
LEFT_LEG_TOP = Region(20, 48, 4, 4)
LEFT_LEG_BOTTOM = Region(24, 48, 4, 4)
LEFT_LEG_RIGHT_FACE = Region(16, 52, 4, 12)
LEFT_LEG_FRONT = Region(20, 52, 4, 12)
LEFT_LEG_LEFT_FACE = Region(24, 52, 4, 12)
LEFT_LEG_BACK = Region(28, 52, 4, 12)

# Repair gate groups, in evaluation order
LEFT_LIMB_BLOCKS = (LEFT_ARM_BLOCK, LEFT_LEG_BLOCK)
LEFT_LEG_PANELS = (
    LEFT_LEG_LEFT_FACE,
    LEFT_LEG_RIGHT_FACE,
    LEFT_LEG_FRONT,
    LEFT_LEG_BACK,
)
LEFT_LEG_CAPS = (LEFT_LEG_TOP, LEFT_LEG_BOTTOM)
LEFT_ARM_PANELS = (
    LEFT_ARM_LEFT_FACE,
    LEFT_ARM_RIGHT_FACE,
    LEFT_ARM_BACK,
    LEFT_ARM_FRONT,
)
LEFT_ARM_CAPS = (LEFT_ARM_TOP, LEFT_ARM_BOTTOM)
