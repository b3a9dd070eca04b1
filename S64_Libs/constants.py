"""
Constants and configuration values for Skin64.

This module centralizes all constant values, magic numbers, and
configuration settings used throughout the application. Region
geometry lives in SkinEditingLib.skin_layout.
"""

# Skin layout sizes (width, height)
LEGACY_SIZE = (64, 32)
MODERN_SIZE = (64, 64)

# A pixel is opaque iff its alpha exceeds this value
ALPHA_THRESHOLD = 0

# Slim limbs leave a 1 or 2 column transparent notch at the right edge of a probe
SLIM_NOTCH_MIN = 1
SLIM_NOTCH_MAX = 2

# Repair gate tolerance for arm side panels
MAX_ARM_PANEL_NOTCH = 1

# Canvas defaults
CANVAS_MODE = "RGBA"
TRANSPARENT = (0, 0, 0, 0)

# File naming
SKIN_EXTENSION = ".png"
OUTPUT_DIR_NAME = "converted"
CONVERTED_SUFFIX = "_converted"
FIXED_SUFFIX = "_fixed"
DEFAULT_OUTPUT_FORMAT = "PNG"

# Normalize actions
ACTION_CONVERTED = "converted"
ACTION_FIXED = "fixed"
ACTION_SKIPPED = "skipped"

# Batch outcome statuses
STATUS_CONVERTED = "converted"
STATUS_FIXED = "fixed"
STATUS_REJECTED = "rejected"
STATUS_UNSUPPORTED = "unsupported"
STATUS_EXISTS = "exists"
STATUS_FAILED = "failed"
