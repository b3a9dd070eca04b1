"""
S64_Libs - Skin64 Library Modules

This package contains core functionality for the Skin64 project,
organized into specialized sub-packages:

- SkinEditingLib: Canvas model, region transforms and the layout upgrade/repair algorithms
- BatchLib: File discovery, PNG load/save and batch processing of skin files
"""

__version__ = "0.1.0"
