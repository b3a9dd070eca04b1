"""
BatchLib - Skin file processing

This module provides PNG loading/saving, file discovery and batch
processing of skin files for the Skin64 project.
"""

from S64_Libs.BatchLib.batch_config import BatchConfig
from S64_Libs.BatchLib.skin_files import (
    is_skin_file,
    load_skin,
    save_skin,
    find_skin_files,
    build_output_path,
)
from S64_Libs.BatchLib.batch_runner import (
    FileOutcome,
    BatchReport,
    process_skin_file,
    process_single_file,
    process_directory,
    process_path,
    format_outcome,
)

__all__ = [
    "BatchConfig",
    "is_skin_file",
    "load_skin",
    "save_skin",
    "find_skin_files",
    "build_output_path",
    "FileOutcome",
    "BatchReport",
    "process_skin_file",
    "process_single_file",
    "process_directory",
    "process_path",
    "format_outcome",
]
