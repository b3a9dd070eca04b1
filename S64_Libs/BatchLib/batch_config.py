"""
Batch configuration for Skin64.

Classes:
    BatchConfig: Output naming and execution options for a batch run
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from S64_Libs.constants import CONVERTED_SUFFIX, FIXED_SUFFIX, OUTPUT_DIR_NAME


@dataclass
class BatchConfig:
    """Configuration for processing skin files.

    Attributes:
        output_dir_name: Output subdirectory created inside an input directory;
                         subdirectories with this name are skipped while walking
        converted_suffix: Filename suffix for upgraded 64x32 skins
        fixed_suffix: Filename suffix for repaired 64x64 skins
        overwrite: Replace existing output files (default: True)
        use_threading: Process directory files in a thread pool (default: False)
        max_workers: Maximum number of threads (default: None = executor default)
    """
    output_dir_name: str = OUTPUT_DIR_NAME
    converted_suffix: str = CONVERTED_SUFFIX
    fixed_suffix: str = FIXED_SUFFIX
    overwrite: bool = True
    use_threading: bool = False
    max_workers: Optional[int] = None

    def __post_init__(self):
        """Validate configuration values."""
        if not self.output_dir_name or self.output_dir_name.strip() != self.output_dir_name:
            raise ValueError(f"Invalid output directory name: {self.output_dir_name!r}")

        if self.converted_suffix == self.fixed_suffix:
            raise ValueError("converted_suffix and fixed_suffix must differ")

        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BatchConfig":
        """Create from dictionary, ignoring unknown keys."""
        filtered = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**filtered)
