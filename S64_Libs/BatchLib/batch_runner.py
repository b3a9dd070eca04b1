"""
Batch processing of skin files.

Each file is decoded, routed by size to the legacy upgrade or the limb
mirror repair, and written next to the input (single file mode) or into
an output directory (directory mode). Per-file problems are recorded as
outcomes rather than raised, so one bad file never stops a batch.

Classes:
    FileOutcome: Result of processing one file
    BatchReport: Ordered outcomes of a batch run

Functions:
    process_skin_file: Process one file into a given output directory
    process_single_file: Single file mode (output beside the input)
    process_directory: Directory mode (recursive, optional thread pool)
    process_path: Dispatch on file vs directory
    format_outcome: Human-readable report line for an outcome
"""

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional
import concurrent.futures
import logging

from S64_Libs.BatchLib.batch_config import BatchConfig
from S64_Libs.BatchLib.skin_files import (
    build_output_path,
    find_skin_files,
    is_skin_file,
    load_skin,
    save_skin,
)
from S64_Libs.constants import (
    ACTION_CONVERTED,
    ACTION_SKIPPED,
    STATUS_CONVERTED,
    STATUS_EXISTS,
    STATUS_FAILED,
    STATUS_FIXED,
    STATUS_REJECTED,
    STATUS_UNSUPPORTED,
)
from S64_Libs.pillow_compat import UnidentifiedImageError
from S64_Libs.SkinEditingLib.skin_models import UnsupportedSkinSizeError
from S64_Libs.SkinEditingLib.skin_normalizer import normalize_skin

logger = logging.getLogger(__name__)


@dataclass
class FileOutcome:
    """Result of processing one skin file.

    Attributes:
        input_path: File that was processed
        status: One of converted, fixed, rejected, unsupported, exists, failed
        output_path: Written (or already existing) output file, if any
        error: Error message for failed files; a failed file with an
               output_path failed to save, one without failed to load
    """
    input_path: Path
    status: str
    output_path: Optional[Path] = None
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.status == STATUS_FAILED

    @property
    def written(self) -> bool:
        return self.status in (STATUS_CONVERTED, STATUS_FIXED)


@dataclass
class BatchReport:
    """Outcomes of a batch run, in file discovery order."""
    outcomes: List[FileOutcome] = field(default_factory=list)

    def counts(self) -> Dict[str, int]:
        return dict(Counter(outcome.status for outcome in self.outcomes))

    @property
    def failed_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.failed)

    @property
    def written_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.written)

    def summary(self) -> str:
        counts = self.counts()
        parts = [f"{status}={counts[status]}" for status in sorted(counts)]
        return f"{len(self.outcomes)} file(s): " + (", ".join(parts) if parts else "nothing to do")


def process_skin_file(input_path: Path, output_dir: Path, config: BatchConfig) -> FileOutcome:
    """
    Load, normalize and save one skin file.

    Args:
        input_path: PNG file to process
        output_dir: Existing directory to write the output into
        config: Batch configuration (suffixes, overwrite)

    Returns:
        FileOutcome describing what happened
    """
    input_path = Path(input_path)

    try:
        canvas = load_skin(input_path)
    except (UnidentifiedImageError, OSError) as e:
        logger.debug(f"Failed to load {input_path}: {e}")
        return FileOutcome(input_path, STATUS_FAILED, error=str(e))

    try:
        result = normalize_skin(canvas)
    except UnsupportedSkinSizeError as e:
        logger.debug(f"{input_path}: {e}")
        return FileOutcome(input_path, STATUS_UNSUPPORTED, error=str(e))

    if result.action == ACTION_SKIPPED:
        return FileOutcome(input_path, STATUS_REJECTED)

    if result.action == ACTION_CONVERTED:
        status, suffix = STATUS_CONVERTED, config.converted_suffix
    else:
        status, suffix = STATUS_FIXED, config.fixed_suffix

    output_path = build_output_path(input_path, output_dir, suffix)
    if output_path.exists() and not config.overwrite:
        return FileOutcome(input_path, STATUS_EXISTS, output_path=output_path)

    try:
        save_skin(result.canvas, output_path)
    except OSError as e:
        logger.debug(f"Failed to save {output_path}: {e}")
        return FileOutcome(input_path, STATUS_FAILED, output_path=output_path, error=str(e))

    return FileOutcome(input_path, status, output_path=output_path)


def process_single_file(input_path: Path, config: Optional[BatchConfig] = None) -> BatchReport:
    """
    Process one PNG file, writing the output beside it.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a PNG
    """
    config = config or BatchConfig()
    input_path = Path(input_path)

    if not input_path.is_file():
        raise FileNotFoundError(f"File not found: {input_path}")
    if not is_skin_file(input_path):
        raise ValueError(f"File is not PNG: {input_path}")

    report = BatchReport([process_skin_file(input_path, input_path.parent, config)])
    logger.info(report.summary())
    return report


def process_directory(
    input_dir: Path,
    config: Optional[BatchConfig] = None,
    output_dir: Optional[Path] = None,
) -> BatchReport:
    """
    Process every PNG file under a directory.

    The output directory (default '<input_dir>/<output_dir_name>') is
    created if needed and excluded from the walk. With use_threading
    enabled, files are processed in a ThreadPoolExecutor; outcomes keep
    discovery order either way.

    Args:
        input_dir: Directory to walk recursively
        config: Batch configuration (default: BatchConfig())
        output_dir: Override for the output directory

    Returns:
        BatchReport with one outcome per discovered file

    Raises:
        FileNotFoundError: If input_dir is not a directory
        OSError: If the output directory cannot be created
        Exception: Unexpected errors from a worker, re-raised with file context
    """
    config = config or BatchConfig()
    input_dir = Path(input_dir)

    if not input_dir.is_dir():
        raise FileNotFoundError(f"Directory not found: {input_dir}")

    output_dir = Path(output_dir) if output_dir else input_dir / config.output_dir_name
    output_dir.mkdir(parents=True, exist_ok=True)
    resolved_output = output_dir.resolve()

    files = [
        path
        for path in find_skin_files(input_dir, config.output_dir_name)
        if resolved_output not in path.resolve().parents
    ]
    logger.debug(f"Found {len(files)} skin file(s) under {input_dir}")

    if config.use_threading and len(files) > 1:
        outcomes: List[Optional[FileOutcome]] = [None] * len(files)
        with concurrent.futures.ThreadPoolExecutor(max_workers=config.max_workers) as executor:
            futures: Dict[concurrent.futures.Future, int] = {
                executor.submit(process_skin_file, path, output_dir, config): index
                for index, path in enumerate(files)
            }

            for future in concurrent.futures.as_completed(futures):
                index = futures[future]
                try:
                    outcomes[index] = future.result()
                except Exception as e:
                    # Re-raise with file context
                    raise Exception(f"Error processing {files[index]}: {str(e)}") from e
        report = BatchReport(list(outcomes))
    else:
        report = BatchReport([process_skin_file(path, output_dir, config) for path in files])

    logger.info(report.summary())
    return report


def process_path(
    path: Path,
    config: Optional[BatchConfig] = None,
    output_dir: Optional[Path] = None,
) -> BatchReport:
    """
    Process a single PNG file or every PNG file under a directory.

    Raises:
        FileNotFoundError: If the path does not exist
        ValueError: If a single file is not a PNG
    """
    path = Path(path)
    if path.is_dir():
        return process_directory(path, config, output_dir)
    if not path.exists():
        raise FileNotFoundError(f"Failed to access path: {path}")
    return process_single_file(path, config)


def format_outcome(outcome: FileOutcome) -> str:
    """Report line for one outcome."""
    if outcome.status == STATUS_CONVERTED:
        return f"Successfully converted 64x32: {outcome.input_path} -> {outcome.output_path}"
    if outcome.status == STATUS_FIXED:
        return f"Successfully fixed 64x64 (fill bottom): {outcome.input_path} -> {outcome.output_path}"
    if outcome.status == STATUS_REJECTED:
        return f"Skipped 64x64 (bottom does not meet requirements): {outcome.input_path}"
    if outcome.status == STATUS_UNSUPPORTED:
        return f"Skipped (unsupported size): {outcome.input_path}"
    if outcome.status == STATUS_EXISTS:
        return f"Skipped (output exists): {outcome.input_path} -> {outcome.output_path}"
    if outcome.output_path is None:
        return f"Failed to load {outcome.input_path}: {outcome.error}"
    return f"Failed to save {outcome.input_path} -> {outcome.output_path}: {outcome.error}"
