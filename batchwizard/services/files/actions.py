# File creation actions

import logging
from pathlib import Path
from typing import List, Optional, Sequence

from batchwizard.engine.errors import FileCreationError
from batchwizard.engine.schema import FileConfig, WorkspaceFolder

logger = logging.getLogger(__name__)


def create_folder_structure(folder: Path, runner, base: Optional[Path] = None) -> List[Path]:
    """Create every missing directory on the way to ``folder``.

    Args:
        folder: Directory that must exist afterwards
        runner: ActionRunner used for filesystem checks and writes
        base: Directory known to exist; only the part of ``folder`` below
            it is walked. Defaults to the filesystem root.

    Returns:
        Directories that were created, outermost first

    Raises:
        FileCreationError: If a path component exists but is not a directory
    """
    folder = Path(folder)
    if base is not None:
        current = Path(base)
        parts = folder.relative_to(base).parts
    else:
        current = Path(folder.anchor or '/')
        parts = folder.parts[1:] if folder.anchor else folder.parts

    created = []
    for part in parts:
        current = current / part
        if runner.path_exists(current):
            if not runner.is_directory(current):
                raise FileCreationError(f"Specified folder is not a directory: {current}")
            continue
        runner.make_directory(current)
        created.append(current)

    if created:
        logger.info("Created %d folder(s) under %s", len(created), base or current.anchor)
    return created


def create_files(configs: Sequence[FileConfig], destination: Path, prefix: str, runner) -> List[Path]:
    """Write one ``<prefix><suffix>`` file per config.

    Files with an ``additional_path`` go into that subfolder of
    ``destination``, which is created when missing.
    """
    destination = Path(destination)
    written = []

    for config in configs:
        target_dir = destination
        if config.additional_path:
            target_dir = destination / config.additional_path
            create_folder_structure(target_dir, runner, base=destination)

        file_path = target_dir / f"{prefix}{config.suffix}"
        content = "\n".join(config.content) if config.content else ""
        runner.write_file(file_path, content)
        written.append(file_path)

    logger.info("Created %d file(s) in %s", len(written), destination)
    return written


def parse_suffixes(text: Optional[str], current_files: Sequence[FileConfig] = ()) -> List[FileConfig]:
    """Turn comma separated suffixes into file configs.

    Entries are trimmed and empty entries dropped. The i-th suffix keeps
    the content and additional path of the i-th existing file config.
    """
    if not text:
        return []

    suffixes = [item.strip() for item in text.split(',')]
    suffixes = [item for item in suffixes if item]

    files = []
    for index, suffix in enumerate(suffixes):
        if index < len(current_files):
            files.append(current_files[index].model_copy(update={'suffix': suffix}))
        else:
            files.append(FileConfig(suffix=suffix))
    return files


def identify_workspace(target_folder: Path, workspaces: Sequence[WorkspaceFolder]) -> Optional[WorkspaceFolder]:
    """Return the innermost workspace containing ``target_folder``."""
    target = Path(target_folder).resolve()
    matches = [
        ws for ws in workspaces
        if target == ws.path or ws.path in target.parents
    ]
    if not matches:
        return None
    return max(matches, key=lambda ws: len(ws.path.parts))
