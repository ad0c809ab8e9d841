from dataclasses import asdict, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator

from loguru import logger

from tsmock.exceptions import SourceReadError
from tsmock.models.domain_models import SourceUnit


def convert(obj):
    if isinstance(obj, Enum):
        return obj.value
    if is_dataclass(obj):
        return {k: convert(v) for k, v in asdict(obj).items()}
    if isinstance(obj, (list, tuple)):
        return [convert(v) for v in obj]
    if isinstance(obj, dict):
        return {k: convert(v) for k, v in obj.items()}
    if isinstance(obj, Path):
        return str(obj)
    return obj


def read_file_content(file_path: Path) -> str:
    """Read file content with encoding fallback."""
    try:
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                return f.read()
        except UnicodeDecodeError:
            with open(file_path, 'r', encoding='latin1') as f:
                return f.read()
    except OSError as e:
        raise SourceReadError(file_path, str(e)) from e


def find_source_files(root: Path, extensions: Iterable[str], ignore_dirs: Iterable[str] = ()) -> list:
    """List files under ``root`` whose suffix is in ``extensions``, sorted by path."""
    root = Path(root)
    if not root.is_dir():
        raise SourceReadError(root, "not a directory")

    extensions = {ext.lower() for ext in extensions}
    ignored = set(ignore_dirs)
    files = []
    for path in sorted(root.rglob("*")):
        relative_parts = path.relative_to(root).parts
        if ignored.intersection(relative_parts[:-1]):
            continue
        if path.suffix.lower() in extensions and path.is_file():
            files.append(path)
    return files


def iter_source_units(root: Path, extensions: Iterable[str], ignore_dirs: Iterable[str] = ()) -> Iterator[SourceUnit]:
    files = find_source_files(root, extensions, ignore_dirs)
    logger.info(f"Found {len(files)} source files under {root}")
    for file_path in files:
        yield SourceUnit(path=file_path, text=read_file_content(file_path))
