"""Source tree walking, output layout and the table of contents.

Layout under the output directory:
    <rel path>/<File>.md      - one page per class-based source file
    <rel dir>/<dirname>.md    - one merged page per directory of flat files
    README.md                 - table of contents
"""

from __future__ import annotations

import logging
import os
import re
import shutil
from pathlib import Path

from .config import Config
from .exceptions import SourceNotFoundError, UnsafeCleanError
from .extractors import (
    UNKNOWN_MODULE,
    extract_actions,
    extract_class,
    is_class_based,
    normalize_newlines,
)
from .generators import (
    generate_class_markdown,
    generate_module_markdown,
    generate_toc_markdown,
)
from .models import GenerationResult

log = logging.getLogger(__name__)

TOC_FILENAME = "README.md"


def _base_name(path: str | Path, extension: str) -> str:
    name = re.split(r"[/\\]", str(path))[-1]
    if extension and name.endswith(extension):
        name = name[: -len(extension)]
    return name


def module_name(
    path: str | Path,
    source_root: str = Config.SOURCE_ROOT,
    extension: str = Config.EXTENSION,
) -> str:
    """Derive a dotted module name from a path under ``source_root``.

    ``.../src/main/resources/com/acme/util/helper.js`` -> ``com.acme.util``.
    A trailing segment equal to the file's base name is dropped, so
    ``com/acme/widget/widget.js`` -> ``com.acme``. Paths outside the root
    give ``"unknown"``.
    """
    root_parts = [p for p in re.split(r"[/\\]+", source_root) if p]
    if not root_parts:
        return UNKNOWN_MODULE

    root = r"[/\\]".join(re.escape(p) for p in root_parts)
    pattern = rf"{root}[/\\](.+)[/\\][^/\\]+{re.escape(extension)}$"
    match = re.search(pattern, str(path))
    if not match:
        return UNKNOWN_MODULE

    segments = [s for s in re.split(r"[/\\]+", match.group(1)) if s]
    if segments and segments[-1] == _base_name(path, extension):
        segments.pop()
    return ".".join(segments)


def find_source_files(
    source_dir: Path, extension: str, exclude: Path | None = None
) -> list[Path]:
    """All files ending in ``extension`` under ``source_dir``, sorted.

    Directory ``exclude`` (the output directory) is skipped when it lies
    inside the source tree.
    """
    excluded = exclude.resolve() if exclude is not None else None
    files: list[Path] = []

    for dirpath, dirnames, filenames in os.walk(source_dir):
        current = Path(dirpath)
        dirnames[:] = sorted(
            d for d in dirnames if (current / d).resolve() != excluded
        )
        files.extend(current / f for f in sorted(filenames) if f.endswith(extension))

    return files


def group_by_directory(files: list[Path]) -> dict[Path, list[Path]]:
    """Group files by parent directory, keeping input order in each group."""
    groups: dict[Path, list[Path]] = {}
    for f in files:
        groups.setdefault(f.parent, []).append(f)
    return groups


def write_markdown(path: Path, markdown: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(markdown.strip(), encoding="utf-8")


def _toc_lines(directory: Path, docs_dir: Path, prefix: str = "") -> list[str]:
    lines = []
    for entry in sorted(directory.iterdir(), key=lambda p: p.name):
        if entry.is_dir():
            lines.append(f"{prefix}- **{entry.name}**")
            lines.extend(_toc_lines(entry, docs_dir, prefix + "  "))
        elif entry.is_file() and entry.suffix == ".md":
            relative = entry.relative_to(docs_dir)
            if relative == Path(TOC_FILENAME):
                continue
            link = relative.with_suffix("").as_posix()
            lines.append(f"{prefix}- [{entry.stem}](./{link})")
    return lines


def generate_toc(docs_dir: Path) -> Path:
    """Write README.md listing every generated page under ``docs_dir``."""
    toc_path = docs_dir / TOC_FILENAME
    toc_path.write_text(
        generate_toc_markdown(_toc_lines(docs_dir, docs_dir)), encoding="utf-8"
    )
    log.info(f"TOC created: {toc_path}")
    return toc_path


def _is_within(path: Path, parent: Path) -> bool:
    try:
        path.relative_to(parent)
        return True
    except ValueError:
        return False


def generate_docs(
    source_dir: str | Path,
    docs_dir: str | Path,
    *,
    extension: str = Config.EXTENSION,
    source_root: str = Config.SOURCE_ROOT,
    language: str = Config.CODE_LANGUAGE,
    clean: bool = False,
) -> GenerationResult:
    """Generate all documentation for ``source_dir`` into ``docs_dir``.

    Args:
        source_dir: Root of the source tree to scan
        docs_dir: Output directory, created if missing
        extension: Source file extension
        source_root: Path fragment that module names are computed from
        language: Code fence language for examples
        clean: Remove ``docs_dir`` before generating

    Returns:
        GenerationResult with written paths and extracted records

    Raises:
        SourceNotFoundError: If source_dir is not a directory.
        UnsafeCleanError: If clean would remove the source tree.
    """
    source_dir = Path(source_dir)
    docs_dir = Path(docs_dir)

    if not source_dir.is_dir():
        raise SourceNotFoundError(f"Source directory not found: {source_dir}")

    if clean and docs_dir.exists():
        if _is_within(source_dir.resolve(), docs_dir.resolve()):
            raise UnsafeCleanError(
                f"Refusing to clean {docs_dir}: it contains the source directory"
            )
        shutil.rmtree(docs_dir)
    docs_dir.mkdir(parents=True, exist_ok=True)

    result = GenerationResult()
    texts: dict[Path, str] = {}
    class_files: list[Path] = []
    flat_files: list[Path] = []

    for path in find_source_files(source_dir, extension, exclude=docs_dir):
        text = normalize_newlines(path.read_text(encoding="utf-8"))
        texts[path] = text
        if is_class_based(text):
            class_files.append(path)
        else:
            flat_files.append(path)

    log.debug(f"Found {len(class_files)} class-based and {len(flat_files)} flat files")

    for path in class_files:
        relative = path.relative_to(source_dir)
        md_path = (docs_dir / relative).with_suffix(".md")

        cls = extract_class(
            texts[path], module_name(path.resolve(), source_root, extension)
        )
        write_markdown(md_path, generate_class_markdown(cls, language))

        result.class_docs.append(cls)
        result.written.append(md_path)
        log.info(f"Documented class-based action: {relative} -> {md_path}")

    for folder, files in group_by_directory(flat_files).items():
        module_docs = [
            extract_actions(
                texts[f],
                _base_name(f, extension),
                module_name(f.resolve(), source_root, extension),
            )
            for f in files
        ]

        relative = folder.relative_to(source_dir)
        folder_name = folder.name if relative.parts else source_dir.resolve().name
        md_path = docs_dir / relative / f"{folder_name}.md"
        write_markdown(md_path, generate_module_markdown(module_docs, language))

        result.module_docs.extend(module_docs)
        result.written.append(md_path)
        log.info(f"Documented standard actions: {relative} -> {md_path}")

    result.toc = generate_toc(docs_dir)
    return result
