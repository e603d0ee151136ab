"""Converters for categories that are mirrored without any rewriting."""

import shutil
from pathlib import Path

from opencode_convert.core.common.base_converter import BaseCategoryConverter


def copy_tree(source: Path, destination: Path) -> None:
    """
    Copy a directory tree file for file, byte for byte.

    Only regular files and directories are copied; symlinks and special
    files are left out.
    """
    destination.mkdir(parents=True, exist_ok=True)
    for entry in sorted(source.iterdir()):
        if entry.is_symlink():
            continue

        target = destination / entry.name
        if entry.is_dir():
            copy_tree(entry, target)
        elif entry.is_file():
            shutil.copyfile(entry, target)


def count_bundles(source: Path) -> int:
    """Count the immediate subdirectories, one per named bundle."""
    return sum(
        1 for entry in source.iterdir() if entry.is_dir() and not entry.is_symlink()
    )


class DirectoryMirrorConverter(BaseCategoryConverter):
    """Replace the output directory with an exact copy of the source tree."""

    def _convert(self, source_path: Path, output_path: Path) -> int:
        if output_path.exists():
            shutil.rmtree(output_path)
        copy_tree(source_path, output_path)
        return count_bundles(source_path)


class SkillConverter(DirectoryMirrorConverter):
    """Skills are directories with a SKILL.md and assets; both formats agree."""

    category = "skills"


class RuleConverter(DirectoryMirrorConverter):
    """Rules are plain Markdown, loaded in OpenCode through 'instructions'."""

    category = "rules"
