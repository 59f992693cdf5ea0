"""
File Scanner - Liet ke cac text file trong mot thu muc

Su dung pathspec (gitignore) cho ca pattern chon file
va excluded patterns, giong cach ignore engine xu ly .gitignore.

Features:
- Resolve folder tuong doi theo current working directory
- Top-level scan (mac dinh) hoac recursive
- Ket qua sort theo duong dan de thu tu on dinh
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

import pathspec

# Cac VCS directories luon bi exclude khi scan recursive
VCS_DIRS = [".git/", ".hg/", ".svn/"]


@dataclass
class ScanConfig:
    """
    Configuration cho file scanner.

    Attributes:
        file_pattern: Pattern chon file (so khop voi ten file)
        excluded_patterns: List patterns de exclude (gitignore format)
        recursive: Co scan thu muc con khong
    """

    file_pattern: str = "*.txt"
    excluded_patterns: List[str] = field(default_factory=list)
    recursive: bool = False


def resolve_directory(folder: Union[str, Path]) -> Path:
    """
    Resolve folder thanh duong dan tuyet doi.

    Duong dan tuyet doi giu nguyen; duong dan tuong doi
    duoc noi vao current working directory.
    """
    path = Path(folder).expanduser()
    if path.is_absolute():
        return path
    return Path(os.getcwd()) / path


def build_pathspec(patterns: List[str]) -> pathspec.PathSpec:
    """Tao PathSpec tu list patterns (gitignore format)."""
    return pathspec.PathSpec.from_lines("gitignore", patterns)


def find_text_files(root_path: Path, config: Optional[ScanConfig] = None) -> List[Path]:
    """
    Tim tat ca file khop file_pattern trong root_path.

    Args:
        root_path: Thu muc can scan (phai ton tai)
        config: ScanConfig (None = defaults)

    Returns:
        List Path da sort, rong neu khong co file nao khop
    """
    config = config or ScanConfig()
    include_spec = build_pathspec([config.file_pattern])
    exclude_spec = build_pathspec(VCS_DIRS + list(config.excluded_patterns))

    candidates = root_path.rglob("*") if config.recursive else root_path.iterdir()

    matches: List[Path] = []
    for entry in candidates:
        if not entry.is_file():
            continue

        rel_path = entry.relative_to(root_path).as_posix()

        # Pattern chon file chi xet ten file, exclude xet ca duong dan
        if not include_spec.match_file(entry.name):
            continue
        if exclude_spec.match_file(rel_path):
            continue

        matches.append(entry)

    matches.sort(key=lambda p: p.relative_to(root_path).as_posix())
    return matches
