"""
DocumentLoader - Concrete implementation cua IDocumentLoader.

Doc tat ca text files trong mot thu muc, song song voi ThreadPoolExecutor.

Flow:
  resolve_directory() -> validate ton tai -> find_text_files() (pathspec)
  -> doc song song -> sap xep lai theo thu tu ten file

Loi duoc chuyen thanh cac DocumentLoadError cu the:
- DirectoryNotFoundError: Thu muc khong ton tai
- NoMatchingFilesError: Khong co file nao khop file_pattern
- FileReadError: Loi I/O hoac loi decode (strict)
"""

import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional

from config.app_settings import AppSettings
from core.errors import DirectoryNotFoundError, FileReadError, NoMatchingFilesError
from core.logging_config import log_debug, log_info
from core.utils.file_scanner import ScanConfig, find_text_files, resolve_directory
from services.interfaces.document_loader import IDocumentLoader


class DocumentLoader(IDocumentLoader):
    """
    Loader doc documents tu file system.

    Thread-safe: khong co mutable state ngoai settings (chi doc).
    """

    def __init__(self, settings: Optional[AppSettings] = None) -> None:
        self._settings = settings or AppSettings()

    @property
    def settings(self) -> AppSettings:
        return self._settings

    def list_files(self, folder: str) -> List[Path]:
        """
        Liet ke cac file se duoc doc (khong doc noi dung).

        Raises:
            DirectoryNotFoundError: Thu muc khong ton tai
            NoMatchingFilesError: Khong co file nao khop pattern
        """
        directory = resolve_directory(folder)
        if not directory.is_dir():
            raise DirectoryNotFoundError(directory)

        config = ScanConfig(
            file_pattern=self._settings.file_pattern,
            excluded_patterns=self._settings.get_excluded_patterns_list(),
            recursive=self._settings.recursive,
        )
        try:
            files = find_text_files(directory, config)
        except OSError as e:
            raise FileReadError(directory, str(e)) from e

        if not files:
            raise NoMatchingFilesError(directory, self._settings.file_pattern)

        log_debug(f"[DocumentLoader] Found {len(files)} files in {directory}")
        return files

    def load(self, folder: str) -> List[str]:
        files = self.list_files(folder)

        num_workers = max(1, min(self._settings.max_workers, len(files), os.cpu_count() or 4))

        # executor.map giu nguyen thu tu input -> contents theo thu tu ten file.
        # Exception trong worker duoc raise lai khi lay ket qua.
        with ThreadPoolExecutor(max_workers=num_workers) as executor:
            contents = list(executor.map(self._read_file, files))

        log_info(f"[DocumentLoader] Loaded {len(contents)} documents from {folder}")
        return contents

    def _read_file(self, file_path: Path) -> str:
        """
        Doc toan bo noi dung mot file (strict decode).

        Raises:
            FileReadError: Neu doc hoac decode that bai
        """
        try:
            return file_path.read_text(encoding=self._settings.encoding)
        except (OSError, UnicodeDecodeError, LookupError) as e:
            raise FileReadError(file_path, str(e)) from e
