"""
AppSettings - Typed settings dataclass cho wordfreq.

Thay the Dict[str, Any] bang dataclass co type hints va default values.
Tat ca settings duoc truy cap qua typed fields thay vi string keys.

Modules:
- AppSettings: Dataclass chua toan bo settings cua loader + presenter
- from_dict(): Tao AppSettings tu dict (doc tu settings.json)
- to_dict(): Chuyen doi AppSettings thanh dict de luu xuong file

Su dung:
    settings = load_app_settings()
    loader = DocumentLoader(settings)
"""

import typing
from dataclasses import dataclass, replace
from typing import Any


# === Default values cho settings ===
DEFAULT_FILE_PATTERN = "*.txt"
DEFAULT_ENCODING = "utf-8"
DEFAULT_MAX_WORKERS = 4


@dataclass
class AppSettings:
    """
    Typed settings cho wordfreq.

    Moi field tuong ung voi mot key trong settings.json.
    Default values duoc su dung khi settings.json chua co key tuong ung.
    """

    # --- Loader Settings ---
    # Pattern chon file (gitignore pattern, so khop voi ten file)
    file_pattern: str = DEFAULT_FILE_PATTERN
    # Pattern cac file bi loai (separated by newline)
    excluded_patterns: str = ""
    # Co scan thu muc con hay khong (mac dinh chi top-level)
    recursive: bool = False
    # Encoding khi doc file - strict, loi decode la FileReadError
    encoding: str = DEFAULT_ENCODING

    # --- Counting Settings ---
    # So workers toi da cho doc file va dem song song
    max_workers: int = DEFAULT_MAX_WORKERS

    # --- Presenter Settings ---
    # Chi in top N tu (0 = in tat ca)
    top_n: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AppSettings":
        """
        Tao AppSettings tu dict, chi lay cac keys trung voi field names.

        Bao gom type validation: neu value co type khong khop voi
        field declaration, se bo qua va dung default thay the.

        Args:
            data: Dict settings (thuong tu settings.json)

        Returns:
            AppSettings instance voi values tu dict, fallback ve defaults
        """
        field_types: dict[str, Any] = {
            f.name: f.type for f in cls.__dataclass_fields__.values()
        }

        filtered: dict[str, Any] = {}
        for key, value in data.items():
            if key not in field_types:
                continue

            expected_type = field_types[key]

            # Xu ly truong hop type annotation la string (forward ref)
            if isinstance(expected_type, str):
                type_map = {"str": str, "bool": bool, "int": int, "float": float}
                expected_type = type_map.get(expected_type, str)

            # Strict type check: reject bool khi expect int
            # (isinstance(True, int) == True trong Python)
            if expected_type is int and isinstance(value, bool):
                continue

            origin = typing.get_origin(expected_type)
            check_type = origin if origin is not None else expected_type

            if isinstance(value, check_type):
                filtered[key] = value

        settings = cls(**filtered)

        # Gia tri am khong co y nghia -> dung default
        if settings.max_workers < 1:
            settings.max_workers = DEFAULT_MAX_WORKERS
        if settings.top_n < 0:
            settings.top_n = 0
        return settings

    def to_dict(self) -> dict[str, Any]:
        """
        Chuyen doi AppSettings thanh dict de luu xuong file.

        Returns:
            Dict voi toan bo settings
        """
        return {
            "file_pattern": self.file_pattern,
            "excluded_patterns": self.excluded_patterns,
            "recursive": self.recursive,
            "encoding": self.encoding,
            "max_workers": self.max_workers,
            "top_n": self.top_n,
        }

    def with_overrides(self, **overrides: Any) -> "AppSettings":
        """
        Tao ban sao voi cac field duoc override (bo qua value None).

        Dung boi CLI: flag nao khong truyen thi giu gia tri tu settings.json.
        """
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)

    def get_excluded_patterns_list(self) -> list[str]:
        """
        Parse excluded_patterns string thanh list cac patterns.

        Loai bo dong trong va comments (bat dau bang #).

        Returns:
            List patterns da normalize
        """
        return [
            line.strip()
            for line in self.excluded_patterns.splitlines()
            if line.strip() and not line.strip().startswith("#")
        ]
