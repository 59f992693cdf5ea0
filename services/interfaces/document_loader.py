"""
IDocumentLoader - Interface cho loader doc documents tu thu muc.

Loader chiu trach nhiem:
- Resolve va validate thu muc
- Liet ke cac text file khop pattern
- Doc TOAN BO noi dung moi file (da decode)

Moi loi (thu muc khong ton tai, khong co file, loi doc) duoc raise
truoc khi pipeline chay - pipeline khong bao gio nhan input hong.
"""

from abc import ABC, abstractmethod
from typing import List


class IDocumentLoader(ABC):
    """Interface cho document loader."""

    @abstractmethod
    def load(self, folder: str) -> List[str]:
        """
        Doc noi dung tat ca text files trong folder.

        Args:
            folder: Ten thu muc (tuyet doi hoac tuong doi theo cwd)

        Returns:
            List noi dung documents, theo thu tu ten file

        Raises:
            DirectoryNotFoundError: Thu muc khong ton tai
            NoMatchingFilesError: Khong co file nao khop pattern
            FileReadError: Khong doc duoc mot file
        """
        ...
