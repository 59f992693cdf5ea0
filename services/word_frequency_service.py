"""
WordFrequencyService - Pipeline dem tan suat word.

Nhan noi dung documents tu loader, fan-out tokenize + dem local,
merge thanh aggregate va (tuy chon) giao cho presenter.

Dependency Flow:
  IDocumentLoader -> WordFrequencyService -> core.tokenization.batch
                                          -> IFrequencyPresenter

Pipeline khong co side effect: khong doc/ghi storage trong run(),
ket qua tra ve da freeze (immutable).
"""

import logging
from typing import Optional, Sequence

from core.tokenization.batch import count_documents, count_documents_parallel
from core.tokenization.counter import FrequencyMap
from services.interfaces.document_loader import IDocumentLoader
from services.interfaces.frequency_presenter import IFrequencyPresenter

logger = logging.getLogger(__name__)


class WordFrequencyService:
    """
    Orchestrator cho word frequency pipeline.

    Ket qua run() giong nhau voi moi max_workers va moi thu tu documents,
    vi merge() giao hoan va ket hop.
    """

    def __init__(
        self,
        loader: Optional[IDocumentLoader] = None,
        presenter: Optional[IFrequencyPresenter] = None,
        max_workers: int = 4,
    ) -> None:
        """
        Khoi tao service.

        Args:
            loader: Loader cho run_directory() (None = chi dung run())
            presenter: Presenter cho run_directory() (None = khong in)
            max_workers: So workers toi da (1 = sequential)
        """
        self._loader = loader
        self._presenter = presenter
        self._max_workers = max(1, max_workers)

    def run(self, documents: Sequence[str]) -> FrequencyMap:
        """
        Dem tan suat tren tat ca documents.

        Args:
            documents: Noi dung documents (co the rong)

        Returns:
            FrequencyMap da freeze; rong neu khong co document
        """
        if self._max_workers == 1:
            result = count_documents(documents)
        else:
            result = count_documents_parallel(documents, max_workers=self._max_workers)

        logger.debug(
            "Counted %d documents: %d distinct words", len(documents), len(result)
        )
        return result.freeze()

    def run_directory(self, folder: str, print_results: bool = True) -> FrequencyMap:
        """
        Load documents tu folder, dem, va in ket qua.

        Loi cua loader duoc raise truoc khi pipeline chay.

        Args:
            folder: Thu muc chua text files
            print_results: False de bo qua presenter (vd: khi test)

        Returns:
            FrequencyMap da freeze

        Raises:
            RuntimeError: Neu service khong co loader
            DocumentLoadError: Loi tu loader
        """
        if self._loader is None:
            raise RuntimeError("WordFrequencyService was created without a loader")

        documents = self._loader.load(folder)
        result = self.run(documents)

        if print_results and self._presenter is not None:
            self._presenter.present(result)
        return result
