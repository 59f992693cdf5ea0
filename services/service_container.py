"""
ServiceContainer - Composition root cho toan bo application services.

Tap trung viec khoi tao loader, presenter va pipeline tai mot diem duy nhat.

Su dung:
    container = ServiceContainer(load_app_settings())
    container.word_frequency.run_directory("TestFolder")
"""

import logging
from typing import Optional, TextIO

from config.app_settings import AppSettings
from services.document_loader import DocumentLoader
from services.frequency_presenter import FrequencyPresenter
from services.interfaces.document_loader import IDocumentLoader
from services.interfaces.frequency_presenter import IFrequencyPresenter
from services.word_frequency_service import WordFrequencyService

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Composition root - single point of control cho service lifecycle.

    So huu: DocumentLoader, FrequencyPresenter, WordFrequencyService
    """

    def __init__(
        self,
        settings: Optional[AppSettings] = None,
        stream: Optional[TextIO] = None,
    ) -> None:
        """
        Khoi tao tat ca services tai composition root.

        Args:
            settings: AppSettings (None = defaults)
            stream: Output stream cho presenter (None = stdout)
        """
        self.settings = settings or AppSettings()

        self.loader: IDocumentLoader = DocumentLoader(self.settings)
        self.presenter: IFrequencyPresenter = FrequencyPresenter(
            stream=stream, top_n=self.settings.top_n
        )
        self.word_frequency = WordFrequencyService(
            loader=self.loader,
            presenter=self.presenter,
            max_workers=self.settings.max_workers,
        )

        logger.debug("ServiceContainer initialized")
