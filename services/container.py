"""
Explicitly constructed service graph with an open/close lifecycle
"""
from typing import Optional
import logging

from config.settings import HISTORY_DB_PATH, HISTORY_MAX_SIZE, PROJECT_DIRECTORY
from services.context_analyzer import ContextAnalyzer
from services.enhancer import ContextEnhancer
from services.generation_service import GenerationService
from services.history_service import HistoryService
from services.magic_client import MagicClient
from services.page_composer import PageComposer
from services.storage import KeyValueStore, SQLiteKeyValueStore
from services.template_service import TemplateService

logger = logging.getLogger(__name__)


class ComponentServices:
    def __init__(
        self,
        store: Optional[KeyValueStore] = None,
        project_directory: Optional[str] = None,
        magic_client: Optional[MagicClient] = None,
        analyzer: Optional[ContextAnalyzer] = None,
        max_history_size: int = HISTORY_MAX_SIZE,
    ):
        self.store = store or SQLiteKeyValueStore(HISTORY_DB_PATH)
        self.analyzer = analyzer or ContextAnalyzer(project_directory or PROJECT_DIRECTORY)
        self.templates = TemplateService()
        self.enhancer = ContextEnhancer()
        self.history = HistoryService(self.store, max_size=max_history_size)
        self.magic_client = magic_client or MagicClient()
        self.generation = GenerationService(
            analyzer=self.analyzer,
            templates=self.templates,
            enhancer=self.enhancer,
            history=self.history,
            magic_client=self.magic_client,
        )
        self.pages = PageComposer(self.generation)
        self.is_open = False

    def open(self) -> "ComponentServices":
        if not self.is_open:
            self.history.open()
            self.is_open = True
            logger.info("Component services opened")
        return self

    def close(self) -> None:
        if self.is_open:
            self.history.close()
            self.is_open = False
            logger.info("Component services closed")
