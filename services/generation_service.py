"""
Generation service for ComponentCraft: the fallback-safe generation pipeline
"""
from typing import Optional, Callable, Dict, Any
from datetime import datetime
import logging

from config.decorators import demote_to_miss
from models.component import (
    ComponentVariation,
    ContextSuggestions,
    GeneratedComponent,
    GenerationMetadata,
    GenerationRequest,
    ProgressEvent,
    ServiceStatus,
    VariationsResponse,
)
from models.context import ContextInsights
from services.basic_generator import BasicComponentGenerator
from services.code_utils import categorize_component, generate_component_name
from services.context_analyzer import ContextAnalyzer
from services.enhancer import ContextEnhancer
from services.history_service import HistoryService
from services.magic_client import MagicClient
from services.template_service import TemplateService

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[ProgressEvent], None]

CONTEXT_SOURCE = "Template Library (Context Enhanced)"
TEMPLATE_SOURCE = "Template Library"
REMOTE_SOURCE = "AI Generation"
FALLBACK_SOURCE = "Fallback Generator"


class GenerationService:
    """
    Runs each request through context-aware matching, plain matching, the
    remote service and finally the basic generator. Every stage failure is
    demoted to a miss, so `generate` always returns a successful component.
    """

    def __init__(
        self,
        analyzer: ContextAnalyzer,
        templates: TemplateService,
        enhancer: ContextEnhancer,
        history: HistoryService,
        magic_client: MagicClient,
        basic_generator: Optional[BasicComponentGenerator] = None,
    ):
        self.analyzer = analyzer
        self.templates = templates
        self.enhancer = enhancer
        self.history = history
        self.magic_client = magic_client
        self.basic_generator = basic_generator or BasicComponentGenerator()

    @staticmethod
    def _emit(on_progress: Optional[ProgressCallback], status: str, message: Optional[str] = None) -> None:
        if on_progress is None:
            return
        try:
            on_progress(ProgressEvent(status=status, message=message))
        except Exception as e:
            logger.warning(f"Progress callback raised, ignoring: {e}")

    async def generate(self, request: GenerationRequest, on_progress: Optional[ProgressCallback] = None) -> GeneratedComponent:
        self._emit(on_progress, "generating", "Analyzing project context...")

        component = await self._generate_with_context(request, on_progress)
        if component is None:
            self._emit(on_progress, "generating", "Searching template library...")
            component = await self._generate_from_template(request)
        if component is None:
            self._emit(on_progress, "generating", "Generating with AI...")
            component = await self._generate_remote(request)
        if component is None:
            component = self._generate_basic(request)

        await self._record(component, request)

        self._emit(on_progress, "complete", f"Generated {component.name}")
        logger.info(f"Generated '{component.name}' via {component.metadata.source}")
        return component

    # --- Stages ---

    @demote_to_miss("context-aware")
    async def _generate_with_context(
        self, request: GenerationRequest, on_progress: Optional[ProgressCallback] = None
    ) -> Optional[GeneratedComponent]:
        insights = await self.analyzer.get_or_analyze(request.project_directory)
        template = self.templates.match(request.prompt)
        if template is None:
            return None

        self._emit(on_progress, "generating", f"Enhancing {template.name} with project context...")
        suggestions = self.analyzer.generate_contextual_suggestions(request.prompt, insights)
        code = self.enhancer.enhance(template.code, insights, request.prompt)

        return GeneratedComponent(
            code=code,
            name=template.name,
            explanation=f"Context-aware {template.name} optimized for your project",
            metadata=GenerationMetadata(
                source=CONTEXT_SOURCE,
                search_query=request.search_query or request.prompt,
                context_aware=True,
                compatibility_score=insights.recommendations.compatibility_score,
                framework_usage=insights.framework_usage.to_wire(),
                styling_approach=insights.styling_approach,
                applied_suggestions=suggestions.to_wire(),
            ),
        )

    @demote_to_miss("template")
    async def _generate_from_template(self, request: GenerationRequest) -> Optional[GeneratedComponent]:
        template = self.templates.match(request.prompt)
        if template is None:
            return None

        return GeneratedComponent(
            code=template.code,
            name=template.name,
            explanation=f"Generated from template library: {template.name}",
            metadata=GenerationMetadata(
                source=TEMPLATE_SOURCE,
                search_query=request.search_query or request.prompt,
            ),
        )

    @demote_to_miss("remote")
    async def _generate_remote(self, request: GenerationRequest) -> Optional[GeneratedComponent]:
        if not self.magic_client.configured:
            logger.debug("Remote generation service not configured, skipping")
            return None

        response = await self.magic_client.generate(request)
        if response is None:
            return None

        extra = response.metadata or {}
        return GeneratedComponent(
            code=response.code,
            name=response.name,
            explanation=response.explanation,
            metadata=GenerationMetadata(
                source=response.source or REMOTE_SOURCE,
                search_query=request.search_query,
                component_type=extra.get("componentType"),
                quality=extra.get("quality"),
            ),
        )

    def _generate_basic(self, request: GenerationRequest) -> GeneratedComponent:
        name = generate_component_name(request.prompt)
        return GeneratedComponent(
            code=self.basic_generator.generate(name, request.prompt),
            name=name,
            explanation="Basic component template",
            metadata=GenerationMetadata(
                source=FALLBACK_SOURCE,
                search_query=request.search_query,
                note="Generated without a template match or remote service",
            ),
        )

    async def _record(self, component: GeneratedComponent, request: GenerationRequest) -> None:
        metadata: Dict[str, Any] = {
            "type": component.name.lower(),
            "category": categorize_component(request.prompt),
        }
        if component.metadata.context_aware:
            metadata["customizations"] = {
                "contextAware": True,
                "frameworkUsage": component.metadata.framework_usage,
                "compatibilityScore": component.metadata.compatibility_score,
            }

        try:
            entry = await self.history.add(component.code, request.prompt, metadata)
            component.metadata.history_id = entry.id
        except Exception as e:
            logger.error(f"Failed to record '{component.name}' in history: {e}", exc_info=True)

    # --- Variations and context ---

    async def generate_variations(
        self, request: GenerationRequest, count: int = 3, on_progress: Optional[ProgressCallback] = None
    ) -> VariationsResponse:
        self._emit(on_progress, "generating", f"Generating {count} component variations...")

        try:
            variations = await self.magic_client.generate_variations(request, count)
        except Exception as e:
            logger.error(f"Variations request failed: {e}", exc_info=True)
            variations = None

        if variations is not None:
            self._emit(on_progress, "complete", f"Generated {variations.total} variations")
            return variations

        self._emit(on_progress, "error", "Variations unavailable, falling back to a single component")
        component = await self.generate(request, on_progress)
        now = datetime.now().isoformat()
        return VariationsResponse(
            variations=[
                ComponentVariation(
                    id=1,
                    code=component.code,
                    name=component.name,
                    explanation=component.explanation or "Single component fallback",
                    metadata=component.metadata.to_wire(),
                    variation_index=0,
                    generated_at=now,
                    note="Fallback to single component due to variations API error",
                )
            ],
            total=1,
            prompt=request.prompt,
            generated_at=now,
        )

    async def get_context(self, project_path: Optional[str] = None) -> ContextInsights:
        return await self.analyzer.get_or_analyze(project_path)

    async def refresh_context(self, project_path: Optional[str] = None) -> ContextInsights:
        logger.info("Refreshing project context analysis")
        self.analyzer.clear_cache()
        return await self.analyzer.analyze(project_path)

    async def get_context_suggestions(self, prompt: str, project_path: Optional[str] = None) -> ContextSuggestions:
        insights = await self.analyzer.get_or_analyze(project_path)
        return self.analyzer.generate_contextual_suggestions(prompt, insights)

    async def get_status(self) -> ServiceStatus:
        return ServiceStatus(
            remote_configured=self.magic_client.configured,
            remote_reachable=await self.magic_client.probe(),
            context_cached=self.analyzer.cached_insights is not None,
            template_count=len(self.templates.templates),
        )
