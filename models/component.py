"""
Component generation models for ComponentCraft
"""
from pydantic import ConfigDict, Field
from typing import Optional, List, Dict, Any, FrozenSet, Literal
from datetime import datetime

from models.base import CamelModel


class ComponentTemplate(CamelModel):
    """A named, keyword-tagged static code snippet from the template library."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    keywords: FrozenSet[str]
    code: str


class GenerationRequest(CamelModel):
    prompt: str = Field(..., min_length=1, description="Natural-language description of the component")
    search_query: Optional[str] = Field(default=None, description="Optional search hint, e.g. a component type")
    current_file_path: Optional[str] = Field(default=None, description="File the component is destined for")
    project_directory: Optional[str] = Field(default=None, description="Project root to introspect")


class GenerationMetadata(CamelModel):
    """
    Provenance and context details for one generation. `source` tells
    consumers which stage produced the code.
    """
    model_config = ConfigDict(extra="allow")

    source: str
    timestamp: str = Field(default_factory=lambda: datetime.now().isoformat())
    search_query: Optional[str] = None
    component_type: Optional[str] = None
    quality: Optional[str] = None
    context_aware: Optional[bool] = None
    compatibility_score: Optional[float] = None
    framework_usage: Optional[Dict[str, bool]] = None
    styling_approach: Optional[str] = None
    applied_suggestions: Optional[Dict[str, List[str]]] = None
    history_id: Optional[str] = None
    note: Optional[str] = None


class GeneratedComponent(CamelModel):
    success: bool = True
    code: str
    name: str
    explanation: Optional[str] = None
    metadata: GenerationMetadata


class ProgressEvent(CamelModel):
    status: Literal["idle", "generating", "complete", "error"]
    message: Optional[str] = None


class RemoteGenerationResponse(CamelModel):
    """Expected body of the remote code-generation service."""
    code: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    explanation: Optional[str] = None
    source: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class ComponentVariation(CamelModel):
    id: int
    code: str
    name: str
    explanation: str = ""
    metadata: Optional[Dict[str, Any]] = None
    variation_index: int = 0
    generated_at: str = Field(default_factory=lambda: datetime.now().isoformat())
    note: Optional[str] = None


class VariationsResponse(CamelModel):
    success: bool = True
    variations: List[ComponentVariation]
    total: int
    prompt: str
    generated_at: str = Field(default_factory=lambda: datetime.now().isoformat())


class VariationsRequest(GenerationRequest):
    count: int = Field(default=3, ge=1, le=10)


class ContextSuggestions(CamelModel):
    styling: List[str] = Field(default_factory=list)
    patterns: List[str] = Field(default_factory=list)
    compatibility: List[str] = Field(default_factory=list)


class ServiceStatus(CamelModel):
    available: bool = True
    initialized: bool = True
    remote_configured: bool = False
    remote_reachable: bool = False
    context_cached: bool = False
    template_count: int = 0


class MagicGenerateRequest(CamelModel):
    """Body accepted by the Gemini-backed generation endpoint."""
    prompt: str = Field(..., min_length=1)
    search_query: Optional[str] = None
    current_file: Optional[str] = None


class MagicVariationsRequest(MagicGenerateRequest):
    count: int = Field(default=3, ge=1, le=10)
