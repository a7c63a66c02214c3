"""
Project context models produced by the context analyzer.
"""
from pydantic import ConfigDict, Field
from typing import List, Literal

from models.base import CamelModel


class FrameworkUsage(CamelModel):
    model_config = ConfigDict(frozen=True)

    react: bool = False
    typescript: bool = False
    tailwindcss: bool = False
    styled_components: bool = False


class CommonPatterns(CamelModel):
    model_config = ConfigDict(frozen=True)

    component_structure: List[str] = Field(default_factory=list)
    prop_patterns: List[str] = Field(default_factory=list)
    styling_approach: str = "Custom CSS modules"
    state_management: str = "Stateless components"


class DesignSystem(CamelModel):
    model_config = ConfigDict(frozen=True)

    color_palette: List[str] = Field(default_factory=list)
    typography: List[str] = Field(default_factory=list)
    spacing: List[str] = Field(default_factory=list)
    border_radius: List[str] = Field(default_factory=list)
    shadows: List[str] = Field(default_factory=list)


class ExistingComponents(CamelModel):
    model_config = ConfigDict(frozen=True)

    buttons: List[str] = Field(default_factory=list)
    cards: List[str] = Field(default_factory=list)
    forms: List[str] = Field(default_factory=list)
    layouts: List[str] = Field(default_factory=list)
    navigation: List[str] = Field(default_factory=list)


class Recommendations(CamelModel):
    model_config = ConfigDict(frozen=True)

    best_matches: List[str] = Field(default_factory=list)
    suggested_patterns: List[str] = Field(default_factory=list)
    compatibility_score: float = Field(default=0.0, ge=0.0, le=1.0)


class ContextInsights(CamelModel):
    """Structured summary of a project's framework, styling and component conventions."""
    model_config = ConfigDict(frozen=True)

    framework_usage: FrameworkUsage
    common_patterns: CommonPatterns
    design_system: DesignSystem
    existing_components: ExistingComponents
    recommendations: Recommendations

    @property
    def styling_approach(self) -> str:
        return self.common_patterns.styling_approach


class StylingPattern(CamelModel):
    type: Literal["tailwind", "css", "styled-components", "inline"]
    classes: List[str] = Field(default_factory=list)
    inline: dict = Field(default_factory=dict)


class FileAnalysis(CamelModel):
    """What was learned from one scanned file."""
    path: str
    type: Literal["component", "style", "config", "utility"]
    language: Literal["typescript", "javascript", "css", "json"]
    imports: List[str] = Field(default_factory=list)
    exports: List[str] = Field(default_factory=list)
    components: List[str] = Field(default_factory=list)
    hooks: List[str] = Field(default_factory=list)
    props: List[str] = Field(default_factory=list)
    frameworks: List[str] = Field(default_factory=list)
    styling: List[StylingPattern] = Field(default_factory=list)
