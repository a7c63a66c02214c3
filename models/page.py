"""
Page composition models for ComponentCraft
"""
from pydantic import Field
from typing import Optional, List, Dict, Any, Literal, Tuple
from datetime import datetime

from models.base import CamelModel
from models.component import GeneratedComponent


class Position(CamelModel):
    """Advisory placement on a 12-column grid. Overlaps are allowed."""
    row: int = Field(default=0, ge=0)
    column: int = Field(default=0, ge=0)
    width: int = Field(default=12, ge=1)
    height: int = Field(default=1, ge=1)

    def overlaps(self, other: "Position") -> bool:
        return (
            self.column < other.column + other.width
            and other.column < self.column + self.width
            and self.row < other.row + other.height
            and other.row < self.row + self.height
        )


class ComponentSpec(CamelModel):
    id: str
    type: str
    prompt: str
    position: Position = Field(default_factory=Position)
    props: Optional[Dict[str, Any]] = None
    dependencies: Optional[List[str]] = None


class LayoutSpec(CamelModel):
    type: Literal["grid", "flex", "absolute"]
    columns: int = Field(default=1, ge=1)
    rows: int = Field(default=1, ge=1)
    gap: str = "1rem"
    padding: str = "2rem"


class ThemeSpec(CamelModel):
    primary_color: Optional[str] = None
    secondary_color: Optional[str] = None
    style: Optional[Literal["modern", "minimal", "corporate", "creative"]] = None


class PageSection(CamelModel):
    id: str
    name: str
    description: str = ""
    components: List[ComponentSpec] = Field(default_factory=list)
    layout: LayoutSpec
    theme: Optional[ThemeSpec] = None

    def overlapping_components(self) -> List[Tuple[str, str]]:
        pairs = []
        for index, first in enumerate(self.components):
            for second in self.components[index + 1:]:
                if first.position.overlaps(second.position):
                    pairs.append((first.id, second.id))
        return pairs


class PageTemplate(CamelModel):
    id: str
    name: str
    description: str = ""
    sections: List[PageSection]
    category: Literal["landing", "dashboard", "ecommerce", "portfolio", "blog"]


class SectionOverride(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    components: Optional[List[ComponentSpec]] = None
    layout: Optional[LayoutSpec] = None
    theme: Optional[ThemeSpec] = None


class PageCustomizations(CamelModel):
    theme: Optional[ThemeSpec] = None
    section_overrides: Dict[str, SectionOverride] = Field(default_factory=dict)


class GeneratedSection(CamelModel):
    section_id: str
    name: str
    components: List[GeneratedComponent]
    layout_code: str
    combined_code: str


class PageMetadata(CamelModel):
    template: Optional[str] = None
    component_count: int
    generated_at: str = Field(default_factory=lambda: datetime.now().isoformat())
    context_score: Optional[float] = None
    applied_theme: Optional[str] = None


class GeneratedPage(CamelModel):
    success: bool = True
    sections: List[GeneratedSection]
    full_page_code: str
    metadata: PageMetadata


class PageGenerationRequest(CamelModel):
    template_id: str
    customizations: Optional[PageCustomizations] = None


class SectionPreviewRequest(CamelModel):
    theme: Optional[ThemeSpec] = None
