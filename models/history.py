"""
History models for ComponentCraft: versioned entries, collections and exports.
"""
from pydantic import Field, TypeAdapter, field_validator
from typing import Annotated, Optional, List, Dict, Any, Literal, Union
from datetime import datetime

from models.base import CamelModel


class BaseEntryMetadata(CamelModel):
    type: str = "component"
    framework: str = "react"
    tags: List[str] = Field(default_factory=list)
    accessibility_score: Optional[float] = None
    performance_score: Optional[float] = None
    optimized: Optional[bool] = None
    customizations: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("tags")
    @classmethod
    def dedupe_tags(cls, value: List[str]) -> List[str]:
        return list(dict.fromkeys(value))


class ButtonEntryMetadata(BaseEntryMetadata):
    category: Literal["buttons"] = "buttons"
    effects: List[str] = Field(default_factory=list)


class FormEntryMetadata(BaseEntryMetadata):
    category: Literal["forms"] = "forms"
    input_fields: List[str] = Field(default_factory=list)


class CardEntryMetadata(BaseEntryMetadata):
    category: Literal["cards"] = "cards"
    tiers: List[str] = Field(default_factory=list)


class NavigationEntryMetadata(BaseEntryMetadata):
    category: Literal["navigation"] = "navigation"


class HeroEntryMetadata(BaseEntryMetadata):
    category: Literal["heroes"] = "heroes"


class ModalEntryMetadata(BaseEntryMetadata):
    category: Literal["modals"] = "modals"


class DashboardEntryMetadata(BaseEntryMetadata):
    category: Literal["dashboards"] = "dashboards"


class PageEntryMetadata(BaseEntryMetadata):
    category: Literal["pages"] = "pages"
    sections: List[str] = Field(default_factory=list)


class GeneralEntryMetadata(BaseEntryMetadata):
    category: Literal["general"] = "general"


EntryMetadata = Annotated[
    Union[
        ButtonEntryMetadata,
        FormEntryMetadata,
        CardEntryMetadata,
        NavigationEntryMetadata,
        HeroEntryMetadata,
        ModalEntryMetadata,
        DashboardEntryMetadata,
        PageEntryMetadata,
        GeneralEntryMetadata,
    ],
    Field(discriminator="category"),
]

entry_metadata_adapter = TypeAdapter(EntryMetadata)


class EntryStats(CamelModel):
    usage_count: int = Field(default=0, ge=0)
    last_used: Optional[datetime] = None
    rating: Optional[int] = Field(default=None, ge=1, le=5)
    favorite: bool = False


class HistoryEntry(CamelModel):
    """One persisted, versioned record of a generated component."""
    id: str
    name: str
    code: str
    prompt: str
    timestamp: datetime
    version: int = Field(default=1, ge=1)
    metadata: EntryMetadata
    stats: EntryStats = Field(default_factory=EntryStats)


class Collection(CamelModel):
    id: str
    name: str
    description: str = ""
    components: List[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime
    tags: List[str] = Field(default_factory=list)
    is_public: bool = False


class CollectionCreate(CamelModel):
    name: str = Field(..., min_length=1)
    description: str = ""
    component_ids: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    is_public: bool = False


class ExportDocument(CamelModel):
    """Self-contained export of one entry; importing it re-runs the add path."""
    name: str
    code: str
    prompt: str
    metadata: EntryMetadata
    exported_at: str


class TagCount(CamelModel):
    tag: str
    count: int


class HistoryStatistics(CamelModel):
    total_components: int = 0
    total_collections: int = 0
    favorite_count: int = 0
    average_rating: float = 0
    most_used_component: Optional[HistoryEntry] = None
    categories_breakdown: Dict[str, int] = Field(default_factory=dict)
    popular_tags: List[TagCount] = Field(default_factory=list)


class RatingRequest(CamelModel):
    rating: int = Field(..., ge=1, le=5)
