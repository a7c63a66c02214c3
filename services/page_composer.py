"""
Page composer for ComponentCraft: assembles generated components into pages
"""
from typing import Optional, List, Dict, Callable
import logging
import re

from config.page_templates import PAGE_TEMPLATES, SECTION_PREVIEW_TEMPLATES
from models.component import GeneratedComponent, GenerationRequest
from models.page import (
    ComponentSpec,
    GeneratedPage,
    GeneratedSection,
    LayoutSpec,
    PageCustomizations,
    PageMetadata,
    PageSection,
    PageTemplate,
    SectionOverride,
    ThemeSpec,
)
from services.code_utils import extract_component_name, to_identifier
from services.generation_service import GenerationService

logger = logging.getLogger(__name__)

PageProgressCallback = Callable[[str, float], None]

CSS_LENGTH = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*(rem|px)?\s*$")
EXPORT_DEFAULT = re.compile(r"^\s*export\s+default\s+\w+\s*;?\s*$", re.MULTILINE)


class TemplateNotFoundError(ValueError):
    pass


class UnknownSectionTypeError(ValueError):
    pass


def spacing_scale(value: str) -> str:
    """Tailwind spacing step for a CSS length: '1rem' -> '4', '8px' -> '2'."""
    match = CSS_LENGTH.match(value)
    if not match:
        return f"[{'_'.join(value.split())}]"
    number, unit = float(match.group(1)), match.group(2)
    if unit == "rem":
        number *= 4
    elif unit == "px":
        number /= 4
    return str(int(number)) if number.is_integer() else str(number)


def padding_classes(value: str) -> str:
    """
    Tailwind padding classes for a CSS padding shorthand.

    '2rem' -> 'p-8', '4rem 2rem' -> 'py-16 px-8', and four values map to
    pt/pr/pb/pl. Three-value shorthands expand as top, horizontal, bottom.
    """
    parts = value.split()
    if len(parts) == 2:
        vertical, horizontal = parts
        return f"py-{spacing_scale(vertical)} px-{spacing_scale(horizontal)}"
    if len(parts) == 3:
        top, horizontal, bottom = parts
        return f"pt-{spacing_scale(top)} px-{spacing_scale(horizontal)} pb-{spacing_scale(bottom)}"
    if len(parts) == 4:
        return " ".join(f"{side}-{spacing_scale(part)}" for side, part in zip(("pt", "pr", "pb", "pl"), parts))
    return f"p-{spacing_scale(value)}"


class PageComposer:
    """
    Turns a page template into generated code. Sections and their components
    are generated strictly one after another so progress is reported in order.
    """

    def __init__(self, generation_service: GenerationService):
        self.generation_service = generation_service
        self._templates: Dict[str, PageTemplate] = {
            template_id: PageTemplate.model_validate(data) for template_id, data in PAGE_TEMPLATES.items()
        }

    def get_templates(self) -> List[PageTemplate]:
        return list(self._templates.values())

    def get_template(self, template_id: str) -> Optional[PageTemplate]:
        return self._templates.get(template_id)

    def create_custom_template(self, template: PageTemplate) -> PageTemplate:
        """Add or replace a template in this composer's catalogue."""
        self._log_overlaps(template.sections)
        self._templates[template.id] = template
        logger.info(f"Custom template '{template.name}' created")
        return template

    @staticmethod
    def _log_overlaps(sections: List[PageSection]) -> None:
        for section in sections:
            for first, second in section.overlapping_components():
                logger.warning(f"Components '{first}' and '{second}' overlap in section '{section.id}'")

    @staticmethod
    def _report(on_progress: Optional[PageProgressCallback], message: str, percent: float) -> None:
        if on_progress is None:
            return
        try:
            on_progress(message, percent)
        except Exception as e:
            logger.warning(f"Page progress callback raised, ignoring: {e}")

    async def generate_page(
        self,
        template_id: str,
        customizations: Optional[PageCustomizations] = None,
        on_progress: Optional[PageProgressCallback] = None,
    ) -> GeneratedPage:
        template = self._templates.get(template_id)
        if template is None:
            raise TemplateNotFoundError(f"Template '{template_id}' not found")

        customizations = customizations or PageCustomizations()
        theme = customizations.theme
        self._report(on_progress, f"Starting page generation: {template.name}", 0)

        insights = await self.generation_service.get_context()

        sections: List[GeneratedSection] = []
        total = len(template.sections)
        for index, section in enumerate(template.sections):
            self._report(on_progress, f"Generating {section.name}...", index / total * 90)
            override = customizations.section_overrides.get(section.id)
            sections.append(await self._generate_section(section, theme, override))

        self._report(on_progress, "Combining page components...", 90)
        full_page_code = self._combine_page(sections, template, theme)
        self._report(on_progress, "Page generation complete!", 100)

        logger.info(f"Generated page '{template.name}' with {len(sections)} sections")
        return GeneratedPage(
            sections=sections,
            full_page_code=full_page_code,
            metadata=PageMetadata(
                template=template_id,
                component_count=sum(len(section.components) for section in sections),
                context_score=insights.recommendations.compatibility_score,
                applied_theme=theme.style if theme else None,
            ),
        )

    async def generate_section_preview(self, section_type: str, theme: Optional[ThemeSpec] = None) -> GeneratedSection:
        data = SECTION_PREVIEW_TEMPLATES.get(section_type)
        if data is None:
            raise UnknownSectionTypeError(f"Unknown section type: {section_type}")
        return await self._generate_section(PageSection.model_validate(data), theme)

    # --- Sections ---

    async def _generate_section(
        self,
        section: PageSection,
        theme: Optional[ThemeSpec] = None,
        override: Optional[SectionOverride] = None,
    ) -> GeneratedSection:
        if override is not None:
            updates = {
                field: getattr(override, field)
                for field in SectionOverride.model_fields
                if getattr(override, field) is not None
            }
            section = section.model_copy(update=updates)

        self._log_overlaps([section])
        theme = theme or section.theme

        components = []
        for spec in section.components:
            components.append(await self._generate_component(spec, theme))

        layout_code = self.generate_layout_code(section.layout, section)
        return GeneratedSection(
            section_id=section.id,
            name=section.name,
            components=components,
            layout_code=layout_code,
            combined_code=self._combine_section(components, layout_code, section),
        )

    async def _generate_component(self, spec: ComponentSpec, theme: Optional[ThemeSpec]) -> GeneratedComponent:
        prompt = self.apply_theme_to_prompt(spec.prompt, theme) if theme else spec.prompt
        component = await self.generation_service.generate(GenerationRequest(prompt=prompt, search_query=spec.type))
        component.metadata.component_type = spec.type
        return component

    @staticmethod
    def apply_theme_to_prompt(prompt: str, theme: ThemeSpec) -> str:
        themed = prompt
        if theme.style:
            themed = f"{themed} with {theme.style} style"
        if theme.primary_color:
            themed += f" using {theme.primary_color} as primary color"
        if theme.secondary_color:
            themed += f" and {theme.secondary_color} as secondary color"
        return themed

    @staticmethod
    def generate_layout_code(layout: LayoutSpec, section: PageSection) -> str:
        name = f"{to_identifier(section.id, capitalize=True)}Layout"
        gap = spacing_scale(layout.gap)
        padding = padding_classes(layout.padding)

        if layout.type == "grid":
            class_name = f"grid grid-cols-{layout.columns} gap-{gap} {padding}"
        elif layout.type == "flex":
            class_name = f"flex flex-col gap-{gap} {padding}"
        else:
            class_name = f"relative {padding}"

        return f"""const {name} = ({{ children }}) => {{
  return (
    <div className="{class_name}" id="{section.id}">
      {{children}}
    </div>
  );
}};"""

    @staticmethod
    def _component_tag(component: GeneratedComponent) -> str:
        return extract_component_name(component.code) or to_identifier(component.name, capitalize=True)

    def _combine_section(self, components: List[GeneratedComponent], layout_code: str, section: PageSection) -> str:
        identifier = to_identifier(section.id, capitalize=True)

        definitions = {}
        for component in components:
            definitions.setdefault(self._component_tag(component), EXPORT_DEFAULT.sub("", component.code).strip())

        usage = "\n".join(f"      <{self._component_tag(component)} />" for component in components)
        component_code = "\n\n".join(definitions.values())

        return f"""// Section: {section.name}
{component_code}

{layout_code}

const {identifier}Section = () => {{
  return (
    <{identifier}Layout>
{usage}
    </{identifier}Layout>
  );
}};

export default {identifier}Section;"""

    @staticmethod
    def _combine_page(sections: List[GeneratedSection], template: PageTemplate, theme: Optional[ThemeSpec]) -> str:
        imports = "\n".join(
            f"import {to_identifier(section.section_id, capitalize=True)}Section from './{section.section_id}';"
            for section in sections
        )
        usage = "\n".join(
            f"      <{to_identifier(section.section_id, capitalize=True)}Section />" for section in sections
        )
        page_name = f"{to_identifier(template.name, capitalize=True)}Page"
        theme_class = f" theme-{theme.style}" if theme and theme.style else ""

        return f"""import React from 'react';
{imports}

const {page_name} = () => {{
  return (
    <div className="min-h-screen{theme_class}">
{usage}
    </div>
  );
}};

export default {page_name};"""
