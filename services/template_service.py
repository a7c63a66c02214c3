"""
Template service for ComponentCraft: the template library and keyword matcher
"""
from typing import Dict, List, Optional, Sequence
import logging

from config.component_templates import COMPONENT_TEMPLATES, PRIORITY_OVERRIDES, PRIORITY_BONUS
from models.component import ComponentTemplate

logger = logging.getLogger(__name__)


def load_component_templates() -> List[ComponentTemplate]:
    """Build the immutable catalogue from the static config, preserving declaration order."""
    return [
        ComponentTemplate(
            id=data["id"],
            name=data["name"],
            keywords=frozenset(keyword.lower() for keyword in data["keywords"]),
            code=data["code"],
        )
        for data in COMPONENT_TEMPLATES
    ]


class TemplateService:
    def __init__(
        self,
        templates: Optional[Sequence[ComponentTemplate]] = None,
        priority_overrides: Optional[Dict[str, str]] = None,
        priority_bonus: int = PRIORITY_BONUS,
    ):
        self._templates: List[ComponentTemplate] = list(templates) if templates is not None else load_component_templates()
        self._overrides = dict(PRIORITY_OVERRIDES if priority_overrides is None else priority_overrides)
        self._bonus = priority_bonus

    @property
    def templates(self) -> List[ComponentTemplate]:
        return list(self._templates)

    def get_template(self, template_id: str) -> Optional[ComponentTemplate]:
        for template in self._templates:
            if template.id == template_id:
                return template
        return None

    def score(self, prompt: str, template: ComponentTemplate) -> int:
        """
        Score one template against a prompt.

        A keyword found as a whole whitespace-separated token is worth 2, one that
        only occurs inside a longer word is worth 1. Keywords are scanned in sorted
        order so the score never depends on set ordering.
        """
        lowered = prompt.lower()
        tokens = set(lowered.split())
        score = 0

        for keyword in sorted(template.keywords):
            # Exclusive: a whole-token hit earns 2, never 2 plus the substring point
            if keyword in tokens:
                score += 2
            elif keyword in lowered:
                score += 1

        for keyword, template_id in self._overrides.items():
            if template_id == template.id and keyword in lowered:
                score += self._bonus

        return score

    def match(self, prompt: str) -> Optional[ComponentTemplate]:
        """
        Return the best scoring template, or None when nothing scores above zero.
        Ties keep the first template in catalogue order.
        """
        best_template = None
        best_score = 0

        for template in self._templates:
            score = self.score(prompt, template)
            if score > best_score:
                best_template = template
                best_score = score

        if best_template:
            logger.info(f"Matched template '{best_template.id}' (score {best_score}) for prompt: {prompt[:60]}")
        else:
            logger.debug(f"No template matched prompt: {prompt[:60]}")
        return best_template
