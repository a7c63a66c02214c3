"""
Context enhancer for ComponentCraft

Rewrites literal style tokens in template code so they follow the project's
design system. Substitution is purely textual: a token inside a comment or a
string is rewritten exactly like one inside a class attribute.
"""
import logging
import re
from typing import Optional

from config.design_tokens import COLOR_HUES, HUE_FAMILIES
from models.context import ContextInsights

logger = logging.getLogger(__name__)

COLOR_LITERAL = re.compile(r"\b(%s)-(\d{2,3})\b" % "|".join(sorted(COLOR_HUES, key=len, reverse=True)))
RADIUS_LITERAL = re.compile(r"(?<![\w-])rounded(?:-(sm|md|lg|xl|2xl|3xl|full|none))?(?![\w-])")
PROMPT_WORD = re.compile(r"[a-z]+")


def _hue_of(token: str) -> Optional[str]:
    hue = token.rsplit("-", 1)[0]
    return hue if hue in HUE_FAMILIES else None


class ContextEnhancer:
    def enhance(self, code: str, insights: ContextInsights, prompt: str = "") -> str:
        """Return `code` with color and radius literals aligned to `insights`."""
        design = insights.design_system
        requested_hues = set(PROMPT_WORD.findall(prompt.lower())) & set(COLOR_HUES)

        palette_by_family = {}
        for token in design.color_palette:
            hue = _hue_of(token)
            if hue:
                palette_by_family.setdefault(HUE_FAMILIES[hue], token)

        graded_radius = next(
            (token for token in design.border_radius
             if RADIUS_LITERAL.fullmatch(token) and not token.endswith(("-full", "-none"))),
            None,
        )

        replacements = {"colors": 0, "radius": 0}

        def replace_color(match: re.Match) -> str:
            hue = match.group(1)
            if hue in requested_hues:
                return match.group(0)
            target = palette_by_family.get(HUE_FAMILIES[hue])
            if target and target != match.group(0):
                replacements["colors"] += 1
                return target
            return match.group(0)

        def replace_radius(match: re.Match) -> str:
            if match.group(1) in ("full", "none") or not graded_radius:
                return match.group(0)
            if graded_radius != match.group(0):
                replacements["radius"] += 1
                return graded_radius
            return match.group(0)

        enhanced = COLOR_LITERAL.sub(replace_color, code)
        enhanced = RADIUS_LITERAL.sub(replace_radius, enhanced)

        logger.debug(f"Enhancer rewrote {replacements['colors']} color and {replacements['radius']} radius tokens")
        return enhanced
