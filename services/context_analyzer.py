"""
Context analyzer for ComponentCraft: codebase introspection with a TTL cache
"""
import asyncio
import logging
import os
import re
import time
from collections import Counter
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from config.design_tokens import (
    COLOR_HUES,
    COLOR_PREFIXES,
    COMPATIBILITY_SCORE,
    FALLBACK_COMPATIBILITY_SCORE,
    FALLBACK_DESIGN_SYSTEM,
    FRAMEWORK_IMPORT_TOKENS,
    KEY_FILES,
    RADIUS_PATTERN,
    SCANNED_EXTENSIONS,
    SHADOW_PATTERN,
    SPACING_PATTERN,
    TYPOGRAPHY_PATTERN,
)
from config.settings import CONTEXT_CACHE_TTL, MAX_SCANNED_FILES, PROJECT_DIRECTORY
from models.component import ContextSuggestions
from models.context import (
    CommonPatterns,
    ContextInsights,
    DesignSystem,
    ExistingComponents,
    FileAnalysis,
    FrameworkUsage,
    Recommendations,
    StylingPattern,
)
from services.style_parser import extract_inline_styles

logger = logging.getLogger(__name__)

IGNORED_DIRECTORIES = {"node_modules", ".git", "dist", "build", ".next", "coverage", "__pycache__"}

IMPORT_PATTERN = re.compile(r"""import\s+(?:[\w*{}\s,]+\s+from\s+)?['"]([^'"]+)['"]|require\(\s*['"]([^'"]+)['"]\s*\)""")
EXPORT_PATTERN = re.compile(r"export\s+(?:default\s+)?(?:const|let|function|class)\s+(\w+)|export\s+default\s+(\w+)\s*;?\s*$", re.MULTILINE)
COMPONENT_PATTERN = re.compile(r"(?:const|let|function|class)\s+([A-Z]\w*)")
HOOK_PATTERN = re.compile(r"\b(use[A-Z]\w*)\s*\(")
PROPS_PATTERN = re.compile(r"=\s*\(\s*\{([^}]*)\}\s*(?::\s*\w+\s*)?\)\s*=>")
CLASS_STRING_PATTERN = re.compile(r"""\b(?:className|class)\s*=\s*(?:"([^"]*)"|'([^']*)'|\{\s*`([^`]*)`\s*\})""")
APPLY_PATTERN = re.compile(r"@apply\s+([^;]+);")
CSS_SELECTOR_PATTERN = re.compile(r"\.([a-zA-Z][\w-]*)\s*[{,:]")
TEMPLATE_SUBSTITUTION = re.compile(r"\$\{[^}]*\}")

COLOR_TOKEN_PATTERN = re.compile(
    r"^(?:%s)-(?:(%s)-(\d{2,3})|(white|black))(?:/\d+)?$" % ("|".join(COLOR_PREFIXES), "|".join(COLOR_HUES))
)

FALLBACK_PROP_PATTERNS = [
    "className?: string",
    "children?: React.ReactNode",
    "onClick?: () => void",
    "disabled?: boolean",
    "variant?: string",
    "size?: string",
]

COMPONENT_KINDS = {
    "buttons": "button",
    "cards": "card",
    "forms": "form",
    "layouts": "layout",
    "navigation": "nav",
}


def _language_for(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix in (".ts", ".tsx"):
        return "typescript"
    if suffix in (".css", ".scss"):
        return "css"
    if suffix == ".json":
        return "json"
    return "javascript"


def _unique(values: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(value for value in values if value))


def _utility(token: str) -> str:
    """Strip variant prefixes such as 'hover:' or 'md:' from a utility class."""
    return token.split(":")[-1]


class ContextAnalyzer:
    """
    Scans a project for framework usage, styling conventions, design tokens and
    component names. Results are cached for a time-to-live; file analyses are
    cached per path and modification time.
    """

    def __init__(
        self,
        project_directory: Optional[str] = None,
        cache_ttl: float = CONTEXT_CACHE_TTL,
        max_files: int = MAX_SCANNED_FILES,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.project_directory = project_directory or PROJECT_DIRECTORY
        self.cache_ttl = cache_ttl
        self.max_files = max_files
        self._clock = clock

        self._file_cache: Dict[str, Tuple[float, FileAnalysis]] = {}
        self._insights: Optional[ContextInsights] = None
        self._insights_path: Optional[str] = None
        self._analyzed_at: float = 0.0

    @property
    def cached_insights(self) -> Optional[ContextInsights]:
        return self._insights

    def is_fresh(self, project_path: Optional[str] = None) -> bool:
        if self._insights is None:
            return False
        if (project_path or self.project_directory) != self._insights_path:
            return False
        return (self._clock() - self._analyzed_at) < self.cache_ttl

    async def analyze(self, project_path: Optional[str] = None) -> ContextInsights:
        """
        Scan the project and rebuild insights. Never raises: a failed scan
        yields the fallback insights, which are not cached.
        """
        root = project_path or self.project_directory
        logger.info(f"Analyzing project context at {root}")

        try:
            analyses = await asyncio.to_thread(self._scan_project, Path(root))
            insights = self._extract_insights(analyses)
        except Exception as e:
            logger.warning(f"Context analysis failed for {root}, using fallback insights: {e}", exc_info=True)
            return self.fallback_insights()

        self._insights = insights
        self._insights_path = root
        self._analyzed_at = self._clock()
        logger.info(
            f"Context analysis complete: {len(analyses)} files, "
            f"styling '{insights.styling_approach}', compatibility {insights.recommendations.compatibility_score}"
        )
        return insights

    async def get_or_analyze(self, project_path: Optional[str] = None) -> ContextInsights:
        if self.is_fresh(project_path):
            logger.debug("Using cached project insights")
            return self._insights
        return await self.analyze(project_path)

    def clear_cache(self) -> None:
        self._file_cache.clear()
        self._insights = None
        self._insights_path = None
        self._analyzed_at = 0.0
        logger.info("Context analysis cache cleared")

    # --- Scanning ---

    def _source_root(self, root: Path) -> Path:
        if not root.is_dir():
            raise FileNotFoundError(f"Project directory not found: {root}")
        src = root / "src"
        return src if src.is_dir() else root

    def _candidate_files(self, source_root: Path) -> List[Path]:
        candidates: List[Path] = []
        seen = set()

        for relative in KEY_FILES:
            path = source_root / relative
            if path.is_file():
                candidates.append(path)
                seen.add(path)

        for dirpath, dirnames, filenames in os.walk(source_root):
            if len(candidates) >= self.max_files:
                break
            # Pruned in place so os.walk never descends into them
            dirnames[:] = sorted(name for name in dirnames if name not in IGNORED_DIRECTORIES)
            for filename in sorted(filenames):
                if len(candidates) >= self.max_files:
                    break
                path = Path(dirpath) / filename
                if path in seen or path.suffix.lower() not in SCANNED_EXTENSIONS:
                    continue
                candidates.append(path)
                seen.add(path)

        return candidates[: self.max_files]

    def _scan_project(self, root: Path) -> List[FileAnalysis]:
        source_root = self._source_root(root)
        analyses = []
        for path in self._candidate_files(source_root):
            try:
                analyses.append(self.analyze_file(path))
            except Exception as e:
                logger.warning(f"Skipping {path}: {e}")
        return analyses

    def analyze_file(self, path: Path) -> FileAnalysis:
        """Analyze one file, reusing the cached result while its mtime is unchanged."""
        key = str(path)
        mtime = path.stat().st_mtime
        cached = self._file_cache.get(key)
        if cached and cached[0] == mtime:
            return cached[1]

        text = path.read_text(encoding="utf-8")
        language = _language_for(path)
        is_markup = path.suffix.lower() in (".tsx", ".jsx")

        imports = _unique(first or second for first, second in IMPORT_PATTERN.findall(text))
        exports = _unique(first or second for first, second in EXPORT_PATTERN.findall(text))
        components = _unique(COMPONENT_PATTERN.findall(text)) if is_markup else []
        hooks = _unique(HOOK_PATTERN.findall(text))
        props = _unique(
            name.strip().split("=")[0].strip()
            for group in PROPS_PATTERN.findall(text)
            for name in group.split(",")
        )

        frameworks = [name for name, tokens in FRAMEWORK_IMPORT_TOKENS.items() if any(token in text for token in tokens)]
        if "react" in imports and "react" not in frameworks:
            frameworks.append("react")

        if language == "css":
            file_type = "style"
        elif "config" in path.name.lower():
            file_type = "config"
        elif components:
            file_type = "component"
        else:
            file_type = "utility"

        analysis = FileAnalysis(
            path=key,
            type=file_type,
            language=language,
            imports=imports,
            exports=exports,
            components=components,
            hooks=hooks,
            props=[prop for prop in props if prop and not prop.startswith("...")],
            frameworks=frameworks,
            styling=self._styling_patterns(text, language),
        )
        self._file_cache[key] = (mtime, analysis)
        return analysis

    def _styling_patterns(self, text: str, language: str) -> List[StylingPattern]:
        patterns = []

        class_tokens: List[str] = []
        for groups in CLASS_STRING_PATTERN.findall(text):
            raw = next((group for group in groups if group), "")
            class_tokens.extend(TEMPLATE_SUBSTITUTION.sub(" ", raw).split())
        for applied in APPLY_PATTERN.findall(text):
            class_tokens.extend(applied.split())
        if class_tokens:
            patterns.append(StylingPattern(type="tailwind", classes=_unique(class_tokens)))

        if language == "css":
            selectors = _unique(CSS_SELECTOR_PATTERN.findall(APPLY_PATTERN.sub("", text)))
            if selectors:
                patterns.append(StylingPattern(type="css", classes=selectors))

        if "styled." in text or "styled(" in text:
            patterns.append(StylingPattern(type="styled-components"))

        inline_styles, failures = extract_inline_styles(text)
        if failures:
            logger.debug(f"{failures} inline style objects could not be parsed")
        for style in inline_styles:
            patterns.append(StylingPattern(type="inline", inline=style))

        return patterns

    # --- Insight extraction ---

    def _extract_insights(self, analyses: List[FileAnalysis]) -> ContextInsights:
        framework_usage = FrameworkUsage(
            react=any("react" in a.frameworks for a in analyses),
            typescript=any(a.language == "typescript" for a in analyses),
            tailwindcss=any("tailwindcss" in a.frameworks or any(s.type == "tailwind" for s in a.styling) for a in analyses),
            styled_components=any("styledComponents" in a.frameworks or any(s.type == "styled-components" for s in a.styling) for a in analyses),
        )

        classes = [
            _utility(token)
            for a in analyses
            for style in a.styling
            if style.type in ("tailwind", "css")
            for token in style.classes
        ]

        design_system = DesignSystem(
            color_palette=self._extract_colors(classes) or list(FALLBACK_DESIGN_SYSTEM["colorPalette"]),
            typography=self._matching(classes, TYPOGRAPHY_PATTERN) or list(FALLBACK_DESIGN_SYSTEM["typography"]),
            spacing=self._matching(classes, SPACING_PATTERN) or list(FALLBACK_DESIGN_SYSTEM["spacing"]),
            border_radius=self._matching(classes, RADIUS_PATTERN) or list(FALLBACK_DESIGN_SYSTEM["borderRadius"]),
            shadows=self._matching(classes, SHADOW_PATTERN) or list(FALLBACK_DESIGN_SYSTEM["shadows"]),
        )

        common_patterns = CommonPatterns(
            component_structure=self._component_structure(analyses, framework_usage),
            prop_patterns=self._prop_patterns(analyses),
            styling_approach=self._styling_approach(analyses, framework_usage),
            state_management=self._state_management(analyses),
        )

        components = [name for a in analyses for name in a.components]
        existing = ExistingComponents(**{
            field: _unique(name for name in components if needle in name.lower())
            for field, needle in COMPONENT_KINDS.items()
        })

        return ContextInsights(
            framework_usage=framework_usage,
            common_patterns=common_patterns,
            design_system=design_system,
            existing_components=existing,
            recommendations=self._recommendations(framework_usage),
        )

    def _extract_colors(self, classes: List[str]) -> List[str]:
        colors = []
        for token in classes:
            match = COLOR_TOKEN_PATTERN.match(token)
            if match:
                hue, shade, plain = match.groups()
                colors.append(plain or f"{hue}-{shade}")
        return _unique(colors)

    def _matching(self, classes: List[str], pattern: str) -> List[str]:
        compiled = re.compile(pattern)
        return _unique(token for token in classes if compiled.fullmatch(token))

    def _component_structure(self, analyses: List[FileAnalysis], usage: FrameworkUsage) -> List[str]:
        patterns = []
        if usage.typescript and usage.react:
            patterns.append("React.FC with TypeScript interfaces")
            patterns.append("Functional components with hooks")
        elif usage.react:
            patterns.append("Functional components with hooks")
        if usage.tailwindcss:
            patterns.append("Tailwind CSS utility classes")
            patterns.append("Responsive design patterns")
        if any(a.props for a in analyses):
            patterns.append("Props destructuring")
            patterns.append("Default props with fallbacks")
        return patterns

    def _prop_patterns(self, analyses: List[FileAnalysis]) -> List[str]:
        counts = Counter(prop for a in analyses for prop in a.props)
        if not counts:
            return list(FALLBACK_PROP_PATTERNS)
        return [prop for prop, _ in counts.most_common(6)]

    def _styling_approach(self, analyses: List[FileAnalysis], usage: FrameworkUsage) -> str:
        has_css = any(s.type == "css" for a in analyses for s in a.styling)
        if usage.tailwindcss and has_css:
            return "Tailwind CSS with custom CSS for complex components"
        if usage.tailwindcss:
            return "Tailwind CSS utility-first"
        if usage.styled_components:
            return "styled-components"
        return "Custom CSS modules"

    def _state_management(self, analyses: List[FileAnalysis]) -> str:
        hooks = {hook for a in analyses for hook in a.hooks}
        if "useState" in hooks and "useEffect" in hooks:
            return "React hooks (useState, useEffect)"
        if "useState" in hooks:
            return "React useState hook"
        return "Stateless components"

    def _recommendations(self, usage: FrameworkUsage) -> Recommendations:
        best_matches = []
        if usage.react and usage.typescript:
            best_matches.append("TypeScript React functional components")
        if usage.tailwindcss:
            best_matches.append("Tailwind CSS utility classes")
            best_matches.append("Responsive design patterns")

        return Recommendations(
            best_matches=best_matches,
            suggested_patterns=[
                "Use consistent prop interfaces",
                "Follow existing color palette",
                "Maintain spacing consistency",
                "Include hover and focus states",
                "Add proper accessibility attributes",
            ],
            compatibility_score=COMPATIBILITY_SCORE,
        )

    @staticmethod
    def fallback_insights() -> ContextInsights:
        return ContextInsights(
            framework_usage=FrameworkUsage(react=True, typescript=True, tailwindcss=True, styled_components=False),
            common_patterns=CommonPatterns(
                component_structure=["React.FC with TypeScript", "Functional components"],
                prop_patterns=["className?: string", "children?: React.ReactNode"],
                styling_approach="Tailwind CSS utility-first",
                state_management="React hooks",
            ),
            design_system=DesignSystem(
                color_palette=list(FALLBACK_DESIGN_SYSTEM["colorPalette"]),
                typography=list(FALLBACK_DESIGN_SYSTEM["typography"]),
                spacing=list(FALLBACK_DESIGN_SYSTEM["spacing"]),
                border_radius=list(FALLBACK_DESIGN_SYSTEM["borderRadius"]),
                shadows=list(FALLBACK_DESIGN_SYSTEM["shadows"]),
            ),
            existing_components=ExistingComponents(
                buttons=["MagicButton"],
                cards=["PreviewCard"],
                forms=["LoginForm"],
                layouts=["ThreePanelLayout"],
                navigation=["TabNavigation"],
            ),
            recommendations=Recommendations(
                best_matches=["TypeScript React components", "Tailwind CSS styling"],
                suggested_patterns=["Consistent prop interfaces", "Responsive design"],
                compatibility_score=FALLBACK_COMPATIBILITY_SCORE,
            ),
        )

    def generate_contextual_suggestions(self, prompt: str, insights: ContextInsights) -> ContextSuggestions:
        suggestions = ContextSuggestions()
        design = insights.design_system

        if insights.framework_usage.tailwindcss:
            suggestions.styling.append("Use Tailwind utility classes")
            suggestions.styling.append(f"Colors: {', '.join(design.color_palette[:3])}")
            suggestions.styling.append(f"Spacing: {', '.join(design.spacing[:3])}")
        if "rounded" in prompt.lower() and design.border_radius:
            suggestions.styling.append(f"Radius: {design.border_radius[0]}")

        if insights.framework_usage.typescript:
            suggestions.patterns.append("Define TypeScript interface for props")
            suggestions.patterns.append("Use proper type annotations")
        if "hook" in insights.common_patterns.state_management.lower():
            suggestions.patterns.append("Use React hooks for state management")

        framework = "React + TypeScript" if insights.framework_usage.typescript else "React"
        suggestions.compatibility.append(f"Framework: {framework}")
        suggestions.compatibility.append(f"Styling: {insights.styling_approach}")
        suggestions.compatibility.append(f"State: {insights.common_patterns.state_management}")

        return suggestions
