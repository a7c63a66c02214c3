"""
Design token vocabularies used by the context analyzer and the enhancer.
"""

from typing import Dict, List

# Tailwind hues recognised in utility classes
COLOR_HUES: List[str] = [
    "slate", "gray", "zinc", "neutral", "stone",
    "red", "orange", "amber", "yellow", "lime", "green", "emerald",
    "teal", "cyan", "sky", "blue", "indigo", "violet", "purple",
    "fuchsia", "pink", "rose",
]

# hue -> family; tokens in the same family are interchangeable for the enhancer
HUE_FAMILIES: Dict[str, str] = {
    "slate": "neutral", "gray": "neutral", "zinc": "neutral", "neutral": "neutral", "stone": "neutral",
    "red": "red", "rose": "red",
    "orange": "orange", "amber": "orange",
    "yellow": "yellow",
    "lime": "green", "green": "green", "emerald": "green",
    "teal": "cyan", "cyan": "cyan",
    "sky": "blue", "blue": "blue", "indigo": "blue",
    "violet": "purple", "purple": "purple", "fuchsia": "purple",
    "pink": "pink",
}

COLOR_PREFIXES: List[str] = [
    "bg", "text", "border", "from", "via", "to", "ring", "shadow",
    "fill", "stroke", "outline", "divide", "placeholder", "accent", "decoration",
]

TYPOGRAPHY_PATTERN = r"(?:text-(?:xs|sm|base|lg|xl|[2-9]xl)|font-(?:thin|extralight|light|normal|medium|semibold|bold|extrabold|black|sans|serif|mono)|leading-(?:none|tight|snug|normal|relaxed|loose)|tracking-(?:tighter|tight|normal|wide|wider|widest))"
SPACING_PATTERN = r"(?:-?(?:p|m)[xytrbl]?-(?:\d+(?:\.\d+)?|px|auto)|space-[xy]-\d+(?:\.\d+)?|gap(?:-[xy])?-\d+(?:\.\d+)?)"
RADIUS_PATTERN = r"rounded(?:-[trbl]{1,2})?(?:-(?:none|sm|md|lg|xl|2xl|3xl|full))?"
SHADOW_PATTERN = r"(?:drop-)?shadow(?:-(?:sm|md|lg|xl|2xl|inner|none))?"

# Known import tokens for framework detection
FRAMEWORK_IMPORT_TOKENS: Dict[str, List[str]] = {
    "react": ["from 'react'", 'from "react"', "import React", "require('react')"],
    "typescript": [],
    "tailwindcss": ["@tailwind", "tailwindcss"],
    "styledComponents": ["styled-components", "@emotion/styled"],
}

# Used when scanning yields nothing for a category, and for the fallback insights
FALLBACK_DESIGN_SYSTEM: Dict[str, List[str]] = {
    "colorPalette": ["blue-500", "purple-500", "gray-900", "white"],
    "typography": ["text-base", "font-medium", "leading-normal"],
    "spacing": ["p-4", "px-6", "py-3", "gap-4"],
    "borderRadius": ["rounded-lg", "rounded-xl"],
    "shadows": ["shadow-lg", "shadow-xl"],
}

# Heuristic constants; not derived from the scanned files
COMPATIBILITY_SCORE = 0.85
FALLBACK_COMPATIBILITY_SCORE = 0.75

# Representative files looked at first, relative to the project source root
KEY_FILES: List[str] = [
    "App.tsx",
    "App.jsx",
    "index.css",
    "components/Editor.tsx",
    "components/Terminal.tsx",
    "components/layout/ThreePanelLayout.tsx",
    "tailwind.config.js",
]

SCANNED_EXTENSIONS: List[str] = [".tsx", ".jsx", ".ts", ".js", ".css", ".scss"]
