"""
Small text helpers shared by the generation, history and composition services
"""
import re
from typing import List, Optional

NAME_PATTERNS = [
    re.compile(r"(?:const|let|var)\s+(\w+)\s*="),
    re.compile(r"function\s+(\w+)\s*\("),
    re.compile(r"class\s+(\w+)\s+extends"),
]

PROMPT_TAG_KEYWORDS = ["gradient", "animated", "responsive", "dark", "light", "modern", "minimal"]

CATEGORY_RULES = [
    ("buttons", ["button", "cta"]),
    ("forms", ["form", "input"]),
    ("cards", ["card", "pricing"]),
    ("navigation", ["nav", "menu"]),
    ("heroes", ["hero", "header"]),
    ("modals", ["modal", "dialog"]),
    ("dashboards", ["dashboard", "chart"]),
    ("pages", ["landing", "page"]),
]

TYPE_RULES = [
    ("button", "button"),
    ("form", "form"),
    ("card", "card"),
    ("nav", "navigation"),
    ("hero", "hero"),
    ("modal", "modal"),
    ("table", "table"),
    ("list", "list"),
]


def extract_component_name(code: str) -> Optional[str]:
    """First declared identifier in the code, if any."""
    for pattern in NAME_PATTERNS:
        match = pattern.search(code)
        if match:
            return match.group(1)
    return None


def generate_component_name(message: str) -> str:
    """PascalCase component name derived from a free-text description."""
    cleaned = re.sub(r"[^a-zA-Z0-9\s]", "", message)
    words = [word for word in cleaned.split() if word]
    if not words:
        return "CustomComponent"

    name = "".join(word[0].upper() + word[1:].lower() for word in words)
    if not re.match(r"^[A-Z]", name):
        return "Custom" + name
    return name


def to_identifier(value: str, capitalize: bool = False) -> str:
    """camelCase (or PascalCase) identifier from an id like 'hero-preview' or a name like 'Glow Button'."""
    parts = [part for part in re.split(r"[^a-zA-Z0-9]+", value) if part]
    if not parts:
        return "Component" if capitalize else "component"
    head = parts[0]
    head = head[0].upper() + head[1:] if capitalize else head[0].lower() + head[1:]
    identifier = head + "".join(part[0].upper() + part[1:] for part in parts[1:])
    if identifier[0].isdigit():
        identifier = ("S" if capitalize else "s") + identifier
    return identifier


def detect_component_type(code: str) -> str:
    lowered = code.lower()
    for needle, component_type in TYPE_RULES:
        if needle in lowered:
            return component_type
    return "component"


def categorize_component(prompt: str) -> str:
    lowered = prompt.lower()
    for category, needles in CATEGORY_RULES:
        if any(needle in lowered for needle in needles):
            return category
    return "general"


def generate_tags(prompt: str, code: str) -> List[str]:
    tags = []
    prompt_words = prompt.lower().split()
    for keyword in PROMPT_TAG_KEYWORDS:
        if keyword in prompt_words:
            tags.append(keyword)

    if "useState" in code:
        tags.append("stateful")
    if "useEffect" in code:
        tags.append("effects")
    if "async" in code or "await" in code:
        tags.append("async")
    if "tailwindcss" in code or "className" in code:
        tags.append("tailwind")
    if "styled-components" in code:
        tags.append("styled-components")
    if "framer-motion" in code:
        tags.append("animated")
    if "@media" in code or "responsive" in code:
        tags.append("responsive")

    return list(dict.fromkeys(tags))


def normalize_code(code: str) -> str:
    """Whitespace-free, lower-cased form used for similarity checks."""
    return re.sub(r"\s+", "", code).lower()
