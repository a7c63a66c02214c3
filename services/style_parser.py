"""
Structured parser for inline JSX style objects.

Reads literals such as ``{ background: 'linear-gradient(...)', padding: 12 }``
without evaluating anything. Grammar:

    object  → "{" (member ("," member)* ","?)? "}"
    member  → key ":" value | "..." expr
    key     → IDENT | STRING | NUMBER
    value   → STRING | NUMBER | "true" | "false" | "null" | object | array | expr
    array   → "[" (value ("," value)* ","?)? "]"

Anything that is not a literal (``variantStyles[variant]``, template strings
with substitutions, arrow functions) is kept as its raw source text.
"""
import re
from typing import Any, Dict, List, Tuple

STYLE_ATTRIBUTE_PATTERN = re.compile(r"style\s*=\s*\{\s*(?=\{)")
IDENT_PATTERN = re.compile(r"[A-Za-z_$][\w$-]*")
NUMBER_PATTERN = re.compile(r"-?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
CLOSERS = {"{": "}", "[": "]", "(": ")"}


class StyleParseError(ValueError):
    """Raised when a style object literal is malformed."""

    def __init__(self, message: str, pos: int = 0):
        super().__init__(f"{message} at offset {pos}")
        self.pos = pos


class _StyleParser:
    def __init__(self, source: str, pos: int = 0):
        self.source = source
        self.pos = pos

    def skip_whitespace(self) -> None:
        while self.pos < len(self.source):
            if self.source[self.pos].isspace():
                self.pos += 1
            elif self.source.startswith("//", self.pos):
                end = self.source.find("\n", self.pos)
                self.pos = len(self.source) if end == -1 else end + 1
            elif self.source.startswith("/*", self.pos):
                end = self.source.find("*/", self.pos + 2)
                if end == -1:
                    raise StyleParseError("Unterminated comment", self.pos)
                self.pos = end + 2
            else:
                break

    @property
    def current(self) -> str:
        return self.source[self.pos] if self.pos < len(self.source) else ""

    def expect(self, char: str) -> None:
        self.skip_whitespace()
        if self.current != char:
            raise StyleParseError(f"Expected {char!r}, got {self.current or 'end of input'!r}", self.pos)
        self.pos += 1

    # -- Grammar rules --

    def parse_object(self) -> Dict[str, Any]:
        self.expect("{")
        result: Dict[str, Any] = {}
        while True:
            self.skip_whitespace()
            if self.current == "}":
                self.pos += 1
                return result
            if self.source.startswith("...", self.pos):
                self.pos += 3
                spread = self.parse_expression()
                result[f"...{spread}"] = spread
            else:
                key = self.parse_key()
                self.expect(":")
                result[key] = self.parse_value()
            self.skip_whitespace()
            if self.current == ",":
                self.pos += 1
            elif self.current != "}":
                raise StyleParseError(f"Expected ',' or '}}', got {self.current or 'end of input'!r}", self.pos)

    def parse_array(self) -> List[Any]:
        self.expect("[")
        items: List[Any] = []
        while True:
            self.skip_whitespace()
            if self.current == "]":
                self.pos += 1
                return items
            items.append(self.parse_value())
            self.skip_whitespace()
            if self.current == ",":
                self.pos += 1
            elif self.current != "]":
                raise StyleParseError(f"Expected ',' or ']', got {self.current or 'end of input'!r}", self.pos)

    def parse_key(self) -> str:
        self.skip_whitespace()
        if self.current in ("'", '"'):
            return self.parse_string()
        if self.current == "[":
            raise StyleParseError("Computed keys are not supported", self.pos)
        match = IDENT_PATTERN.match(self.source, self.pos) or NUMBER_PATTERN.match(self.source, self.pos)
        if not match:
            raise StyleParseError(f"Invalid key starting with {self.current or 'end of input'!r}", self.pos)
        self.pos = match.end()
        return match.group(0)

    def parse_string(self) -> str:
        quote = self.current
        start = self.pos
        self.pos += 1
        chars = []
        while self.pos < len(self.source):
            char = self.source[self.pos]
            if char == "\\" and self.pos + 1 < len(self.source):
                chars.append(self.source[self.pos + 1])
                self.pos += 2
                continue
            if char == quote:
                self.pos += 1
                return "".join(chars)
            chars.append(char)
            self.pos += 1
        raise StyleParseError("Unterminated string", start)

    def parse_value(self) -> Any:
        self.skip_whitespace()
        start = self.pos
        char = self.current

        if char == "{":
            return self.parse_object()
        if char == "[":
            return self.parse_array()
        if char in ("'", '"'):
            value = self.parse_string()
            return value if self.at_value_end() else self.raw_from(start)
        if char == "`":
            literal_end = self.source.find("`", self.pos + 1)
            if literal_end != -1 and "${" not in self.source[self.pos:literal_end]:
                self.pos = literal_end + 1
                if self.at_value_end():
                    return self.source[start + 1:literal_end]
            self.pos = start
            return self.parse_expression()

        number = NUMBER_PATTERN.match(self.source, self.pos)
        if number:
            self.pos = number.end()
            if self.at_value_end():
                text = number.group(0)
                return float(text) if any(c in text for c in ".eE") else int(text)
            self.pos = start
            return self.parse_expression()

        for word, value in (("true", True), ("false", False), ("null", None)):
            if self.source.startswith(word, self.pos):
                self.pos += len(word)
                if self.at_value_end():
                    return value
                self.pos = start
                break

        return self.parse_expression()

    def at_value_end(self) -> bool:
        self.skip_whitespace()
        return self.current in (",", "}", "]")

    def raw_from(self, start: int) -> str:
        self.pos = start
        return self.parse_expression()

    def parse_expression(self) -> str:
        """Consume an opaque expression up to the next ',' or closer at depth zero."""
        self.skip_whitespace()
        start = self.pos
        stack: List[str] = []
        while self.pos < len(self.source):
            char = self.source[self.pos]
            if char in ("'", '"'):
                self.parse_string()
                continue
            if char == "`":
                end = self.source.find("`", self.pos + 1)
                if end == -1:
                    raise StyleParseError("Unterminated template literal", self.pos)
                self.pos = end + 1
                continue
            if char in CLOSERS:
                stack.append(CLOSERS[char])
            elif char in ("}", "]", ")"):
                if not stack:
                    break
                if stack.pop() != char:
                    raise StyleParseError(f"Unbalanced {char!r}", self.pos)
            elif char == "," and not stack:
                break
            self.pos += 1

        if stack:
            raise StyleParseError("Unbalanced expression", start)
        expression = self.source[start:self.pos].strip()
        if not expression:
            raise StyleParseError("Missing value", start)
        return expression


def parse_style_object(source: str) -> Dict[str, Any]:
    """Parse one object literal; raises StyleParseError on malformed input."""
    parser = _StyleParser(source)
    result = parser.parse_object()
    parser.skip_whitespace()
    if parser.pos != len(source):
        raise StyleParseError("Unexpected trailing input", parser.pos)
    return result


def extract_inline_styles(code: str) -> Tuple[List[Dict[str, Any]], int]:
    """
    Find every ``style={{...}}`` attribute in a source file and parse it.

    Returns the parsed objects and the number of attributes that could not be
    parsed; a malformed attribute never stops the scan.
    """
    styles: List[Dict[str, Any]] = []
    failures = 0
    for match in STYLE_ATTRIBUTE_PATTERN.finditer(code):
        parser = _StyleParser(code, match.end())
        try:
            styles.append(parser.parse_object())
        except StyleParseError:
            failures += 1
    return styles, failures
