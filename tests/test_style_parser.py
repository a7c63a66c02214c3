import pytest

from services.style_parser import StyleParseError, extract_inline_styles, parse_style_object


def test_parses_literals_without_evaluating():
    """Strings, numbers and keywords become Python values."""
    result = parse_style_object("{ color: 'red', padding: 12, opacity: 0.5, visible: true, filter: null }")
    assert result == {"color": "red", "padding": 12, "opacity": 0.5, "visible": True, "filter": None}


def test_nested_objects_arrays_and_quoted_keys():
    result = parse_style_object("""{
        "--accent": "#667eea",
        transform: { scale: 1.05 },
        margins: [4, 8, '1rem'],  // trailing comment
    }""")
    assert result == {"--accent": "#667eea", "transform": {"scale": 1.05}, "margins": [4, 8, "1rem"]}


def test_expressions_are_kept_as_source_text():
    """Non-literal values are returned verbatim rather than executed."""
    result = parse_style_object("{ background: variantStyles[variant], width: `${size}px`, ...base }")
    assert result["background"] == "variantStyles[variant]"
    assert result["width"] == "`${size}px`"
    assert result["...base"] == "base"


def test_malformed_object_raises():
    with pytest.raises(StyleParseError):
        parse_style_object("{ color: 'red' ")
    with pytest.raises(StyleParseError):
        parse_style_object("{ color: 'red' } extra")


def test_extract_inline_styles_counts_failures():
    """A broken attribute is counted and skipped; later attributes are still read."""
    code = """
    <div style={{ color: 'blue' }} />
    <div style={{ [dynamicKey]: 1 }} />
    <span style={{ fontWeight: 700 }} />
    """
    styles, failures = extract_inline_styles(code)
    assert styles == [{"color": "blue"}, {"fontWeight": 700}]
    assert failures == 1
