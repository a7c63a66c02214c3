import pytest

from models.component import ComponentTemplate
from services.template_service import TemplateService, load_component_templates


def _template(template_id, keywords):
    return ComponentTemplate(id=template_id, name=template_id.title(), keywords=frozenset(keywords), code="const X = () => null;")


@pytest.fixture
def template_service():
    """Provides a matcher over the built-in catalogue."""
    return TemplateService()


def test_catalogue_keeps_declaration_order():
    """The library is loaded in a fixed order so tie-breaking is reproducible."""
    ids = [template.id for template in load_component_templates()]
    assert ids == ["button-animated", "button-glow", "card-glass", "hero-gradient", "form-login", "navbar-modern"]


def test_glow_override_beats_shared_button_keyword(template_service):
    """'glow button' picks the glow template even though both buttons share 'button'."""
    match = template_service.match("glow button")
    assert match is not None
    assert match.id == "button-glow"


def test_whole_token_scores_two_and_substring_scores_one():
    """A keyword hit as a token is worth 2, inside a longer word it is worth 1."""
    service = TemplateService(templates=[_template("card", ["card"])], priority_overrides={})
    template = service.templates[0]

    assert service.score("a card", template) == 2
    assert service.score("postcards", template) == 1
    assert service.score("nothing here", template) == 0


def test_tie_goes_to_first_template():
    """Equal scores keep the template that comes first in catalogue order."""
    first = _template("first", ["panel"])
    second = _template("second", ["panel"])
    service = TemplateService(templates=[first, second], priority_overrides={})

    assert service.match("a panel").id == "first"


def test_zero_score_is_no_match(template_service):
    """Prompts sharing nothing with any keyword fall through."""
    assert template_service.match("enterprise pricing table") is None


def test_match_is_deterministic(template_service):
    """Repeated calls with the same prompt always agree."""
    results = {template_service.match("login form with email").id for _ in range(20)}
    assert results == {"form-login"}


def test_get_template_by_id(template_service):
    assert template_service.get_template("card-glass").name == "Glass Card"
    assert template_service.get_template("missing") is None
