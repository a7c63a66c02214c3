import json
from unittest.mock import AsyncMock

import httpx
import pytest

from models.component import GenerationRequest, VariationsRequest
from services.container import ComponentServices
from services.context_analyzer import ContextAnalyzer
from services.generation_service import CONTEXT_SOURCE, FALLBACK_SOURCE, TEMPLATE_SOURCE
from services.magic_client import MagicClient

REMOTE_URL = "http://magic.test/api/generate"


def _remote_client(handler):
    """A configured client whose HTTP traffic is answered by `handler`."""
    return MagicClient(
        api_url=REMOTE_URL,
        variations_url=None,
        health_url=None,
        client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


def _graph(memory_store, project, magic_client):
    return ComponentServices(
        store=memory_store,
        analyzer=ContextAnalyzer(str(project)),
        magic_client=magic_client,
    ).open()


@pytest.mark.asyncio
async def test_matched_prompt_is_context_enhanced(memory_store, sample_project, offline_client):
    """A template hit is rewritten toward the project's tokens and recorded."""
    services = _graph(memory_store, sample_project, offline_client)

    component = await services.generation.generate(GenerationRequest(prompt="glass card"))

    assert component.success is True
    assert component.name == "Glass Card"
    assert component.metadata.source == CONTEXT_SOURCE
    assert component.metadata.context_aware is True
    assert component.metadata.compatibility_score == 0.85
    assert component.metadata.framework_usage["tailwindcss"] is True
    assert "rounded-xl" in component.code
    assert "rounded-2xl" not in component.code

    [entry] = services.history.list_all()
    assert component.metadata.history_id == entry.id
    assert entry.metadata.customizations["contextAware"] is True


@pytest.mark.asyncio
async def test_context_failure_falls_back_to_plain_template(services, mocker):
    """An analyzer error demotes the first stage; the raw template is served."""
    mocker.patch.object(services.analyzer, "get_or_analyze", new=AsyncMock(side_effect=RuntimeError("boom")))

    component = await services.generation.generate(GenerationRequest(prompt="login form"))

    assert component.metadata.source == TEMPLATE_SOURCE
    assert component.name == "Login Form"


@pytest.mark.asyncio
async def test_unreachable_remote_still_succeeds_with_enterprise_tiers(memory_store, empty_project):
    """A 500 from the remote service ends in the basic generator's pricing table."""
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(500, json={"error": "down"})

    services = _graph(memory_store, empty_project, _remote_client(handler))

    component = await services.generation.generate(GenerationRequest(prompt="enterprise pricing table"))

    assert len(calls) == 1
    assert component.success is True
    assert component.metadata.source == FALLBACK_SOURCE
    assert component.name == "EnterprisePricingTable"
    for tier in ("Starter", "Professional", "Enterprise"):
        assert f'"name": "{tier}"' in component.code
    assert '"popular": true' in component.code
    assert len(services.history.list_all()) == 1


@pytest.mark.asyncio
async def test_transport_error_is_a_miss(memory_store, empty_project):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    services = _graph(memory_store, empty_project, _remote_client(handler))

    component = await services.generation.generate(GenerationRequest(prompt="weather widget"))

    assert component.metadata.source == FALLBACK_SOURCE
    assert component.name == "WeatherWidget"


@pytest.mark.asyncio
async def test_remote_success_is_used_when_nothing_matches(memory_store, empty_project):
    """Unmatched prompts go to the remote service with camelCase fields."""
    seen = {}

    def handler(request):
        seen.update(json.loads(request.content))
        return httpx.Response(200, json={
            "code": "const WeatherWidget = () => <div>Sunny</div>;",
            "name": "WeatherWidget",
            "explanation": "Remote widget",
            "source": "Magic API",
            "metadata": {"componentType": "widget", "quality": "high"},
        })

    services = _graph(memory_store, empty_project, _remote_client(handler))
    request = GenerationRequest(prompt="weather widget", search_query="widget", current_file_path="src/Weather.tsx")

    component = await services.generation.generate(request)

    assert seen == {"prompt": "weather widget", "searchQuery": "widget", "currentFile": "src/Weather.tsx"}
    assert component.metadata.source == "Magic API"
    assert component.metadata.component_type == "widget"
    assert component.code.startswith("const WeatherWidget")


@pytest.mark.asyncio
async def test_remote_body_with_wrong_shape_is_a_miss(memory_store, empty_project):
    services = _graph(memory_store, empty_project, _remote_client(lambda request: httpx.Response(200, json={"code": ""})))

    component = await services.generation.generate(GenerationRequest(prompt="weather widget"))

    assert component.metadata.source == FALLBACK_SOURCE


@pytest.mark.asyncio
async def test_progress_reports_and_bad_callbacks_are_ignored(services):
    statuses = []

    def on_progress(event):
        statuses.append(event.status)
        raise ValueError("listener bug")

    component = await services.generation.generate(GenerationRequest(prompt="glow button"), on_progress)

    assert component.metadata.source == CONTEXT_SOURCE
    assert statuses[0] == "generating"
    assert statuses[-1] == "complete"


@pytest.mark.asyncio
async def test_variations_fall_back_to_single_component(services):
    """Without a variations endpoint one component is returned with a note."""
    response = await services.generation.generate_variations(VariationsRequest(prompt="glow button"), 3)

    assert response.total == 1
    [variation] = response.variations
    assert variation.name == "Glow Button"
    assert variation.note == "Fallback to single component due to variations API error"


@pytest.mark.asyncio
async def test_status_and_context_refresh(services):
    status = await services.generation.get_status()
    assert status.remote_configured is False
    assert status.context_cached is False
    assert status.template_count == 6

    await services.generation.refresh_context()

    assert (await services.generation.get_status()).context_cached is True


@pytest.mark.asyncio
async def test_status_reports_remote_health(memory_store, empty_project):
    """The health endpoint is probed; any 2xx counts as reachable."""
    client = MagicClient(
        api_url=REMOTE_URL,
        variations_url=None,
        health_url="http://magic.test/api/health",
        client=httpx.AsyncClient(transport=httpx.MockTransport(lambda request: httpx.Response(200, json={"status": "healthy"}))),
    )
    services = _graph(memory_store, empty_project, client)

    status = await services.generation.get_status()

    assert status.remote_configured is True
    assert status.remote_reachable is True
