import os

import pytest

from services.context_analyzer import ContextAnalyzer


class FakeClock:
    """Monotonic clock the test advances by hand."""

    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def analyzer(sample_project, clock):
    """Provides an analyzer rooted at the sample project with a controllable clock."""
    return ContextAnalyzer(str(sample_project), cache_ttl=300, clock=clock)


@pytest.mark.asyncio
async def test_analyze_reads_project_conventions(analyzer):
    """Framework usage, design tokens and components come from the scanned files."""
    insights = await analyzer.analyze()

    assert insights.framework_usage.react is True
    assert insights.framework_usage.typescript is True
    assert insights.framework_usage.tailwindcss is True
    assert insights.framework_usage.styled_components is False

    design = insights.design_system
    assert design.color_palette == ["emerald-600", "emerald-700", "white", "slate-900"]
    assert "rounded-xl" in design.border_radius
    assert "shadow-md" in design.shadows
    assert {"px-4", "py-2", "gap-6"} <= set(design.spacing)
    assert {"text-sm", "font-semibold"} <= set(design.typography)

    assert insights.existing_components.buttons == ["PrimaryButton"]
    assert insights.existing_components.navigation == ["TopNavigation"]
    assert insights.styling_approach == "Tailwind CSS with custom CSS for complex components"
    assert insights.common_patterns.state_management == "React hooks (useState, useEffect)"
    assert insights.recommendations.compatibility_score == 0.85


@pytest.mark.asyncio
async def test_ignored_directories_are_not_scanned(analyzer):
    """Files under node_modules never contribute tokens or components."""
    insights = await analyzer.analyze()
    assert insights.existing_components.cards == []
    assert "rose-500" not in insights.design_system.color_palette


@pytest.mark.asyncio
async def test_missing_directory_yields_uncached_fallback(tmp_path, clock):
    """A project that cannot be scanned produces the fallback insights at 0.75."""
    analyzer = ContextAnalyzer(str(tmp_path / "does-not-exist"), clock=clock)

    insights = await analyzer.analyze()

    assert insights.recommendations.compatibility_score == 0.75
    assert insights.existing_components.buttons == ["MagicButton"]
    assert analyzer.cached_insights is None


@pytest.mark.asyncio
async def test_empty_project_falls_back_per_category(empty_project, clock):
    """An empty scan still succeeds; each empty token category uses the defaults."""
    analyzer = ContextAnalyzer(str(empty_project), clock=clock)

    insights = await analyzer.analyze()

    assert insights.design_system.color_palette == ["blue-500", "purple-500", "gray-900", "white"]
    assert insights.existing_components.buttons == []
    assert analyzer.cached_insights is insights


@pytest.mark.asyncio
async def test_cached_insights_expire_after_ttl(analyzer, clock):
    """Within the TTL the same insights are served; after it they are rebuilt."""
    first = await analyzer.get_or_analyze()

    clock.now += 299
    assert await analyzer.get_or_analyze() is first

    clock.now += 2
    assert analyzer.is_fresh() is False
    refreshed = await analyzer.get_or_analyze()
    assert refreshed is not first
    assert refreshed == first


@pytest.mark.asyncio
async def test_clear_cache_forces_rescan(analyzer):
    await analyzer.get_or_analyze()
    analyzer.clear_cache()
    assert analyzer.cached_insights is None
    assert analyzer.is_fresh() is False


@pytest.mark.asyncio
async def test_different_project_path_is_not_fresh(analyzer, empty_project):
    await analyzer.get_or_analyze()
    assert analyzer.is_fresh(str(empty_project)) is False


@pytest.mark.asyncio
async def test_other_project_insights_are_not_served_for_default(empty_project, sample_project, clock):
    """Insights cached for an explicit path never answer a call for the default project."""
    analyzer = ContextAnalyzer(str(empty_project), cache_ttl=300, clock=clock)
    await analyzer.analyze(str(sample_project))

    assert analyzer.is_fresh(str(sample_project)) is True
    assert analyzer.is_fresh() is False

    insights = await analyzer.get_or_analyze()
    assert insights.design_system.color_palette == ["blue-500", "purple-500", "gray-900", "white"]
    assert analyzer.is_fresh() is True


@pytest.mark.asyncio
async def test_scan_stops_at_file_limit_and_skips_ignored_directories(sample_project, clock, mocker):
    """Key files come first, the walk is sorted, and ignored folders are never entered."""
    analyzer = ContextAnalyzer(str(sample_project), max_files=2, clock=clock)
    spy = mocker.spy(analyzer, "analyze_file")

    await analyzer.analyze()

    scanned = [call.args[0].name for call in spy.call_args_list]
    assert scanned == ["index.css", "PrimaryButton.tsx"]


@pytest.mark.asyncio
async def test_ignored_directories_are_pruned_at_project_root(tmp_path, clock):
    """Without a src/ folder the root is walked, still skipping node_modules and .git."""
    project = tmp_path / "flat"
    (project / "node_modules" / "pkg").mkdir(parents=True)
    (project / ".git").mkdir()
    (project / "node_modules" / "pkg" / "Card.tsx").write_text("const VendorCard = () => <div />;", encoding="utf-8")
    (project / ".git" / "hook.js").write_text("const GitButton = 1;", encoding="utf-8")
    (project / "Header.jsx").write_text("const MainNavigation = () => <nav />;", encoding="utf-8")

    insights = await ContextAnalyzer(str(project), clock=clock).analyze()

    assert insights.existing_components.navigation == ["MainNavigation"]
    assert insights.existing_components.cards == []
    assert insights.existing_components.buttons == []


def test_file_analysis_is_reused_until_modified(analyzer, sample_project):
    """Per-file results are keyed by modification time."""
    path = sample_project / "src" / "components" / "PrimaryButton.tsx"

    first = analyzer.analyze_file(path)
    assert analyzer.analyze_file(path) is first
    assert first.props == ["label", "onClick"]
    assert first.hooks == ["useState", "useEffect"]
    assert first.styling[-1].inline == {"padding": 8, "color": "red"}

    path.write_text("export const Changed = () => null;\n", encoding="utf-8")
    bumped = path.stat().st_mtime + 10
    os.utime(path, (bumped, bumped))

    second = analyzer.analyze_file(path)
    assert second is not first
    assert second.exports == ["Changed"]


@pytest.mark.asyncio
async def test_unreadable_file_is_skipped(analyzer, sample_project):
    """One undecodable file does not abort the whole scan."""
    (sample_project / "src" / "Broken.tsx").write_bytes(b"\xff\xfe\x00 not utf-8 \xc3")

    insights = await analyzer.analyze()

    assert insights.recommendations.compatibility_score == 0.85
    assert insights.existing_components.buttons == ["PrimaryButton"]


@pytest.mark.asyncio
async def test_contextual_suggestions(analyzer):
    insights = await analyzer.analyze()

    suggestions = analyzer.generate_contextual_suggestions("rounded card", insights)

    assert "Use Tailwind utility classes" in suggestions.styling
    assert "Radius: rounded-xl" in suggestions.styling
    assert "Define TypeScript interface for props" in suggestions.patterns
    assert "Framework: React + TypeScript" in suggestions.compatibility
