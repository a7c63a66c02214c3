import pytest

from services.container import ComponentServices
from services.context_analyzer import ContextAnalyzer
from services.magic_client import MagicClient
from services.storage import MemoryKeyValueStore

BUTTON_SOURCE = """import React, { useState, useEffect } from 'react';

export const PrimaryButton = ({ label, onClick }: ButtonProps) => {
  const [busy, setBusy] = useState(false);
  useEffect(() => setBusy(false), []);
  return (
    <button
      className="bg-emerald-600 hover:bg-emerald-700 text-white px-4 py-2 rounded-xl shadow-md text-sm"
      style={{ padding: 8, color: 'red' }}
      onClick={onClick}
    >
      {label}
    </button>
  );
};
"""

NAV_SOURCE = """import React from 'react';

export default function TopNavigation({ items }) {
  return <nav className="bg-slate-900 text-white font-semibold gap-6">{items}</nav>;
}
"""

STYLES_SOURCE = """@tailwind base;

.panel {
  @apply rounded-xl shadow-md;
}
"""


@pytest.fixture
def memory_store():
    """Provides an in-process key-value store that is discarded after the test."""
    return MemoryKeyValueStore()


@pytest.fixture
def empty_project(tmp_path):
    """Provides an existing but empty project directory."""
    project = tmp_path / "empty-project"
    project.mkdir()
    return project


@pytest.fixture
def sample_project(tmp_path):
    """Provides a small React + Tailwind project laid out under src/."""
    src = tmp_path / "app" / "src"
    (src / "components").mkdir(parents=True)
    (src / "node_modules" / "lib").mkdir(parents=True)

    (src / "components" / "PrimaryButton.tsx").write_text(BUTTON_SOURCE, encoding="utf-8")
    (src / "components" / "TopNavigation.jsx").write_text(NAV_SOURCE, encoding="utf-8")
    (src / "index.css").write_text(STYLES_SOURCE, encoding="utf-8")
    (src / "node_modules" / "lib" / "Ignored.tsx").write_text(
        "const IgnoredCard = () => <div className='bg-rose-500' />;", encoding="utf-8"
    )
    return tmp_path / "app"


@pytest.fixture
def offline_client():
    """Provides a remote client with no endpoints configured."""
    return MagicClient(api_url=None, variations_url=None, health_url=None)


@pytest.fixture
def services(memory_store, empty_project, offline_client):
    """Provides an opened service graph backed by memory and an empty project."""
    graph = ComponentServices(
        store=memory_store,
        analyzer=ContextAnalyzer(str(empty_project)),
        magic_client=offline_client,
    ).open()
    yield graph
    graph.close()
