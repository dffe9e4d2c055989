"""Shared test fixtures for all test categories."""

from pathlib import Path
from xml.etree import ElementTree

import pytest

from helio_taverna_sdk.config import TavernaServerSettings
from helio_taverna_sdk.server_client import MockRunServiceChannel, connect

T2FLOW_NS = "http://taverna.sf.net/2008/xml/t2flow"

WORKFLOW_XML = f"""<?xml version="1.0" encoding="UTF-8"?>
<workflow xmlns="{T2FLOW_NS}" version="1" producedBy="taverna-2.2.0">
  <dataflow id="df-1" role="top">
    <name>fetch_goes_xrays</name>
    <inputPorts />
    <outputPorts />
  </dataflow>
</workflow>
"""


@pytest.fixture(scope="session")
def default_settings() -> TavernaServerSettings:
    """Provide a default Settings instance for tests."""

    return TavernaServerSettings()


# =============================================================================
# Workflow Fixtures
# =============================================================================


@pytest.fixture
def workflow_xml() -> str:
    """Serialized t2flow document."""
    return WORKFLOW_XML


@pytest.fixture
def workflow_document() -> ElementTree.Element:
    """Parsed t2flow document element."""
    return ElementTree.fromstring(WORKFLOW_XML)


@pytest.fixture
def workflow_file(tmp_path: Path) -> Path:
    """A local t2flow file on disk."""
    path = tmp_path / "fetch_goes_xrays.t2flow"
    path.write_text(WORKFLOW_XML, encoding="utf-8")
    return path


# =============================================================================
# Connection Fixtures
# =============================================================================


@pytest.fixture
def mock_channel() -> MockRunServiceChannel:
    """In-memory run-service channel."""
    return MockRunServiceChannel()


@pytest.fixture
def mock_connection(mock_channel: MockRunServiceChannel):
    """Anonymous connection to an explicit address over the mock channel."""
    return connect(
        "http://example.org/taverna",
        channel_factory=lambda _default_address: mock_channel,
    )
