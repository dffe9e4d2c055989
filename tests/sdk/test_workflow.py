"""Tests for loading local workflow documents."""

from pathlib import Path

import pytest

from helio_taverna_sdk.errors import MalformedWorkflowError, WorkflowSourceError
from helio_taverna_sdk.server_client import load_workflow, parse_workflow


def test_load_workflow_returns_document_element(workflow_file: Path):
    document = load_workflow(workflow_file)

    assert document.tag == "{http://taverna.sf.net/2008/xml/t2flow}workflow"
    assert document.get("producedBy") == "taverna-2.2.0"


def test_parse_workflow_accepts_text(workflow_xml: str):
    document = parse_workflow(workflow_xml.split("?>", 1)[1])

    assert document.get("version") == "1"


def test_load_workflow_rejects_malformed_xml(tmp_path: Path):
    path = tmp_path / "broken.t2flow"
    path.write_bytes(b"<workflow>")

    with pytest.raises(MalformedWorkflowError):
        load_workflow(path)


def test_load_workflow_reports_unreadable_source(tmp_path: Path):
    with pytest.raises(WorkflowSourceError) as excinfo:
        load_workflow(tmp_path)

    assert isinstance(excinfo.value.__cause__, OSError)
