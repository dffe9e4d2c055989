"""Helpers for turning local workflow sources into parsed documents."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union
from xml.etree import ElementTree

from ..errors import MalformedWorkflowError, WorkflowSourceError

logger = logging.getLogger(__name__)


def parse_workflow(data: Union[bytes, str]) -> ElementTree.Element:
    """Parse serialized workflow XML and return its document element."""

    try:
        return ElementTree.fromstring(data)
    except ElementTree.ParseError as exc:
        raise MalformedWorkflowError(
            f"Workflow is not a well-formed XML document: {exc}"
        ) from exc


def load_workflow(path: Union[str, Path]) -> ElementTree.Element:
    """Read a local workflow file (e.g. a t2flow document) and parse it.

    Raises:
        WorkflowSourceError: If the file cannot be read
        MalformedWorkflowError: If the file does not hold well-formed XML
    """
    workflow_path = Path(path)
    try:
        data = workflow_path.read_bytes()
    except OSError as exc:
        logger.error(f"Unable to read workflow file {workflow_path}: {exc}")
        raise WorkflowSourceError(
            f"Unable to read workflow file {workflow_path}: {exc}"
        ) from exc

    try:
        return parse_workflow(data)
    except MalformedWorkflowError:
        logger.error(f"Workflow file {workflow_path} is not well-formed XML")
        raise
