"""Tolerant parsers for manifest and agent-definition documents."""

from lumi_kit.parsing.agent import extract_agent_definition as extract_agent_definition
from lumi_kit.parsing.manifest import parse_manifest as parse_manifest
