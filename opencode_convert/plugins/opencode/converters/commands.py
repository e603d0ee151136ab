from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from opencode_convert.core.common.base_converter import BaseDocumentConverter
from opencode_convert.core.config import ConversionConfig
from opencode_convert.core.protocols import DocumentParser
from opencode_convert.models.document import Document
from opencode_convert.models.headers import CommandHeader

from ..field_mapping import as_text
from ..parser import FrontmatterParser
from ..renderer import render_document

# Command name -> agent that runs it as a subtask.
COMMAND_AGENTS: Final[MappingProxyType[str, str]] = MappingProxyType(
    {
        "plan": "planner",
        "tdd": "tdd-guide",
        "code-review": "code-reviewer",
        "build-fix": "build-error-resolver",
        "e2e": "e2e-runner",
        "refactor-clean": "refactor-cleaner",
        "update-docs": "doc-updater",
        "update-codemaps": "doc-updater",
        "go-review": "go-reviewer",
        "go-build": "go-build-resolver",
        "python-review": "python-reviewer",
        # Orchestration commands go to the planner.
        "orchestrate": "planner",
        "multi-plan": "planner",
    }
)

HEADING_PREFIX: Final[str] = "# "


def infer_command_description(body: str, fallback: str) -> str:
    """
    Use the body's title as the description.

    Only the first non-blank line is considered: if it is a level-one heading
    its text is returned, otherwise the fallback.
    """
    for line in body.splitlines():
        line = line.strip()
        if not line:
            continue
        if line.startswith(HEADING_PREFIX):
            return line[len(HEADING_PREFIX) :].strip()
        return fallback
    return fallback


class CommandConverter(BaseDocumentConverter):
    """Convert Claude Code slash commands into OpenCode commands."""

    category = "commands"

    def __init__(
        self,
        config: ConversionConfig | None = None,
        command_agents: Mapping[str, str] = COMMAND_AGENTS,
    ):
        super().__init__(config)
        self._parser = FrontmatterParser()
        self._command_agents = command_agents

    def get_parser(self) -> DocumentParser:
        return self._parser

    def build_header(self, name: str, document: Document) -> CommandHeader:
        description = as_text(document.get("description")) or infer_command_description(
            document.body, name
        )
        return CommandHeader.for_agent(
            description=description, agent=self._command_agents.get(name)
        )

    def render_document(self, name: str, document: Document) -> str:
        header = self.build_header(name, document)
        return render_document(header.to_frontmatter(), document.body)
