import logging

from opencode_convert.core.common.base_converter import BaseDocumentConverter
from opencode_convert.core.config import ConversionConfig
from opencode_convert.core.protocols import DocumentParser
from opencode_convert.models.document import Document
from opencode_convert.models.headers import AgentHeader

from ..field_mapping import as_text, declared_tools, map_model, map_tools
from ..parser import FrontmatterParser
from ..renderer import render_document

logger = logging.getLogger(__name__)


class AgentConverter(BaseDocumentConverter):
    """Convert Claude Code agent documents into OpenCode subagents."""

    category = "agents"

    def __init__(self, config: ConversionConfig | None = None):
        super().__init__(config)
        self._parser = FrontmatterParser()

    def get_parser(self) -> DocumentParser:
        return self._parser

    def default_description(self, name: str) -> str:
        return f"{self._config.agent_description_prefix} agent: {name}"

    def build_header(self, name: str, document: Document) -> AgentHeader:
        """Map a source agent header onto the OpenCode subagent header."""
        description = as_text(document.get("description")) or self.default_description(
            name
        )
        model = map_model(
            document.get("model"),
            main_model=self._config.main_model,
            fast_model=self._config.fast_model,
        )
        tools = map_tools(declared_tools(document.get("tools")))

        logger.debug(f"Agent '{name}': model={model}, disabled tools={list(tools)}")
        return AgentHeader(description=description, model=model, tools=tools)

    def render_document(self, name: str, document: Document) -> str:
        header = self.build_header(name, document)
        return render_document(header.to_frontmatter(), document.body)
