import logging
import shutil
from typing import Final

from opencode_convert.core.config import ConversionConfig
from opencode_convert.core.converter_registry import (
    ConverterRegistry,
    get_global_registry,
    register_builtin_converters,
)
from opencode_convert.core.pipeline_runner import PipelineRunner
from opencode_convert.exceptions import ProjectRootError
from opencode_convert.models.servers import McpServer
from opencode_convert.models.settings import ConversionSummary, OpenCodeSettings

from .mcp import McpRegistryConverter

logger = logging.getLogger(__name__)

CATEGORIES: Final[tuple[str, ...]] = ("agents", "commands", "skills", "rules")

REGENERATE_COMMAND: Final[str] = "opencode-convert"


class OpenCodeOrchestrator:
    """
    Regenerates the OpenCode output root from the Claude Code source tree.

    The output root belongs entirely to this class: it is deleted and rebuilt
    on every run, so a run over unchanged inputs reproduces the same tree.
    """

    def __init__(
        self,
        config: ConversionConfig | None = None,
        registry: ConverterRegistry | None = None,
        mcp_converter: McpRegistryConverter | None = None,
    ):
        self._config = config or ConversionConfig()
        self._logger = logger.getChild(self.__class__.__name__)

        if registry is None:
            register_builtin_converters()
            registry = get_global_registry()
        self._registry = registry
        self._mcp_converter = mcp_converter or McpRegistryConverter()

    @property
    def config(self) -> ConversionConfig:
        return self._config

    def check_project_root(self) -> None:
        """
        Refuse to run outside the expected project.

        Raises:
            ProjectRootError: If the marker file is missing
        """
        if not self._config.marker_path.is_file():
            raise ProjectRootError(self._config.marker_file)

    def reset_output_root(self) -> None:
        """Delete the output root and create it empty."""
        output_root = self._config.output_root
        if output_root.exists():
            self._logger.debug(f"Removing previous output: {output_root}")
            shutil.rmtree(output_root)
        output_root.mkdir(parents=True)

    def build_pipeline(self) -> PipelineRunner:
        """One step per category, each writing to its own output directory."""
        runner = PipelineRunner()
        for category in CATEGORIES:
            converter = self._registry.create_converter(category, config=self._config)
            runner.add_step(
                converter,
                self._config.source_path(category),
                self._config.output_path(category),
            )
        return runner

    def build_settings(self, mcp: dict[str, McpServer]) -> OpenCodeSettings:
        return OpenCodeSettings(
            schema_url=self._config.schema_url,
            model=self._config.main_model,
            small_model=self._config.fast_model,
            instructions=list(self._config.instructions),
            mcp=mcp,
        )

    def write_settings(self, settings: OpenCodeSettings) -> None:
        self._config.settings_path.write_text(settings.to_json(), encoding="utf-8")

    def render_summary_document(self) -> str:
        """Text of the GENERATED.md note written at the top of the output root."""
        config = self._config
        output_dir = config.output_dir_name
        settings_name = config.settings_path.name
        dirs = config.category_dirs

        lines = [
            "# Generated OpenCode Config",
            "",
            "This directory is generated from the Claude Code source-of-truth in this repo:",
            f"- {dirs['agents']}/*.md",
            f"- {dirs['commands']}/*.md",
            f"- {dirs['skills']}/**",
            f"- {dirs['rules']}/**",
            f"- {config.mcp_config} (converted into {settings_name} `mcp`)",
            "",
            "Regenerate with:",
            f"  {REGENERATE_COMMAND}",
            "",
            "To use with OpenCode as a portable config pack:",
            f'  export OPENCODE_CONFIG_DIR="$PWD/{output_dir}"',
            f'  export OPENCODE_CONFIG="$PWD/{output_dir}/{settings_name}"',
            "  opencode",
            "",
        ]
        return "\n".join(lines)

    def write_summary_document(self) -> None:
        self._config.summary_path.write_text(
            self.render_summary_document(), encoding="utf-8"
        )

    def translate(self) -> ConversionSummary:
        """
        Run the whole conversion.

        1. Check the project-root marker (nothing is touched if it is missing)
        2. Delete and recreate the output root
        3. Convert agents, commands, skills and rules
        4. Convert the MCP registry and write opencode.json
        5. Write GENERATED.md

        Returns:
            Counts per category

        Raises:
            ProjectRootError: If the marker file is missing
            ConversionError: If a category converter fails
            OSError: If the output files cannot be written
        """
        self.check_project_root()

        self._logger.info(
            f"Starting conversion: {self._config.project_root} -> "
            f"{self._config.output_root}"
        )
        self.reset_output_root()

        counts = self.build_pipeline().execute()

        mcp = self._mcp_converter.convert(self._config.mcp_config_path)
        self.write_settings(self.build_settings(mcp))
        self.write_summary_document()

        summary = ConversionSummary(
            agents=counts["agents"],
            commands=counts["commands"],
            skills=counts["skills"],
            rule_sets=counts["rules"],
            mcp_servers=len(mcp),
        )
        self._logger.info("Conversion completed successfully")
        return summary
