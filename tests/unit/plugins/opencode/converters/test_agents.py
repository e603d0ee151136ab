"""Unit tests for AgentConverter."""

from pathlib import Path

import pytest

from opencode_convert.core.config import ConversionConfig
from opencode_convert.models.document import Document
from opencode_convert.plugins.opencode.converters import AgentConverter


@pytest.fixture
def config(tmp_path: Path) -> ConversionConfig:
    return ConversionConfig(project_root=tmp_path)


@pytest.fixture
def converter(config: ConversionConfig) -> AgentConverter:
    return AgentConverter(config)


def write_agent(directory: Path, name: str, text: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{name}.md"
    path.write_text(text, encoding="utf-8")
    return path


class TestBuildHeader:
    def test_full_header(self, converter: AgentConverter):
        doc = Document(
            header={"name": "planner", "description": "Plans work", "model": "opus"}
        )
        header = converter.build_header("planner", doc)
        assert header.description == "Plans work"
        assert header.model == "opencode/minimax-m2.5-free"
        assert header.tools == {"write": False, "edit": False, "bash": False}

    def test_missing_description_uses_default(self, converter: AgentConverter):
        header = converter.build_header("helper", Document())
        assert header.description == "ECC agent: helper"

    def test_custom_description_prefix(self, tmp_path: Path):
        conv = AgentConverter(
            ConversionConfig(project_root=tmp_path, agent_description_prefix="Team")
        )
        assert conv.build_header("x", Document()).description == "Team agent: x"

    def test_custom_models_from_config(self, tmp_path: Path):
        conv = AgentConverter(
            ConversionConfig(
                project_root=tmp_path,
                main_model="openai/gpt-4o",
                fast_model="openai/gpt-4o-mini",
            )
        )
        fast = conv.build_header("x", Document(header={"model": "haiku"}))
        main = conv.build_header("x", Document(header={"model": "sonnet"}))
        assert fast.model == "openai/gpt-4o-mini"
        assert main.model == "openai/gpt-4o"

    def test_declared_tools_stay_enabled(self, converter: AgentConverter):
        doc = Document(header={"tools": ["Read", "Write", "Edit", "Bash"]})
        assert converter.build_header("x", doc).tools == {}

    def test_tools_string_declares_nothing(self, converter: AgentConverter):
        doc = Document(header={"tools": "Read, Write, Edit, Bash"})
        assert converter.build_header("x", doc).tools == {
            "write": False,
            "edit": False,
            "bash": False,
        }


class TestConvert:
    def test_opus_agent_rendered(self, converter: AgentConverter, tmp_path: Path):
        source = tmp_path / "agents"
        write_agent(
            source,
            "planner",
            "---\n"
            "name: planner\n"
            "description: Plans work\n"
            'tools: ["Read", "Grep"]\n'
            "model: opus\n"
            "---\n"
            "\n"
            "# Planner\n"
            "Break the task down.\n",
        )
        out = tmp_path / ".opencode" / "agents"

        assert converter.convert(source, out) == 1
        assert (out / "planner.md").read_text(encoding="utf-8") == (
            "---\n"
            "description: Plans work\n"
            "mode: subagent\n"
            "model: opencode/minimax-m2.5-free\n"
            "tools:\n"
            "  write: false\n"
            "  edit: false\n"
            "  bash: false\n"
            "---\n"
            "\n"
            "# Planner\n"
            "Break the task down.\n"
        )

    def test_agent_without_header(self, converter: AgentConverter, tmp_path: Path):
        source = tmp_path / "agents"
        write_agent(source, "helper", "You help.\n")
        out = tmp_path / "out"

        converter.convert(source, out)
        text = (out / "helper.md").read_text(encoding="utf-8")
        assert text.startswith('---\ndescription: "ECC agent: helper"\nmode: subagent\n')
        assert text.endswith("---\n\nYou help.\n")

    def test_tools_string_rendered_disabled(
        self, converter: AgentConverter, tmp_path: Path
    ):
        source = tmp_path / "agents"
        write_agent(
            source,
            "builder",
            "---\ndescription: Builds\ntools: Read, Write, Edit, Bash\n---\nBuild.\n",
        )
        out = tmp_path / "out"

        converter.convert(source, out)
        text = (out / "builder.md").read_text(encoding="utf-8")
        assert "tools:\n  write: false\n  edit: false\n  bash: false\n" in text

    def test_invalid_utf8_body_still_converted(
        self, converter: AgentConverter, tmp_path: Path
    ):
        source = tmp_path / "agents"
        source.mkdir()
        (source / "cafe.md").write_bytes(
            b"---\ndescription: Orders coffee\n---\nOne caf\xe9 please.\n"
        )
        out = tmp_path / "out"

        assert converter.convert(source, out) == 1
        text = (out / "cafe.md").read_text(encoding="utf-8")
        assert text.startswith("---\ndescription: Orders coffee\n")
        assert text.endswith("One caf\ufffd please.\n")

    def test_missing_source_directory(self, converter: AgentConverter, tmp_path: Path):
        assert converter.convert(tmp_path / "agents", tmp_path / "out") == 0
        assert not (tmp_path / "out").exists()

    def test_only_markdown_counted(self, converter: AgentConverter, tmp_path: Path):
        source = tmp_path / "agents"
        write_agent(source, "a", "A")
        write_agent(source, "b", "B")
        (source / "README.txt").write_text("skip")
        assert converter.convert(source, tmp_path / "out") == 2
