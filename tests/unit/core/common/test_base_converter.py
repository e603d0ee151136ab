"""Unit tests for BaseCategoryConverter and BaseDocumentConverter."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from opencode_convert.core.common.base_converter import (
    BaseCategoryConverter,
    BaseDocumentConverter,
)
from opencode_convert.core.config import ConversionConfig
from opencode_convert.models.document import Document

# -------------------- Fakes / helpers --------------------


class FakeParser:
    """Minimal DocumentParser fake that upper-cases the body."""

    def __init__(self) -> None:
        self.parsed: list[Path] = []

    def get_supported_extensions(self) -> list[str]:
        return [".md"]

    def can_parse(self, file_path: Path) -> bool:
        return file_path.is_file() and file_path.name.endswith(".md")

    def parse(self, file_path: Path) -> Document:
        self.parsed.append(file_path)
        return Document(header={}, body=file_path.read_text().upper())


class UpperCaseConverter(BaseDocumentConverter):
    category = "upper"

    def __init__(self, parser: FakeParser | None = None):
        super().__init__()
        self._parser = parser or FakeParser()

    def get_parser(self) -> FakeParser:
        return self._parser

    def render_document(self, name: str, document: Document) -> str:
        return f"[{name}]\n{document.body}"


class CountingConverter(BaseCategoryConverter):
    category = "counting"

    def __init__(self, result: int = 3, error: Exception | None = None):
        super().__init__()
        self.calls: list[tuple[Path, Path]] = []
        self._result = result
        self._error = error

    def _convert(self, source_path: Path, output_path: Path) -> int:
        self.calls.append((source_path, output_path))
        if self._error:
            raise self._error
        return self._result


# --------------------------- Tests ---------------------------


class TestBaseCategoryConverter:
    def test_missing_source_returns_zero_without_calling(self, tmp_path: Path) -> None:
        conv = CountingConverter()
        assert conv.convert(tmp_path / "nope", tmp_path / "out") == 0
        assert conv.calls == []
        assert not (tmp_path / "out").exists()

    def test_source_file_instead_of_directory_is_skipped(self, tmp_path: Path) -> None:
        f = tmp_path / "agents"
        f.write_text("not a dir")
        conv = CountingConverter()
        assert conv.convert(f, tmp_path / "out") == 0
        assert conv.calls == []

    def test_existing_source_delegates(self, tmp_path: Path) -> None:
        src = tmp_path / "src"
        src.mkdir()
        conv = CountingConverter(result=7)
        assert conv.convert(src, tmp_path / "out") == 7
        assert conv.calls == [(src, tmp_path / "out")]

    def test_errors_are_logged_and_reraised(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        src = tmp_path / "src"
        src.mkdir()
        conv = CountingConverter(error=PermissionError("denied"))
        caplog.set_level(logging.ERROR)
        with pytest.raises(PermissionError, match="denied"):
            conv.convert(src, tmp_path / "out")
        assert any("Conversion of counting failed" in r.message for r in caplog.records)

    def test_default_config_is_created(self) -> None:
        conv = CountingConverter()
        assert isinstance(conv._config, ConversionConfig)


class TestBaseDocumentConverter:
    @pytest.fixture
    def source(self, tmp_path: Path) -> Path:
        src = tmp_path / "src"
        src.mkdir()
        (src / "beta.md").write_text("second")
        (src / "alpha.md").write_text("first")
        (src / "notes.txt").write_text("ignored")
        (src / "nested").mkdir()
        (src / "nested" / "deep.md").write_text("not top level")
        return src

    def test_find_source_files_sorted_and_top_level_only(self, source: Path) -> None:
        conv = UpperCaseConverter()
        names = [p.name for p in conv.find_source_files(source)]
        assert names == ["alpha.md", "beta.md"]

    def test_document_name_strips_extension(self) -> None:
        conv = UpperCaseConverter()
        assert conv.document_name(Path("code-review.md")) == "code-review"

    def test_convert_writes_one_output_per_document(
        self, source: Path, tmp_path: Path
    ) -> None:
        out = tmp_path / "out" / "upper"
        conv = UpperCaseConverter()

        assert conv.convert(source, out) == 2
        assert (out / "alpha.md").read_text() == "[alpha]\nFIRST"
        assert (out / "beta.md").read_text() == "[beta]\nSECOND"
        assert not (out / "notes.txt").exists()
        assert not (out / "deep.md").exists()

    def test_empty_source_creates_output_dir(self, tmp_path: Path) -> None:
        src = tmp_path / "empty"
        src.mkdir()
        out = tmp_path / "out"
        assert UpperCaseConverter().convert(src, out) == 0
        assert out.is_dir()
