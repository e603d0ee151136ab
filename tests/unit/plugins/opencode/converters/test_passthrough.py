"""Unit tests for the skill and rule mirror converters."""

import os
from pathlib import Path

import pytest

from opencode_convert.plugins.opencode.converters import RuleConverter, SkillConverter
from opencode_convert.plugins.opencode.converters.passthrough import (
    copy_tree,
    count_bundles,
)


@pytest.fixture
def skills(tmp_path: Path) -> Path:
    root = tmp_path / "skills"
    (root / "tdd" / "assets").mkdir(parents=True)
    (root / "tdd" / "SKILL.md").write_text("---\nname: tdd\n---\nTest first.\n")
    (root / "tdd" / "assets" / "logo.png").write_bytes(b"\x89PNG\r\n\x00\xff")
    (root / "security").mkdir()
    (root / "security" / "SKILL.md").write_text("Be careful.\n")
    (root / "README.md").write_text("Index\n")
    return root


class TestCopyTree:
    def test_copies_bytes_and_structure(self, skills: Path, tmp_path: Path):
        out = tmp_path / "copy"
        copy_tree(skills, out)

        assert (out / "tdd" / "SKILL.md").read_text() == "---\nname: tdd\n---\nTest first.\n"
        assert (out / "tdd" / "assets" / "logo.png").read_bytes() == b"\x89PNG\r\n\x00\xff"
        assert (out / "security" / "SKILL.md").is_file()
        assert (out / "README.md").is_file()

    def test_symlinks_skipped(self, skills: Path, tmp_path: Path):
        os.symlink(skills / "README.md", skills / "link.md")
        out = tmp_path / "copy"
        copy_tree(skills, out)
        assert not (out / "link.md").exists()


class TestCountBundles:
    def test_counts_only_directories(self, skills: Path):
        assert count_bundles(skills) == 2

    def test_empty(self, tmp_path: Path):
        assert count_bundles(tmp_path) == 0


class TestMirrorConverters:
    def test_categories(self):
        assert SkillConverter.category == "skills"
        assert RuleConverter.category == "rules"

    def test_skill_conversion(self, skills: Path, tmp_path: Path):
        out = tmp_path / ".opencode" / "skills"
        assert SkillConverter().convert(skills, out) == 2
        assert (out / "tdd" / "SKILL.md").is_file()

    def test_stale_output_removed(self, skills: Path, tmp_path: Path):
        out = tmp_path / "out"
        (out / "old-skill").mkdir(parents=True)
        (out / "old-skill" / "SKILL.md").write_text("stale")

        SkillConverter().convert(skills, out)
        assert not (out / "old-skill").exists()

    def test_rule_sets_counted(self, tmp_path: Path):
        rules = tmp_path / "rules"
        (rules / "common").mkdir(parents=True)
        (rules / "common" / "style.md").write_text("Use clear names.\n")
        (rules / "python").mkdir()
        (rules / "python" / "typing.md").write_text("Annotate APIs.\n")
        (rules / "loose.md").write_text("Not a set.\n")
        out = tmp_path / "out"

        assert RuleConverter().convert(rules, out) == 2
        assert (out / "loose.md").read_text() == "Not a set.\n"

    def test_missing_source(self, tmp_path: Path):
        assert RuleConverter().convert(tmp_path / "rules", tmp_path / "out") == 0
