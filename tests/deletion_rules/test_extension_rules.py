"""Unit tests for extension-based deletion rules."""

from pathlib import Path

import pytest

from folder_cleaner.deletion_rules.base_rules import BaseDeletionRules
from folder_cleaner.deletion_rules.extension_rules import ExtensionDeletionRules, file_extension, should_delete
from folder_cleaner.deletion_rules.rule_set import RuleSet


@pytest.fixture
def txt_tmp_rules():
    return RuleSet("/data", extensions_to_delete=["txt", "tmp"], extensions_to_keep=["md"])


class TestFileExtension:
    def test_last_suffix_only(self):
        assert file_extension("archive.tar.gz") == "gz"

    def test_no_extension(self):
        assert file_extension("Makefile") is None

    def test_dotfile_has_no_extension(self):
        assert file_extension(".bashrc") is None

    def test_hidden_file_with_extension(self):
        assert file_extension(".cache.tmp") == "tmp"


class TestShouldDelete:
    def test_listed_extension_is_deleted(self, txt_tmp_rules):
        assert should_delete(Path("/data/notes.txt"), txt_tmp_rules) is True

    def test_unlisted_extension_is_kept(self, txt_tmp_rules):
        assert should_delete(Path("/data/photo.jpg"), txt_tmp_rules) is False

    def test_keep_list_is_kept(self, txt_tmp_rules):
        assert should_delete(Path("/data/README.md"), txt_tmp_rules) is False

    def test_keep_list_wins_over_delete_list(self):
        rules = RuleSet("/data", extensions_to_delete=["log", "txt"], extensions_to_keep=["txt"])
        assert should_delete("/data/notes.txt", rules) is False
        assert should_delete("/data/app.log", rules) is True

    def test_keep_list_wins_over_empty_delete_list(self):
        rules = RuleSet("/data", extensions_to_keep=["pdf"])
        assert should_delete("/data/invoice.pdf", rules) is False
        assert should_delete("/data/draft.docx", rules) is True

    def test_empty_delete_list_matches_any_extension(self):
        rules = RuleSet("/data")
        for name in ("a.txt", "b.exe", "c.tar.gz", "d.X"):
            assert should_delete(f"/data/{name}", rules) is True

    def test_file_without_extension_never_matches(self):
        assert should_delete("/data/LICENSE", RuleSet("/data")) is False
        assert should_delete("/data/LICENSE", RuleSet("/data", extensions_to_delete=["txt"])) is False

    def test_hidden_file_is_kept_by_default(self, txt_tmp_rules):
        assert should_delete("/data/.hidden.txt", txt_tmp_rules) is False

    def test_hidden_file_is_kept_even_with_empty_delete_list(self):
        assert should_delete("/data/.env.local", RuleSet("/data")) is False

    def test_hidden_file_deleted_when_included(self):
        rules = RuleSet("/data", extensions_to_delete=["txt"], include_hidden=True)
        assert should_delete("/data/.hidden.txt", rules) is True

    def test_hidden_keep_listed_file_still_kept(self):
        rules = RuleSet("/data", extensions_to_keep=["txt"], include_hidden=True)
        assert should_delete("/data/.hidden.txt", rules) is False

    def test_extension_comparison_is_case_sensitive(self, txt_tmp_rules):
        assert should_delete("/data/NOTES.TXT", txt_tmp_rules) is False

    def test_dotted_extensions_in_rules_are_normalized(self):
        rules = RuleSet("/data", extensions_to_delete=[".log", "..rs"])
        assert should_delete("/data/app.log", rules) is True
        assert should_delete("/data/main.rs", rules) is True

    def test_protected_path_is_kept(self):
        rules = RuleSet("/data", extensions_to_delete=["tmp"], protect_patterns=["important/"])
        assert should_delete("/data/important/cache.tmp", rules) is False
        assert should_delete("/data/other/cache.tmp", rules) is True

    def test_protect_pattern_with_negation(self):
        rules = RuleSet("/data", protect_patterns=["*.log", "!debug.log"])
        assert should_delete("/data/app.log", rules) is False
        assert should_delete("/data/debug.log", rules) is True

    def test_does_not_touch_filesystem(self, tmp_path):
        rules = RuleSet(tmp_path, extensions_to_delete=["txt"])
        assert should_delete(tmp_path / "missing.txt", rules) is True


class TestExtensionDeletionRules:
    def test_is_a_deletion_rule(self, txt_tmp_rules):
        assert isinstance(ExtensionDeletionRules(txt_tmp_rules), BaseDeletionRules)

    def test_delegates_to_rule_set(self, txt_tmp_rules):
        rules = ExtensionDeletionRules(txt_tmp_rules)
        assert rules.should_delete("/data/cache.tmp") is True
        assert rules.should_delete("/data/keep.md") is False
        assert rules.rule_set is txt_tmp_rules

    def test_base_class_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            BaseDeletionRules()  # type: ignore[abstract]
