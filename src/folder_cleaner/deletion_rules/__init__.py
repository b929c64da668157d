"""Rules deciding which files are marked for deletion."""

from .base_rules import BaseDeletionRules
from .extension_rules import ExtensionDeletionRules, should_delete
from .protect_rules import ProtectedPathRules
from .rule_set import RuleSet

__all__ = [
    "BaseDeletionRules",
    "ExtensionDeletionRules",
    "ProtectedPathRules",
    "RuleSet",
    "should_delete",
]
