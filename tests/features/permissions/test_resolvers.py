"""Tests for global and role resolution over resource namespaces."""

import pytest

from neo_access.features.permissions.entities.permission import ResourceName, RoleRule, candidate_names
from neo_access.features.permissions.services.resolvers import (
    resolve_access,
    resolve_global,
    resolve_role,
)


class TestResourceName:
    """Test resource identifier parsing."""
    
    def test_none_and_empty_have_no_segments(self):
        assert ResourceName.parse(None).value == ""
        assert ResourceName.parse(None).segments == ()
        assert ResourceName.parse("").segments == ()
    
    def test_split_on_literal_separator(self):
        assert ResourceName.parse("A.B.C").segments == ("A", "B", "C")
        assert ResourceName.parse("a.b", "/").segments == ("a.b",)
        assert ResourceName.parse("a/b", "/").segments == ("a", "b")
    
    def test_candidates_most_specific_first(self):
        assert ResourceName.parse("A.B.C").candidates() == ["A.B.C", "A.B", "A"]
        assert candidate_names(("x", "y"), ":") == ["x:y", "x"]


class TestResolveGlobal:
    """Test nearest-ancestor global resolution."""
    
    @pytest.fixture
    def global_index(self):
        return {"A.B": False, "A": True}
    
    def test_nearest_ancestor_wins(self, global_index):
        assert resolve_global(("A", "B", "C"), global_index, default=True) is False
        assert resolve_global(("A", "D"), global_index, default=False) is True
    
    def test_exact_match(self, global_index):
        assert resolve_global(("A", "B"), global_index, default=True) is False
    
    @pytest.mark.parametrize("default", [True, False])
    def test_no_match_falls_back_to_default(self, global_index, default):
        assert resolve_global(("X", "Y"), global_index, default=default) is default
        assert resolve_global((), global_index, default=default) is default
    
    def test_explicit_depth_skips_deeper_names(self):
        index = {"A.B.C": False, "A": True}
        assert resolve_global(("A", "B", "C"), index, default=False) is False
        assert resolve_global(("A", "B", "C"), index, default=False, depth=2) is True
        assert resolve_global(("A", "B", "C"), index, default=False, depth=0) is False
    
    def test_custom_separator(self):
        assert resolve_global(("A", "B"), {"A/B": False}, default=True, separator="/") is False
        assert resolve_global(("A", "B"), {"A.B": False}, default=True, separator="/") is True


class TestResolveRole:
    """Test role overrides across namespace levels."""
    
    def test_no_rule_for_identity(self):
        index = {"A": (RoleRule("r1", False),)}
        assert resolve_role(("A", "B"), index, "r2") is None
        assert resolve_role((), index, "r1") is None
    
    def test_general_level_rule_applies_to_nested_names(self):
        index = {"A": (RoleRule("r1", False),)}
        assert resolve_role(("A", "B", "C"), index, "r1") is False
    
    def test_most_specific_level_wins(self):
        index = {
            "A": (RoleRule("r1", False),),
            "A.B": (RoleRule("r1", True),),
        }
        assert resolve_role(("A", "B", "C"), index, "r1") is True
        assert resolve_role(("A", "C"), index, "r1") is False
    
    def test_first_matching_rule_in_group_wins(self):
        index = {"A": (RoleRule("r2", False), RoleRule("r1", True), RoleRule("r1", False))}
        assert resolve_role(("A",), index, "r1") is True
    
    def test_scan_continues_past_levels_without_match(self):
        index = {
            "A": (RoleRule("r1", True),),
            "A.B": (RoleRule("r2", False),),
        }
        assert resolve_role(("A", "B"), index, "r1") is True


class TestResolveAccess:
    """Test combination of global and role answers."""
    
    def test_role_override_beats_global_at_same_level(self):
        global_index = {"A.B": False}
        role_index = {"A.B": (RoleRule("r1", True),)}
        
        assert resolve_access(("A", "B"), global_index, role_index, "r1", True) is True
        assert resolve_access(("A", "B"), global_index, role_index, "other", True) is False
    
    def test_general_role_rule_beats_specific_global_rule(self):
        global_index = {"A.B.C": False}
        role_index = {"A": (RoleRule("r1", True),)}
        
        assert resolve_access(("A", "B", "C"), global_index, role_index, "r1", False) is True
    
    def test_default_when_nothing_matches(self):
        assert resolve_access(("Z",), {}, {}, "r1", False) is False
        assert resolve_access(("Z",), {}, {}, "r1", True) is True
