"""Test Notecard identity and Studyset operations."""
from __future__ import annotations

from crammer.types import Notecard, Studyset


def _vocab() -> Studyset:
    s = Studyset("vocab")
    s.add_term("cat", "a small mammal")
    s.add_term("dog", "a loyal mammal")
    s.add_term("eel", "a long fish")
    return s


class TestNotecard:
    """Equality is by term only."""

    def test_same_term_different_definition_is_equal(self):
        assert Notecard("cat", "a small mammal") == Notecard("cat", "something else")

    def test_different_terms_not_equal(self):
        assert Notecard("cat", "x") != Notecard("dog", "x")

    def test_hash_follows_term(self):
        cards = {Notecard("cat", "a"), Notecard("cat", "b"), Notecard("dog", "a")}
        assert len(cards) == 2

    def test_not_equal_to_other_types(self):
        assert Notecard("cat", "a") != ("cat", "a")

    def test_str(self):
        assert str(Notecard("cat", "a small mammal")) == "cat - a small mammal"


class TestStudyset:
    """Studyset add/remove/clone behavior."""

    def test_add_preserves_order(self):
        s = _vocab()
        assert [c.term for c in s.terms()] == ["cat", "dog", "eel"]
        assert s.length() == 3
        assert len(s) == 3

    def test_add_duplicate_term_keeps_both(self):
        s = _vocab()
        s.add_term("cat", "a different definition")
        assert s.length() == 4
        assert [c.definition for c in s if c.term == "cat"] == ["a small mammal", "a different definition"]

    def test_remove_present_term(self):
        s = _vocab()
        s.remove_term("dog")
        assert s.length() == 2
        assert not s.has_term("dog")

    def test_remove_only_first_duplicate(self):
        s = _vocab()
        s.add_term("cat", "second")
        s.remove_term("cat")
        assert [c.definition for c in s if c.term == "cat"] == ["second"]

    def test_remove_absent_term_is_noop(self):
        s = _vocab()
        s.remove_term("zebra")
        assert s.length() == 3

    def test_clone_is_equal_but_independent(self):
        s = _vocab()
        clone = s.clone_terms()
        assert [(c.term, c.definition) for c in clone] == [(c.term, c.definition) for c in s]
        assert clone is not s.terms()

        clone.pop()
        clone.append(clone[0])
        assert s.length() == 3
        assert [c.term for c in s] == ["cat", "dog", "eel"]

    def test_terms_is_live(self):
        s = _vocab()
        s.terms().clear()
        assert s.length() == 0

