"""
Schema validation tests for Pensum.

Tests all Pydantic models to ensure they validate correctly.
"""

import pytest

from pensum.schemas import (
    # Curriculum
    Term,
    Subject,
    Template,
    # Progress
    SubjectStatus,
    CategoryStats,
    TermStats,
    OverallStats,
    Milestone,
)


class TestTerm:
    """Test the Term model (ordinary and intermediate terms)."""

    def test_from_int(self):
        term = Term.parse(5)
        assert term.label == "5"
        assert term.value == 5.0
        assert not term.is_intermediate

    def test_integral_float_drops_fraction(self):
        assert Term.parse(5.0).label == "5"

    def test_from_string_keeps_label(self):
        term = Term.parse(" 5.5 ")
        assert term.label == "5.5"
        assert term.value == 5.5
        assert term.is_intermediate

    def test_numeric_not_lexical_ordering(self):
        assert Term.parse("10") > Term.parse("9")
        assert Term.parse("5.5") > Term.parse("5")
        assert sorted([Term.parse("10"), Term.parse("2"), Term.parse("5.5")]) == [
            Term.parse("2"), Term.parse("5.5"), Term.parse("10")
        ]

    def test_inclusive_comparisons(self):
        assert Term.parse("5") <= Term.parse("5")
        assert Term.parse("5") >= Term.parse("5")
        assert Term.parse("5") <= Term.parse("5.5")
        assert Term.parse("5.5") >= Term.parse("5")
        assert not Term.parse("5.5") <= Term.parse("5")
        assert Term.parse("5.5") > Term.parse("5")
        assert max([Term.parse("2"), Term.parse("7.5"), Term.parse("7")]).label == "7.5"

    def test_compare_with_non_term(self):
        with pytest.raises(TypeError):
            Term.parse("5") <= 5

    def test_equal_terms(self):
        assert Term.parse("3") == Term.parse(3)
        assert hash(Term.parse("3")) == hash(Term.parse(3))

    def test_invalid_terms(self):
        with pytest.raises(ValueError):
            Term.parse("five")
        with pytest.raises(ValueError):
            Term.parse("nan")
        with pytest.raises(ValueError):
            Term.parse(float("inf"))
        with pytest.raises(ValueError):
            Term.parse(True)

    def test_display_name(self):
        assert Term.parse(3).display_name == "Term 3"
        assert Term.parse("7.5").display_name == "Intermediate term 7.5"

    def test_serializes_to_label(self):
        assert Term.parse("5.5").model_dump() == "5.5"


class TestSubjectSchema:
    """Test the Subject model."""

    def test_subject_valid(self):
        subject = Subject(
            id="prog2",
            name="Programming 2",
            category="programming",
            term=2,
            prerequisites=["prog1"],
        )
        assert subject.term == Term.parse("2")
        assert subject.prerequisites == ["prog1"]

    def test_term_coerced_from_string(self):
        subject = Subject(id="comun1", name="Communication", category="management", term="5.5")
        assert subject.term.is_intermediate
        assert subject.model_dump()["term"] == "5.5"

    def test_blank_category_becomes_general(self):
        subject = Subject(id="x", name="X", category="  ", term=1)
        assert subject.category == "general"

    def test_prerequisites_deduplicated_in_order(self):
        subject = Subject(id="x", name="X", term=1, prerequisites=["b", "a", "b"])
        assert subject.prerequisites == ["b", "a"]

    def test_empty_id_rejected(self):
        with pytest.raises(ValueError):
            Subject(id="", name="X", term=1)

    def test_invalid_term_rejected(self):
        with pytest.raises(ValueError):
            Subject(id="x", name="X", term="spring")


class TestTemplateSchema:
    """Test the Template model."""

    def _template(self, **kwargs):
        defaults = dict(id="t1", user_id="alice", program_name="Systems Engineering")
        defaults.update(kwargs)
        return Template(**defaults)

    def test_empty_template(self):
        template = self._template()
        assert template.subjects == []
        assert template.categories == []
        assert template.palette == "purpor"

    def test_categories_include_subject_categories(self):
        template = self._template(
            categories=["math"],
            subjects=[
                Subject(id="a", name="A", category="programming", term=1),
                Subject(id="b", name="B", category="math", term=1),
                Subject(id="c", name="C", category="data", term=2),
            ],
        )
        assert template.categories == ["math", "programming", "data"]

    def test_invalid_palette(self):
        with pytest.raises(ValueError):
            self._template(palette="neon")

    def test_term_count_bounds(self):
        with pytest.raises(ValueError):
            self._template(term_count=0)

    def test_available_terms(self):
        template = self._template(term_count=3, intermediate_terms=["1.5"])
        assert [t.label for t in template.available_terms()] == ["1", "1.5", "2", "3"]

    def test_get_subject(self):
        template = self._template(subjects=[Subject(id="a", name="A", term=1)])
        assert template.get_subject("a").name == "A"
        assert template.get_subject("zzz") is None
        assert template.subject_ids == ["a"]

    def test_json_round_trip(self):
        template = self._template(
            intermediate_terms=["5.5"],
            subjects=[
                Subject(id="a", name="A", category="math", term=1),
                Subject(id="b", name="B", category="math", term="5.5", prerequisites=["a"]),
            ],
        )
        restored = Template.model_validate_json(template.model_dump_json())
        assert restored == template
        assert restored.subjects[1].term.label == "5.5"


class TestProgressSchemas:
    """Test progress statistics schemas."""

    def test_subject_status_values(self):
        assert SubjectStatus.COMPLETED.value == "completed"
        assert SubjectStatus("locked") == SubjectStatus.LOCKED

    def test_category_stats_bounds(self):
        stats = CategoryStats(category="math", total=4, completed=2, percentage=50)
        assert stats.percentage == 50
        with pytest.raises(ValueError):
            CategoryStats(category="math", total=4, completed=2, percentage=101)
        with pytest.raises(ValueError):
            CategoryStats(category="math", total=0, completed=0, percentage=0)

    def test_term_stats_valid(self):
        stats = TermStats(term="5.5", value=5.5, is_intermediate=True, total=1, completed=0, percentage=0)
        assert stats.is_intermediate

    def test_overall_stats_allows_empty(self):
        stats = OverallStats(total_subjects=0, total_completed=0, overall_percentage=0)
        assert stats.total_subjects == 0

    def test_milestone_threshold_bounds(self):
        with pytest.raises(ValueError):
            Milestone(threshold=0.0, remaining=0, reached=True)
