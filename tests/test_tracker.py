"""
CurriculumTracker tests, driven through a MemoryTemplateStore.
"""

import pytest

from pensum.errors import CycleError, NotFoundError
from pensum.planner import CurriculumTracker
from pensum.schemas import Subject, SubjectStatus, Template
from pensum.store import MemoryTemplateStore
from pensum.utils import create_default_template


@pytest.fixture
def store():
    store = MemoryTemplateStore()
    store.save(Template(
        id="t1",
        user_id="alice",
        subjects=[
            Subject(id="A", name="A", category="math", term=1),
            Subject(id="B", name="B", category="math", term=2, prerequisites=["A"]),
            Subject(id="C", name="C", category="programming", term="1.5", prerequisites=["A", "B"]),
            Subject(id="D", name="D", category="programming", term=1),
        ],
    ))
    return store


@pytest.fixture
def tracker(store):
    return CurriculumTracker(store, "t1")


class TestConstruction:

    def test_missing_template(self, store):
        with pytest.raises(NotFoundError):
            CurriculumTracker(store, "nope")


class TestToggleCompletion:

    def test_mark_eligible_subject(self, tracker):
        assert tracker.toggle_completion("A") is True
        assert tracker.completed == {"A"}
        partition = tracker.partition()
        assert partition.eligible == {"B", "D"}
        assert partition.locked == {"C"}

    def test_locked_subject_refused(self, tracker):
        assert tracker.toggle_completion("C") is False
        assert tracker.completed == set()

    def test_toggle_on_then_off_restores_state(self, tracker):
        tracker.toggle_completion("A")
        before = tracker.partition()
        completed_before = tracker.completed

        tracker.toggle_completion("B")
        tracker.toggle_completion("B")

        assert tracker.completed == completed_before
        assert tracker.partition() == before

    def test_unmark_completed_subject_with_completed_dependents(self, tracker):
        tracker.toggle_completion("A")
        tracker.toggle_completion("B")
        assert tracker.toggle_completion("A") is True
        partition = tracker.partition()
        assert partition.status_of("B") == SubjectStatus.COMPLETED
        assert partition.status_of("A") == SubjectStatus.ELIGIBLE

    def test_unknown_subject(self, tracker):
        with pytest.raises(NotFoundError):
            tracker.toggle_completion("ghost")

    def test_chain_unlocks_step_by_step(self, tracker):
        assert tracker.partition().eligible == {"A", "D"}
        tracker.toggle_completion("A")
        tracker.toggle_completion("B")
        assert tracker.partition().eligible == {"C", "D"}
        assert tracker.partition().locked == set()


class TestClearAll:

    def test_resets_to_free_subjects(self, tracker, store):
        template_before = store.load("t1")
        tracker.toggle_completion("A")
        tracker.toggle_completion("B")
        tracker.toggle_completion("D")

        tracker.clear_all()

        assert tracker.completed == set()
        assert tracker.partition().eligible == {"A", "D"}
        assert store.load("t1") == template_before


class TestEditing:

    def test_add_subject_persists(self, tracker, store):
        subject = tracker.add_subject("E", "data", 3, ["C"], subject_id="E")
        assert subject.id == "E"
        template = store.load("t1")
        assert "E" in template.subject_ids
        assert template.categories == ["math", "programming", "data"]
        assert tracker.partition().status_of("E") == SubjectStatus.LOCKED

    def test_remove_subject_drops_completion(self, tracker, store):
        tracker.toggle_completion("A")
        tracker.toggle_completion("D")
        tracker.remove_subject("A")

        assert tracker.completed == {"D"}
        assert store.load("t1").get_subject("B").prerequisites == []
        assert tracker.partition().eligible == {"B"}

    def test_completion_survives_prerequisite_edits(self, tracker, store):
        tracker.toggle_completion("A")
        tracker.toggle_completion("B")
        tracker.toggle_completion("C")
        tracker.remove_subject("A")
        tracker.add_subject("Z", "math", 1, subject_id="Z")

        template = store.load("t1")
        template.subjects[0] = template.subjects[0].model_copy(update={"prerequisites": ["Z"]})
        store.save(template)

        assert tracker.partition().status_of("B") == SubjectStatus.COMPLETED


class TestReadModels:

    def test_report(self, tracker):
        tracker.toggle_completion("A")
        report = tracker.report()
        assert report.overall.total_subjects == 4
        assert report.overall.total_completed == 1
        assert report.overall.overall_percentage == 25
        assert report.next_milestone.remaining == 1
        assert report.eligible_count == 2
        assert report.locked_count == 1

    def test_term_board(self, tracker):
        tracker.toggle_completion("A")
        board = tracker.term_board()

        assert [g.term.label for g in board] == ["1", "1.5", "2"]
        first = board[0]
        assert [c.subject.id for c in first.cards] == ["A", "D"]
        assert first.completed_count == 1
        assert first.total_count == 2
        intermediate = board[1]
        assert intermediate.term.is_intermediate
        assert intermediate.cards[0].status == SubjectStatus.LOCKED
        assert intermediate.cards[0].missing_prerequisites == ["B"]

    def test_invalid_template_surfaces_error(self, store):
        template = store.load("t1")
        template.subjects[0] = template.subjects[0].model_copy(update={"prerequisites": ["C"]})
        store.save(template)

        tracker = CurriculumTracker(store, "t1")
        with pytest.raises(CycleError):
            tracker.partition()


class TestDefaultCurriculum:

    def test_walkthrough(self):
        store = MemoryTemplateStore()
        template = create_default_template("alice")
        store.save(template)
        tracker = CurriculumTracker(store, template.id)

        for sid in ["prog1", "prog2", "fundcomp"]:
            assert tracker.toggle_completion(sid)

        partition = tracker.partition()
        assert "algo1" in partition.eligible
        assert "algo2" in partition.locked
        assert tracker.report().overall.total_subjects == 44
