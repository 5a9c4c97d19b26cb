"""
Structural validation for templates.

A template is usable by the resolver only when:
- subject ids are unique
- every prerequisite id names a subject of the same template
- the prerequisite relation is acyclic

Failures are reported, never repaired.
"""

import networkx as nx

from pensum.errors import CurriculumError, CycleError, DanglingReferenceError, DuplicateIdError
from pensum.schemas import Subject, Template


def build_prerequisite_graph(subjects: list[Subject]) -> nx.DiGraph:
    """
    Build a directed graph with edges prerequisite -> dependent.

    Prerequisite ids that do not name a subject are left out.
    """
    G = nx.DiGraph()
    known = set()
    for subject in subjects:
        G.add_node(subject.id)
        known.add(subject.id)
    for subject in subjects:
        for prereq in subject.prerequisites:
            if prereq in known:
                G.add_edge(prereq, subject.id)
    return G


def find_integrity_issues(template: Template) -> list[CurriculumError]:
    """
    Collect every structural problem in a template.

    Returns errors in check order: duplicates, dangling references, cycle.
    At most one cycle is reported.
    """
    issues: list[CurriculumError] = []

    seen: set[str] = set()
    reported: set[str] = set()
    for subject in template.subjects:
        if subject.id in seen and subject.id not in reported:
            issues.append(DuplicateIdError(subject.id))
            reported.add(subject.id)
        seen.add(subject.id)

    for subject in template.subjects:
        for prereq in subject.prerequisites:
            if prereq not in seen:
                issues.append(DanglingReferenceError(subject.id, prereq))

    G = build_prerequisite_graph(template.subjects)
    try:
        cycle = nx.find_cycle(G)
        issues.append(CycleError([u for u, _ in cycle]))
    except nx.NetworkXNoCycle:
        pass

    return issues


def validate_template(template: Template) -> Template:
    """
    Raise the first structural error found, or return the template unchanged.

    Raises:
        DuplicateIdError: two subjects share an id
        DanglingReferenceError: a prerequisite id is not in the template
        CycleError: the prerequisite graph has a cycle
    """
    issues = find_integrity_issues(template)
    if issues:
        raise issues[0]
    return template


validate = validate_template


def topological_order(template: Template) -> list[str]:
    """
    Subject ids in a valid study order.

    Among subjects whose prerequisites are all placed, earlier terms come
    first, then template order.
    """
    validate_template(template)

    position = {s.id: i for i, s in enumerate(template.subjects)}
    term_value = {s.id: s.term.value for s in template.subjects}
    G = build_prerequisite_graph(template.subjects)
    return list(nx.lexicographical_topological_sort(
        G, key=lambda sid: (term_value[sid], position[sid])
    ))
