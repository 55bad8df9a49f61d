"""
Relationship query tests.
"""

from coursegraph import PrerequisiteEdge, build_graph, get_dependent_courses, get_prerequisite_courses


class TestRelations:

    def test_chain_lookups(self, chain_graph):
        edges = chain_graph.edges

        assert get_prerequisite_courses(edges, "C") == ["B"]
        assert get_dependent_courses(edges, "A") == ["B"]
        assert get_prerequisite_courses(edges, "A") == []
        assert get_dependent_courses(edges, "C") == []

    def test_unknown_course(self, chain_graph):
        assert get_prerequisite_courses(chain_graph.edges, "NOPE") == []
        assert get_dependent_courses(chain_graph.edges, "NOPE") == []

    def test_order_follows_edges(self, skip_catalog):
        edges = build_graph(skip_catalog).edges

        assert get_prerequisite_courses(edges, "D") == ["A", "C"]
        assert get_dependent_courses(edges, "A") == ["B", "D"]

    def test_duplicates_are_kept(self):
        edges = [PrerequisiteEdge.between("A", "B"), PrerequisiteEdge.between("A", "B")]

        assert get_dependent_courses(edges, "A") == ["B", "B"]
        assert get_prerequisite_courses(edges, "B") == ["A", "A"]
