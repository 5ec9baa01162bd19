"""Tests for crossing filtering and per-wall deduplication."""
from penetration.core.hits import dedupe_hits, filter_hits
from penetration.models import RayHit


def hit(proximity, wall_id="W1"):
    return RayHit(proximity=proximity, wall_id=wall_id)


class TestFilterHits:

    def test_keeps_hits_within_length(self):
        hits = [hit(0.0), hit(4.0), hit(10.0)]
        assert filter_hits(hits, 10.0) == hits

    def test_discards_hits_beyond_conduit_end(self):
        # Conduit length 5, wall hit at 7
        assert filter_hits([hit(7.0)], 5.0) == []

    def test_discards_negative_proximity(self):
        assert filter_hits([hit(-0.5), hit(1.0)], 5.0) == [hit(1.0)]

    def test_empty_input(self):
        assert filter_hits([], 5.0) == []


class TestDedupeHits:

    def test_entry_and_exit_collapse_to_first(self):
        hits = [hit(4.0, "W1"), hit(4.2, "W1")]
        assert dedupe_hits(hits) == [hit(4.0, "W1")]

    def test_first_encountered_wins_regardless_of_proximity(self):
        hits = [hit(4.2, "W1"), hit(4.0, "W1")]
        assert dedupe_hits(hits) == [hit(4.2, "W1")]

    def test_distinct_walls_preserved_in_order(self):
        hits = [
            hit(2.0, "W2"), hit(4.0, "W1"), hit(2.3, "W2"), hit(4.2, "W1"), hit(8.0, "W3"),
        ]
        result = dedupe_hits(hits)
        assert [h.wall_id for h in result] == ["W2", "W1", "W3"]
        assert [h.proximity for h in result] == [2.0, 4.0, 8.0]

    def test_same_proximity_different_walls_both_kept(self):
        hits = [hit(3.0, "W1"), hit(3.0, "W2")]
        assert len(dedupe_hits(hits)) == 2
