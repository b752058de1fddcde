"""Tests for top-K selection and filtering."""

from fuzzfind.search import MatchRecord, filter_matches, top_matches, view_key


def _records(n: int) -> list[MatchRecord]:
    return [MatchRecord(score=i, display=f"./file_{i:02d}") for i in range(n)]


class TestTopMatches:
    """Tests for top_matches."""

    def test_keeps_k_best_and_counts_overflow(self) -> None:
        """Test that 50 matches with K=10 show 10 and report 40 more."""
        top, overflow = top_matches(_records(50), 10)

        assert len(top) == 10
        assert overflow == 40
        assert [r.score for r in top] == list(range(49, 39, -1))

    def test_fewer_than_k(self) -> None:
        """Test that overflow is zero when everything fits."""
        top, overflow = top_matches(_records(3), 10)

        assert len(top) == 3
        assert overflow == 0

    def test_empty(self) -> None:
        """Test selection over no records."""
        assert top_matches([], 10) == ([], 0)

    def test_ties_break_on_display_text(self) -> None:
        """Test that equal scores are ordered by path."""
        records = [
            MatchRecord(score=5, display="./b"),
            MatchRecord(score=5, display="./a"),
            MatchRecord(score=9, display="./z"),
        ]

        top, _ = top_matches(records, 3)

        assert [r.display for r in top] == ["./z", "./a", "./b"]

    def test_independent_of_arrival_order(self) -> None:
        """Test that the view depends only on the multiset of records."""
        records = _records(30)

        forward, _ = top_matches(records, 5)
        backward, _ = top_matches(list(reversed(records)), 5)

        assert forward == backward

    def test_accepts_any_iterable(self) -> None:
        """Test selection from a generator."""
        top, overflow = top_matches((r for r in _records(4)), 2)

        assert len(top) == 2
        assert overflow == 2


class TestViewKey:
    """Tests for view_key."""

    def test_same_displays_same_key(self) -> None:
        """Test that the key ignores scores."""
        first = [MatchRecord(score=1, display="./a")]
        second = [MatchRecord(score=7, display="./a")]

        assert view_key(first) == view_key(second)

    def test_order_matters(self) -> None:
        """Test that a reordered view counts as different."""
        a = MatchRecord(score=1, display="./a")
        b = MatchRecord(score=1, display="./b")

        assert view_key([a, b]) != view_key([b, a])


class TestFilterMatches:
    """Tests for filter_matches."""

    def test_substring_filter(self) -> None:
        """Test filtering the main.py / README.md scenario."""
        records = [
            MatchRecord(score=3, display="./src/main.py"),
            MatchRecord(score=2, display="./README.md"),
        ]

        result = filter_matches(records, "src")

        assert [r.display for r in result] == ["./src/main.py"]

    def test_no_match_gives_empty_list(self) -> None:
        """Test a substring present nowhere."""
        assert filter_matches(_records(5), "nothing") == []

    def test_filter_is_case_sensitive(self) -> None:
        """Test that case must match."""
        records = [MatchRecord(score=1, display="./README.md")]

        assert filter_matches(records, "readme") == []

    def test_preserves_order(self) -> None:
        """Test that filtering keeps input order."""
        records = _records(20)

        result = filter_matches(records, "file_1")

        assert [r.display for r in result] == [f"./file_{i:02d}" for i in range(10, 20)]
