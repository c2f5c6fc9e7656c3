"""Tests for core data models."""

import pytest

from election.models import ElectionResults, Party, Standing, Voter
from tests.conftest import make_parties


def summarize(standings):
    return [(s.name, s.votes, s.rank, s.tied) for s in standings]


class TestParty:
    def test_starts_with_no_votes(self):
        assert Party("BJP").votes == 0

    def test_increment(self):
        party = Party("BJP")
        party.increment()
        party.increment()
        assert party.votes == 2

    def test_str(self):
        assert str(Party("Others", 3)) == "Others (Votes: 3)"


class TestVoter:
    def test_starts_not_voted(self):
        assert Voter("A1", "Alice").has_voted is False

    def test_mark_voted(self):
        voter = Voter("A1", "Alice")
        voter.mark_voted()
        assert voter.has_voted is True


class TestBuildStandings:
    def test_no_ties(self):
        result = Standing.build_standings(make_parties({"A": 1, "B": 5, "C": 3}))
        assert summarize(result) == [
            ("B", 5, 1, False),
            ("C", 3, 2, False),
            ("A", 1, 3, False),
        ]

    def test_tie_in_middle(self):
        result = Standing.build_standings(make_parties({"D": 0, "C": 2, "B": 2, "A": 4}))
        assert summarize(result) == [
            ("A", 4, 1, False),
            ("B", 2, 2, True),
            ("C", 2, 2, True),
            ("D", 0, 4, False),
        ]

    def test_tie_at_start_ordered_by_name(self):
        result = Standing.build_standings(make_parties({"Zeta": 3, "Alpha": 3, "Mid": 1}))
        assert summarize(result) == [
            ("Alpha", 3, 1, True),
            ("Zeta", 3, 1, True),
            ("Mid", 1, 3, False),
        ]

    def test_all_tied(self):
        result = Standing.build_standings(make_parties({"C": 0, "B": 0, "A": 0}))
        assert summarize(result) == [
            ("A", 0, 1, True),
            ("B", 0, 1, True),
            ("C", 0, 1, True),
        ]

    def test_single_party(self):
        result = Standing.build_standings(make_parties({"A": 7}))
        assert summarize(result) == [("A", 7, 1, False)]

    def test_empty(self):
        assert Standing.build_standings([]) == []

    def test_to_dict(self):
        result = Standing.build_standings(make_parties({"A": 2, "B": 1}))
        assert [s.to_dict() for s in result] == [
            {"name": "A", "votes": 2, "rank": 1, "tied": False},
            {"name": "B", "votes": 1, "rank": 2, "tied": False},
        ]


class TestElectionResults:
    def test_total_votes(self):
        results = ElectionResults.from_parties(make_parties({"A": 2, "B": 3, "C": 0}))
        assert results.total_votes == 5

    def test_get_votes(self):
        results = ElectionResults.from_parties(make_parties({"A": 2, "B": 3}))
        assert results.get_votes("B") == 3
        assert results.get_votes("Z") is None

    def test_single_winner(self):
        results = ElectionResults.from_parties(make_parties({"A": 2, "B": 3}))
        assert results.winners() == ["B"]

    def test_tied_winners(self):
        results = ElectionResults.from_parties(make_parties({"B": 3, "A": 3, "C": 1}))
        assert results.winners() == ["A", "B"]

    def test_no_winner_without_votes(self):
        results = ElectionResults.from_parties(make_parties({"A": 0, "B": 0}))
        assert results.winners() == []

    def test_to_dict(self):
        results = ElectionResults.from_parties(make_parties({"A": 1, "B": 0}))
        assert results.to_dict() == {
            "standings": [
                {"name": "A", "votes": 1, "rank": 1, "tied": False},
                {"name": "B", "votes": 0, "rank": 2, "tied": False},
            ],
            "total_votes": 1,
            "winners": ["A"],
        }


class TestReadOnlyFields:
    def test_party_name(self):
        party = Party("BJP")
        with pytest.raises(AttributeError):
            party.name = "Renamed"
        assert party.name == "BJP"

    def test_party_votes(self):
        party = Party("BJP")
        with pytest.raises(AttributeError):
            party.votes = 10
        assert party.votes == 0

    def test_voter_identity(self):
        voter = Voter("A1", "Alice")
        with pytest.raises(AttributeError):
            voter.id = "B2"
        with pytest.raises(AttributeError):
            voter.name = "Mallory"
        assert (voter.id, voter.name) == ("A1", "Alice")

    def test_voted_flag_cannot_be_reset(self):
        voter = Voter("A1", "Alice")
        voter.mark_voted()
        with pytest.raises(AttributeError):
            voter.has_voted = False
        assert voter.has_voted is True

    def test_repr(self):
        assert repr(Party("BJP", 1)) == "Party(name='BJP', votes=1)"
        assert repr(Voter("A1", "Alice")) == "Voter(id='A1', name='Alice', has_voted=False)"
