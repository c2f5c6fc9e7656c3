"""Shared test helpers."""

import pytest

from election.controller import Election
from election.models import ElectionResults, Party


def make_parties(votes_table: dict[str, int]) -> list[Party]:
    """Build parties from a compact {name: votes} table, in table order."""
    return [Party(name, votes) for name, votes in votes_table.items()]


def standing_names(results: ElectionResults) -> list[str]:
    """Party names from a tally, in ranked order."""
    return [s.name for s in results.standings]


def assert_votes_match_voters(election: Election):
    """The sum of all party votes equals the number of voters who voted."""
    total = sum(p.votes for p in election.parties.all())
    assert total == election.voters.voted_count()


@pytest.fixture
def election():
    """A fresh election with the default eight parties."""
    return Election()


@pytest.fixture
def open_election(election):
    """Default election with voter A1/Alice registered and voting open."""
    election.register_voter("A1", "Alice")
    election.start_voting()
    return election
