"""Core data models for parties, voters and election results."""

from dataclasses import dataclass
from typing import Any, Self


class Party:
    """A named option voters can vote for.

    The name is fixed at creation and the vote count only changes through
    ``increment()``.
    """

    def __init__(self, name: str, votes: int = 0):
        self._name = name
        self._votes = votes

    @property
    def name(self) -> str:
        return self._name

    @property
    def votes(self) -> int:
        return self._votes

    def increment(self) -> None:
        self._votes += 1

    def __repr__(self) -> str:
        return f"Party(name={self._name!r}, votes={self._votes})"

    def __str__(self) -> str:
        return f"{self._name} (Votes: {self._votes})"


class Voter:
    """A registered voter.

    ``id`` (e.g. an Aadhaar number) and ``name`` are fixed at registration.
    ``has_voted`` can only go from False to True, through ``mark_voted()``.
    """

    def __init__(self, voter_id: str, name: str):
        self._id = voter_id
        self._name = name
        self._has_voted = False

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def has_voted(self) -> bool:
        return self._has_voted

    def mark_voted(self) -> None:
        self._has_voted = True

    def __repr__(self) -> str:
        return f"Voter(id={self._id!r}, name={self._name!r}, has_voted={self._has_voted})"


@dataclass
class Standing:
    """A party's position in a result tally.

    Attributes:
        name: Party name
        votes: Votes received
        rank: 1-indexed placement (tied parties share the same rank)
        tied: Whether another party has the same number of votes
    """
    name: str
    votes: int
    rank: int
    tied: bool

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "votes": self.votes, "rank": self.rank, "tied": self.tied}

    def __str__(self) -> str:
        return f"{self.name} (Votes: {self.votes})"

    @classmethod
    def build_standings(cls, parties: list[Party]) -> list[Self]:
        """Build standings from parties, most votes first.

        Parties with equal votes are ordered by name and share a rank; the
        next rank skips past them (1, 2, 2, 4).
        """
        ordered = sorted(parties, key=lambda p: (-p.votes, p.name))

        counts: dict[int, int] = {}
        for party in ordered:
            counts[party.votes] = counts.get(party.votes, 0) + 1

        standings = []
        rank = 1
        for position, party in enumerate(ordered):
            if position > 0 and party.votes != ordered[position - 1].votes:
                rank = position + 1
            standings.append(cls(
                name=party.name,
                votes=party.votes,
                rank=rank,
                tied=counts[party.votes] > 1,
            ))

        return standings


@dataclass
class ElectionResults:
    """Tally of a closed election.

    Attributes:
        standings: Parties in order from most to fewest votes
        total_votes: Sum of all parties' votes
    """
    standings: list[Standing]
    total_votes: int = 0

    @classmethod
    def from_parties(cls, parties: list[Party]) -> Self:
        return cls(
            standings=Standing.build_standings(parties),
            total_votes=sum(p.votes for p in parties),
        )

    def get_votes(self, party: str) -> int | None:
        """Get the votes for a party, or None if it is not in the tally."""
        for s in self.standings:
            if s.name == party:
                return s.votes
        return None

    def winners(self) -> list[str]:
        """Names of the parties in first place, or none if no votes were cast."""
        if self.total_votes == 0:
            return []
        return [s.name for s in self.standings if s.rank == 1]

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "standings": [s.to_dict() for s in self.standings],
            "total_votes": self.total_votes,
            "winners": self.winners(),
        }
