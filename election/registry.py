"""Registries of parties and voters.

Both registries are keyed by a unique string and keep insertion order, so
listings are deterministic.
"""

from collections.abc import Iterable

from election.errors import DuplicatePartyError, DuplicateVoterError, PartyNotFoundError, VoterNotFoundError
from election.models import Party, Voter

DEFAULT_PARTIES = (
    "BJP",
    "Indian National Congress",
    "Aam Aadmi Party",
    "Bahujan Samaj Party",
    "Communist Party of India (Marxist)",
    "Nationalist Congress Party",
    "Trinamool Congress",
    "Others",
)


class PartyRegistry:
    """Parties by name, in the order they were added."""

    def __init__(self, names: Iterable[str] = ()):
        self._parties: dict[str, Party] = {}
        for name in names:
            self.add(name)

    def add(self, name: str) -> Party:
        """Add a party with no votes.

        Raises:
            DuplicatePartyError: If a party with this name already exists
        """
        if name in self._parties:
            raise DuplicatePartyError(name)
        party = Party(name)
        self._parties[name] = party
        return party

    def get(self, name: str) -> Party:
        """Return the party with this name.

        Raises:
            PartyNotFoundError: If there is no such party
        """
        try:
            return self._parties[name]
        except KeyError:
            raise PartyNotFoundError(name) from None

    def names(self) -> list[str]:
        return list(self._parties)

    def all(self) -> list[Party]:
        return list(self._parties.values())

    def __contains__(self, name: object) -> bool:
        return name in self._parties

    def __len__(self) -> int:
        return len(self._parties)


class VoterRegistry:
    """Voters by ID, in the order they registered."""

    def __init__(self):
        self._voters: dict[str, Voter] = {}

    def register(self, voter_id: str, name: str) -> Voter:
        """Register a voter who has not voted yet.

        Raises:
            DuplicateVoterError: If the ID is already registered
        """
        if voter_id in self._voters:
            raise DuplicateVoterError(voter_id)
        voter = Voter(voter_id, name)
        self._voters[voter_id] = voter
        return voter

    def get(self, voter_id: str) -> Voter:
        """Return the voter with this ID.

        Raises:
            VoterNotFoundError: If no voter has this ID
        """
        try:
            return self._voters[voter_id]
        except KeyError:
            raise VoterNotFoundError(voter_id) from None

    def all(self) -> list[Voter]:
        return list(self._voters.values())

    def mark_voted(self, voter_id: str) -> None:
        # Callers check existence and the has_voted flag first.
        self._voters[voter_id].mark_voted()

    def voted_count(self) -> int:
        return sum(1 for v in self._voters.values() if v.has_voted)

    def __contains__(self, voter_id: object) -> bool:
        return voter_id in self._voters

    def __len__(self) -> int:
        return len(self._voters)
