"""Election controller: owns the registries and the voting window."""

from collections.abc import Iterable

from loguru import logger

from election.errors import (
    DuplicateVoteError,
    ElectionError,
    InvalidPartyError,
    NoPartiesError,
    PartyNotFoundError,
    VotingNotActiveError,
    VotingStillActiveError,
)
from election.models import ElectionResults, Party, Voter
from election.registry import DEFAULT_PARTIES, PartyRegistry, VoterRegistry


class Election:
    """A single election: parties, voters and whether voting is open.

    All rules are enforced here. Every operation either succeeds or raises
    an ElectionError without changing any state. The election starts closed.

    Example:
        >>> election = Election()
        >>> election.register_voter("A1", "Alice")
        Voter(id='A1', name='Alice', has_voted=False)
        >>> election.start_voting()
        True
        >>> election.cast_vote("A1", "BJP")
        Party(name='BJP', votes=1)
    """

    def __init__(self, parties: Iterable[str] = DEFAULT_PARTIES):
        self.parties = PartyRegistry(parties)
        self.voters = VoterRegistry()
        self._voting_open = False

    @property
    def voting_open(self) -> bool:
        return self._voting_open

    def add_party(self, name: str) -> Party:
        """Add a party; it is immediately a valid vote target."""
        party = self.parties.add(name)
        logger.info("Party '{}' added", name)
        return party

    def register_voter(self, voter_id: str, name: str) -> Voter:
        try:
            voter = self.voters.register(voter_id, name)
        except ElectionError as e:
            logger.debug("Registration rejected for {}: {}", voter_id, e)
            raise
        logger.info("Voter {} registered", voter_id)
        return voter

    def list_parties(self) -> list[str]:
        return self.parties.names()

    def list_voters(self) -> list[Voter]:
        return self.voters.all()

    def start_voting(self) -> bool:
        """Open voting. Returns False if it was already open."""
        if self._voting_open:
            return False
        self._voting_open = True
        logger.info("Voting opened")
        return True

    def stop_voting(self) -> bool:
        """Close voting. Returns False if it was already closed."""
        if not self._voting_open:
            return False
        self._voting_open = False
        logger.info("Voting closed")
        return True

    def cast_vote(self, voter_id: str, party_name: str) -> Party:
        """Record one vote from a voter for a party.

        Checks run in this order and stop at the first failure, so a bad
        party name never marks the voter as having voted.

        Returns:
            The party that received the vote

        Raises:
            VotingNotActiveError: If voting is closed
            VoterNotFoundError: If the voter is not registered
            DuplicateVoteError: If the voter has already voted
            InvalidPartyError: If there is no party with this name
        """
        try:
            if not self._voting_open:
                raise VotingNotActiveError()

            voter = self.voters.get(voter_id)
            if voter.has_voted:
                raise DuplicateVoteError(voter_id)

            try:
                party = self.parties.get(party_name)
            except PartyNotFoundError:
                raise InvalidPartyError(party_name) from None
        except ElectionError as e:
            logger.debug("Vote rejected for {}: {}", voter_id, e)
            raise

        party.increment()
        self.voters.mark_voted(voter_id)
        logger.info("Vote recorded for {}", party_name)
        return party

    def results(self) -> ElectionResults:
        """Tally the votes once voting has closed.

        Raises:
            VotingStillActiveError: If voting is open
            NoPartiesError: If there are no parties
        """
        if self._voting_open:
            raise VotingStillActiveError()
        if not len(self.parties):
            raise NoPartiesError()
        return ElectionResults.from_parties(self.parties.all())
