"""Errors raised by election operations.

Every failure here is a user-input condition. The message of each error is
what the operator is shown, and a failed operation never changes state.
"""


class ElectionError(Exception):
    """Base class for rejected election operations."""
    message = "Election operation failed."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class DuplicatePartyError(ElectionError):
    message = "Party already exists!"

    def __init__(self, name: str):
        super().__init__()
        self.name = name


class DuplicateVoterError(ElectionError):
    def __init__(self, voter_id: str):
        super().__init__(f"Voter with ID {voter_id} already registered!")
        self.voter_id = voter_id


class VoterNotFoundError(ElectionError, LookupError):
    message = "Voter not registered!"

    def __init__(self, voter_id: str):
        super().__init__()
        self.voter_id = voter_id


class PartyNotFoundError(ElectionError, LookupError):
    message = "Party not found!"

    def __init__(self, name: str):
        super().__init__()
        self.name = name


class InvalidPartyError(PartyNotFoundError):
    """Raised when a vote names a party that is not in the catalog."""
    message = "Invalid party name! Please choose from the list."


class VotingNotActiveError(ElectionError):
    message = "Voting is not active right now."


class DuplicateVoteError(ElectionError):
    message = "You have already voted! Multiple votes are not allowed."

    def __init__(self, voter_id: str):
        super().__init__()
        self.voter_id = voter_id


class VotingStillActiveError(ElectionError):
    """Results are withheld while the voting window is open."""
    message = "Voting is still in progress. Results will be available after voting ends."


class NoPartiesError(ElectionError):
    message = "No parties to display."
