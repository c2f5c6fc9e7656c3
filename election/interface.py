"""Menu-driven text interface for running an election from a terminal."""

import argparse
from collections.abc import Callable

from election.controller import Election
from election.errors import ElectionError
from election.log import setup_logging
from election.registry import DEFAULT_PARTIES
from election.settings import BANNER, LOG_LEVEL

MENU = (
    "1. Register Voter",
    "2. List Parties",
    "3. List Voters",
    "4. Start Voting (Admin)",
    "5. Stop Voting (Admin)",
    "6. Cast Vote",
    "7. Display Results",
    "8. Exit",
)

EXIT_CHOICE = "8"


class TextInterface:
    """Reads menu choices, runs one election operation each, and prints the outcome.

    Holds no election state of its own. Input and output are injectable:
    ``read`` takes a prompt and returns a line, ``write`` prints a line.
    """

    def __init__(self, election: Election,
                 read: Callable[[str], str] | None = None,
                 write: Callable[[str], None] | None = None):
        self.election = election
        self.read = read or input
        self.write = write or print
        self.actions: dict[str, Callable[[], None]] = {
            "1": self.register_voter,
            "2": self.list_parties,
            "3": self.list_voters,
            "4": self.start_voting,
            "5": self.stop_voting,
            "6": self.cast_vote,
            "7": self.display_results,
        }

    def ask(self, prompt: str) -> str:
        return self.read(prompt).strip()

    def run(self) -> None:
        """Loop until the operator exits or input runs out."""
        self.write(BANNER)
        while True:
            self.write("\n--- MENU ---")
            for line in MENU:
                self.write(line)
            try:
                choice = self.ask("Enter your choice: ")
                if choice == EXIT_CHOICE:
                    break
                self.handle(choice)
            except EOFError:
                break
        self.write("Exiting... Thank you for using the system.")

    def handle(self, choice: str) -> None:
        """Run the action for one menu choice, reporting rejected operations."""
        action = self.actions.get(choice)
        if action is None:
            self.write("Invalid choice! Please try again.")
            return
        try:
            action()
        except ElectionError as e:
            self.write(str(e))

    def register_voter(self) -> None:
        voter_id = self.ask("Enter Voter ID (e.g., Aadhar number): ")
        name = self.ask("Enter Voter Name: ")
        self.election.register_voter(voter_id, name)
        self.write(f"Voter '{name}' registered successfully.")

    def list_parties(self) -> None:
        self.write("\n--- Political Parties ---")
        for name in self.election.list_parties():
            self.write(name)
        self.write("--------------------------")

    def list_voters(self) -> None:
        self.write("\n--- Registered Voters ---")
        for voter in self.election.list_voters():
            voted = "yes" if voter.has_voted else "no"
            self.write(f"{voter.id} : {voter.name} [Voted: {voted}]")
        self.write("--------------------------")

    def start_voting(self) -> None:
        if self.election.start_voting():
            self.write("Voting has started.")
        else:
            self.write("Voting is already active.")

    def stop_voting(self) -> None:
        if self.election.stop_voting():
            self.write("Voting has been stopped.")
        else:
            self.write("Voting is already stopped.")

    def cast_vote(self) -> None:
        voter_id = self.ask("Enter your Voter ID: ")
        party_name = self.ask("Enter Party Name you want to vote for: ")
        party = self.election.cast_vote(voter_id, party_name)
        self.write(f"Vote cast successfully for {party.name}.")

    def display_results(self) -> None:
        results = self.election.results()
        self.write("\n=== ELECTION RESULTS ===")
        for standing in results.standings:
            self.write(str(standing))
        self.write(f"Total votes cast: {results.total_votes}")
        self.write("=========================")


def build_election(extra_parties: list[str], use_defaults: bool = True,
                   write: Callable[[str], None] = print) -> Election:
    """Create an election with the default catalog and any extra parties."""
    election = Election(DEFAULT_PARTIES if use_defaults else ())
    for name in extra_parties:
        try:
            election.add_party(name)
        except ElectionError as e:
            write(str(e))
        else:
            write(f"Party '{name}' added successfully.")
    return election


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        description="Run an interactive in-memory election")
    parser.add_argument("--party", action="append", default=[], metavar="NAME",
                        help="Add a party to the catalog (repeatable)")
    parser.add_argument("--no-default-parties", action="store_true",
                        help="Start with an empty party catalog")
    parser.add_argument("--log-level", default=LOG_LEVEL,
                        help=f"Console log level (default: {LOG_LEVEL})")
    parser.add_argument("--log-file", action="store_true",
                        help="Also write a debug log file")
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level.upper(), to_file=args.log_file)

    election = build_election(args.party, use_defaults=not args.no_default_parties)
    TextInterface(election).run()


if __name__ == "__main__":
    main()
