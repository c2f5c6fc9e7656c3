"""Simulate an election with fake voters and random ballots.

Registers voters with generated names, opens voting, lets a share of them
vote for a random party, closes voting and prints the tally. A fixed seed
gives the same election every time.

Usage:
    python -m election.simulate
    python -m election.simulate -n 500 --turnout 0.6 --seed 42
"""

import argparse
import json
import random

from faker import Faker
from loguru import logger

from election.controller import Election
from election.errors import NoPartiesError
from election.log import setup_logging
from election.models import ElectionResults

SEED = 20240419


def generate_voters(count: int, seed: int) -> list[tuple[str, str]]:
    """Generate (voter_id, name) pairs with unique sequential IDs."""
    fake = Faker(["en_IN", "hi_IN"])
    Faker.seed(seed)
    return [(f"V{i:05d}", fake.name()) for i in range(1, count + 1)]


def simulate_election(election: Election, num_voters: int, seed: int = SEED,
                      turnout: float = 1.0) -> ElectionResults:
    """Run a whole election on ``election`` and return its results.

    Args:
        election: A closed election with at least one party
        num_voters: Number of voters to register
        seed: Seed for both the fake names and the ballots
        turnout: Share of registered voters who vote, between 0 and 1

    Raises:
        ValueError: If turnout is outside [0, 1]
        NoPartiesError: If the election has no parties to vote for
    """
    if not 0.0 <= turnout <= 1.0:
        raise ValueError(f"turnout must be between 0 and 1, got {turnout}")
    parties = election.list_parties()
    if not parties:
        raise NoPartiesError()

    for voter_id, name in generate_voters(num_voters, seed):
        election.register_voter(voter_id, name)

    rng = random.Random(seed)
    voters = election.list_voters()
    ballots = rng.sample(voters, round(len(voters) * turnout))

    election.start_voting()
    try:
        for voter in ballots:
            election.cast_vote(voter.id, rng.choice(parties))
    finally:
        election.stop_voting()

    logger.info("Simulated {} ballots from {} voters", len(ballots), len(voters))
    return election.results()


def main():
    parser = argparse.ArgumentParser(
        description="Simulate an election with fake voters")
    parser.add_argument("-n", "--voters", type=int, default=100,
                        help="Number of voters to register (default: 100)")
    parser.add_argument("--turnout", type=float, default=1.0,
                        help="Share of voters who vote (default: 1.0)")
    parser.add_argument("--seed", type=int, default=SEED,
                        help=f"Random seed (default: {SEED})")
    parser.add_argument("--json", action="store_true",
                        help="Print the results as JSON")
    args = parser.parse_args()

    setup_logging()

    results = simulate_election(Election(), args.voters, args.seed, args.turnout)

    if args.json:
        print(json.dumps(results.to_dict(), indent=2))
        return

    print("=== ELECTION RESULTS ===")
    for standing in results.standings:
        marker = " (tied)" if standing.tied else ""
        print(f"{standing.rank:>2}. {standing}{marker}")
    print(f"Total votes cast: {results.total_votes}")


if __name__ == "__main__":
    main()
