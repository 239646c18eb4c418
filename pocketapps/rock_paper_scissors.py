"""Rock, paper, scissors against the computer, scored over many rounds."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum, IntEnum

DONE = 4


class Move(IntEnum):
    ROCK = 1
    PAPER = 2
    SCISSORS = 3


class Outcome(Enum):
    """Result of a round from the player's side; the value is its message."""

    WIN = "You Won!!!"
    LOSE = "You Lost!!!"
    TIE = "It's A Tie!!!"


_BEATS = {
    Move.ROCK: Move.SCISSORS,
    Move.PAPER: Move.ROCK,
    Move.SCISSORS: Move.PAPER,
}


def judge(player: Move, computer: Move) -> Outcome:
    """Decide a round between the player's and the computer's moves."""
    player, computer = Move(player), Move(computer)
    if player is computer:
        return Outcome.TIE
    return Outcome.WIN if _BEATS[player] is computer else Outcome.LOSE


@dataclass
class Game:
    """Running scores and round counter of a match."""

    player_score: int = 0
    computer_score: int = 0
    round: int = 1
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    def play(self, move: Move, computer: Move | None = None) -> tuple[Move, Outcome]:
        """Play one round; the computer moves at random unless given."""
        move = Move(move)
        computer = Move(computer) if computer is not None else self.rng.choice(list(Move))
        outcome = judge(move, computer)
        if outcome is Outcome.WIN:
            self.player_score += 1
        elif outcome is Outcome.LOSE:
            self.computer_score += 1
        self.round += 1
        return computer, outcome

    def verdict(self) -> str:
        if self.player_score < self.computer_score:
            return "YOU LOST THE GAME!!!"
        if self.player_score > self.computer_score:
            return "YOU WON THE GAME!!!"
        return "IT'S A DRAW!!!"


def _read_choice() -> int | None:
    try:
        text = input()
    except EOFError:
        return DONE
    try:
        return int(text.strip())
    except ValueError:
        return None


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Play rock, paper, scissors.")
    parser.add_argument("--seed", type=int, help="seed for the computer's moves")
    args = parser.parse_args(argv)
    game = Game(rng=random.Random(args.seed))

    print("Welcome to ROCK PAPER AND SCISSORS!!!")
    while True:
        print(f"ROUND- {game.round}!!!")
        print("Please choose your item (1 - 4):")
        print("1-Rock")
        print("2-Paper")
        print("3-Scissor")
        print("4-Done")
        choice = _read_choice()
        if choice == DONE:
            print(game.verdict())
            return 0
        try:
            move = Move(choice)
        except ValueError:
            print("Invalid Output!!!")
            print("Please Try Again!!!")
            game.round += 1
        else:
            computer, outcome = game.play(move)
            print(f"You choose {move.name}!!!")
            print(f"The computer choose {computer.name}!!!")
            print(outcome.value)
        print(f"SCORE: {game.computer_score} - {game.player_score}")