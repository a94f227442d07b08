"""Stone, paper, scissors against the computer."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from coursekit.library import read_num_in_range

Reader = Callable[[str], str]
Writer = Callable[[str], None]

_CLEAR_SCREEN = "\033[2J\033[H\033[0m"
_LINE = "\t\t------------------------------------------------"


class Tool(Enum):
    """A player's choice."""

    STONE = 1
    PAPER = 2
    SCISSORS = 3

    def __str__(self) -> str:
        return self.name.capitalize()


class Winner(Enum):
    """Who won a round or a game."""

    USER = 1
    BOT = 2
    NO_WINNER = 3

    def __str__(self) -> str:
        return {Winner.USER: "User", Winner.BOT: "Bot", Winner.NO_WINNER: "NoWinner"}[self]


_BEATS = {
    Tool.PAPER: Tool.STONE,
    Tool.STONE: Tool.SCISSORS,
    Tool.SCISSORS: Tool.PAPER,
}

_STYLES = {
    Winner.USER: "\033[32m",
    Winner.BOT: "\033[31m\a",
    Winner.NO_WINNER: "\033[33m",
}


def tool_from_number(number: int) -> Tool:
    """Return the tool numbered 1 to 3."""
    try:
        return Tool(number)
    except ValueError:
        raise ValueError(f"no tool numbered {number}") from None


def round_winner(user_choice: Tool, bot_choice: Tool) -> Winner:
    """Decide who wins a round."""
    if user_choice is bot_choice:
        return Winner.NO_WINNER
    return Winner.USER if _BEATS[user_choice] is bot_choice else Winner.BOT


def overall_winner(user_wins: int, bot_wins: int) -> Winner:
    """Decide who wins the game from the rounds each side won."""
    if user_wins == bot_wins:
        return Winner.NO_WINNER
    return Winner.USER if user_wins > bot_wins else Winner.BOT


@dataclass(frozen=True)
class Round:
    """The two choices of one round."""

    user_choice: Tool
    bot_choice: Tool

    @property
    def winner(self) -> Winner:
        return round_winner(self.user_choice, self.bot_choice)


def count_wins(player: Winner, rounds: Iterable[Round]) -> int:
    """Count the rounds whose winner is player."""
    return sum(1 for round_ in rounds if round_.winner is player)


def random_tool(rng: Optional[random.Random] = None) -> Tool:
    """Pick a tool at random."""
    return Tool((rng if rng is not None else random.Random()).randint(1, 3))


def format_round(number: int, round_: Round) -> str:
    """Render the outcome of one round."""
    return (
        f"\n--------------------Round [{number}]--------------------\n\n"
        f"User choice :\t{round_.user_choice}\n"
        f"Bot choice :\t{round_.bot_choice}\n"
        f"Round Winner :\t{round_.winner}\n"
        "\n-------------------------------------------------\n\n"
    )


def format_results(rounds: Sequence[Round], rounds_number: int) -> str:
    """Render the end-of-game summary over the given rounds."""
    user_wins = count_wins(Winner.USER, rounds)
    bot_wins = count_wins(Winner.BOT, rounds)
    winner = overall_winner(user_wins, bot_wins)
    return (
        f"{_LINE}\n\n"
        "\t\t          + + + G a m e  O v e r + + +"
        f"\n\n{_LINE}"
        "\n\n\t\t----------------[ Game Results ]----------------\n\n"
        f"\t\tGame rounds :\t{rounds_number}\n"
        f"\t\tUser won times:\t{user_wins}\n"
        f"\t\tBot won times:\t{bot_wins}\n"
        f"\t\tFinal winner:\t{winner}\n"
        f"\n\n{_LINE}\n\n"
    )


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


class RockPaperScissors:
    """The interactive game; its history carries over when a game is repeated."""

    def __init__(
        self,
        reader: Reader = input,
        write: Writer = _write_stdout,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.reader = reader
        self.write = write
        self.rng = rng if rng is not None else random.Random()
        self.history: list[Round] = []

    def _read_choice(self) -> Tool:
        while True:
            text = self.reader("Your choice: [1]:Stone, [2]:Paper, [3]:Scissors ? ").strip()
            try:
                number = int(text)
            except ValueError:
                continue
            if number in (1, 2, 3):
                return tool_from_number(number)

    def play_rounds(self, rounds_number: int) -> list[Round]:
        """Play rounds_number rounds, add them to the history and return them."""
        played = []
        for number in range(1, rounds_number + 1):
            self.write(f"\nRound [{number}] begins:\n\n")
            round_ = Round(self._read_choice(), random_tool(self.rng))
            self.write(_STYLES[round_.winner])
            self.write(format_round(number, round_))
            played.append(round_)
            self.history.append(round_)
        return played

    def run(self) -> None:
        """Play games until the user declines another one."""
        first = True
        while True:
            if not first:
                self.write(_CLEAR_SCREEN)
            first = False
            rounds_number = int(
                read_num_in_range(
                    "How many rounds do you want to play? [1-10] : ", 1, 10, self.reader
                )
            )
            self.play_rounds(rounds_number)
            self.write(format_results(self.history, rounds_number))
            winner = overall_winner(
                count_wins(Winner.USER, self.history), count_wins(Winner.BOT, self.history)
            )
            self.write(_STYLES[winner])
            again = self.reader("\t\tDo you want to play agian? [Y/N] : ").strip()[:1]
            if again not in ("y", "Y"):
                return


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the game on the console."""
    parser = argparse.ArgumentParser(description="Play stone, paper, scissors.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the computer's choices")
    args = parser.parse_args(argv)
    game = RockPaperScissors(rng=random.Random(args.seed))
    try:
        game.run()
    except (EOFError, KeyboardInterrupt):
        _write_stdout("\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())