"""An arithmetic quiz played on the console."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from coursekit.library import read_num_in_range, read_positive_num

Reader = Callable[[str], str]
Writer = Callable[[str], None]

_CLEAR_SCREEN = "\033[2J\033[H\033[0m"
_STYLE_RIGHT = "\033[32m"
_STYLE_WRONG = "\033[31m\a"
_SEPARATOR = "-------------------------------------"


class Result(Enum):
    """Whether one answer was right."""

    RIGHT = 1
    WRONG = 2


class PassFail(Enum):
    """The verdict on a whole game."""

    PASS = 1
    FAIL = 2


class QuestionsLevel(Enum):
    """How large the numbers in the questions are."""

    EASY = 1
    MEDIUM = 2
    HARD = 3
    MIX = 4


class Operation(Enum):
    """The arithmetic operation a question asks for."""

    ADD = 1
    DIV = 2
    MUL = 3
    SUB = 4
    MIX = 5


_LEVEL_RANGES = {
    QuestionsLevel.EASY: (1, 10),
    QuestionsLevel.MEDIUM: (11, 30),
    QuestionsLevel.HARD: (31, 60),
}

_SYMBOLS = {
    Operation.ADD: "+",
    Operation.DIV: "/",
    Operation.MUL: "*",
    Operation.SUB: "-",
}

_LEVEL_NAMES = {
    QuestionsLevel.EASY: "Easy",
    QuestionsLevel.MEDIUM: "Meduim",
    QuestionsLevel.HARD: "Hard",
    QuestionsLevel.MIX: "Mix",
}


@dataclass(frozen=True)
class Round:
    """One question, its correct answer and, once asked, the user's answer."""

    first: int
    second: int
    operation: Operation
    answer: int
    user_answer: Optional[int] = None
    final_result: Optional[Result] = None


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _rng(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else random.Random()


def random_operation(rng: Optional[random.Random] = None) -> Operation:
    """Pick one of the four concrete operations at random."""
    return Operation(_rng(rng).randint(1, 4))


def random_level(rng: Optional[random.Random] = None) -> QuestionsLevel:
    """Pick one of the three concrete levels at random."""
    return QuestionsLevel(_rng(rng).randint(1, 3))


def numbers_for_level(level: QuestionsLevel, rng: Optional[random.Random] = None) -> tuple[int, int]:
    """Return two random operands from the range of the given level."""
    rng = _rng(rng)
    if level is QuestionsLevel.MIX:
        level = random_level(rng)
    low, high = _LEVEL_RANGES[level]
    return rng.randint(low, high), rng.randint(low, high)


def calculate(operation: Operation, first: int, second: int) -> int:
    """Apply operation to the operands; division truncates toward zero."""
    if operation is Operation.ADD:
        return first + second
    if operation is Operation.SUB:
        return first - second
    if operation is Operation.MUL:
        return first * second
    if operation is Operation.DIV:
        if second == 0:
            raise ZeroDivisionError("division by zero")
        quotient = abs(first) // abs(second)
        return quotient if (first < 0) == (second < 0) else -quotient
    raise ValueError(f"cannot calculate with {operation.name}")


def operation_symbol(operation: Operation) -> str:
    """Return the symbol shown for operation."""
    try:
        return _SYMBOLS[operation]
    except KeyError:
        raise ValueError(f"{operation.name} has no symbol") from None


def level_name(level: QuestionsLevel) -> str:
    """Return the display name of level."""
    return _LEVEL_NAMES[level]


def make_round(
    level: QuestionsLevel, operation: Operation, rng: Optional[random.Random] = None
) -> Round:
    """Create a question of the given level and operation, resolving MIX at random."""
    rng = _rng(rng)
    first, second = numbers_for_level(level, rng)
    if operation is Operation.MIX:
        operation = random_operation(rng)
    return Round(first, second, operation, calculate(operation, first, second))


def count_right_answers(rounds: Iterable[Round]) -> int:
    """Count the rounds answered correctly."""
    return sum(1 for round_ in rounds if round_.final_result is Result.RIGHT)


def final_verdict(number_of_rounds: int, right_answers: int) -> PassFail:
    """Pass when right answers are at least as many as wrong ones."""
    if right_answers >= number_of_rounds - right_answers:
        return PassFail.PASS
    return PassFail.FAIL


def format_question(round_: Round, current: int, total: int) -> str:
    """Render a question as shown before the user answers."""
    return (
        "\n\n"
        f"Question [{current}/{total}]\n\n"
        f"{round_.first}\n"
        f"{round_.second} {operation_symbol(round_.operation)}\n\n"
        "-----------\n"
    )


def format_answer_feedback(round_: Round) -> str:
    """Render the reaction to the user's answer."""
    if round_.final_result is Result.RIGHT:
        return "Right answer :)\n"
    return f"Wrong answer :(\nThe right answer is {round_.answer}\n"


def format_results(number_of_rounds: int, level: QuestionsLevel, right_answers: int) -> str:
    """Render the end-of-game summary."""
    verdict = final_verdict(number_of_rounds, right_answers)
    banner = "Y o u   P a s s" if verdict is PassFail.PASS else "Y o u   F a i l"
    return (
        f"{_SEPARATOR}\n\n"
        f"           {banner}           \n\n"
        f"{_SEPARATOR}\n\n"
        f"Number of questions : {number_of_rounds}\n"
        f"Questions level     : {level_name(level)}\n"
        f"Number of right answers : {right_answers}\n"
        f"Number of wrong answers : {number_of_rounds - right_answers}\n"
        f"{_SEPARATOR}\n\n"
    )


def _style_for(result: Result) -> str:
    return _STYLE_RIGHT if result is Result.RIGHT else _STYLE_WRONG


class MathGame:
    """The interactive quiz: asks questions, checks answers and keeps score."""

    def __init__(
        self,
        reader: Reader = input,
        write: Writer = _write_stdout,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.reader = reader
        self.write = write
        self.rng = _rng(rng)

    def _read_answer(self) -> int:
        while True:
            try:
                return int(self.reader("").strip())
            except ValueError:
                continue

    def play_round(
        self, current: int, total: int, level: QuestionsLevel, operation: Operation
    ) -> Round:
        """Ask one question and return it with the user's answer checked."""
        round_ = make_round(level, operation, self.rng)
        self.write(format_question(round_, current, total))
        user_answer = self._read_answer()
        result = Result.RIGHT if user_answer == round_.answer else Result.WRONG
        round_ = replace(round_, user_answer=user_answer, final_result=result)
        self.write(format_answer_feedback(round_))
        self.write(_style_for(result))
        return round_

    def play(
        self, number_of_rounds: int, level: QuestionsLevel, operation: Operation
    ) -> list[Round]:
        """Ask number_of_rounds questions and return them all."""
        return [
            self.play_round(current, number_of_rounds, level, operation)
            for current in range(1, number_of_rounds + 1)
        ]

    def _report(self, rounds: Sequence[Round], level: QuestionsLevel) -> None:
        right = count_right_answers(rounds)
        verdict = final_verdict(len(rounds), right)
        self.write(_style_for(Result.RIGHT if verdict is PassFail.PASS else Result.WRONG))
        self.write(format_results(len(rounds), level, right))

    def run(self) -> None:
        """Play games until the user declines another one."""
        while True:
            self.write(_CLEAR_SCREEN)
            number_of_rounds = int(
                read_positive_num("How many questions do you want to answer? ", self.reader)
            )
            operation = Operation(
                int(
                    read_num_in_range(
                        "Enter operation type [1] Add, [2] Div, [3] Mul, [4] Sub, [5] Mix :",
                        1,
                        5,
                        self.reader,
                    )
                )
            )
            level = QuestionsLevel(
                int(
                    read_num_in_range(
                        "Enter questions level [1] Easy, [2] Med, [3] Hard, [4] Mix :",
                        1,
                        4,
                        self.reader,
                    )
                )
            )
            rounds = self.play(number_of_rounds, level, operation)
            self._report(rounds, level)
            again = self.reader("Do you want to play again [Y/N]: ").strip()[:1]
            if again not in ("y", "Y"):
                return


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the quiz on the console."""
    parser = argparse.ArgumentParser(description="Answer arithmetic questions.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the questions")
    args = parser.parse_args(argv)
    game = MathGame(rng=random.Random(args.seed))
    try:
        game.run()
    except (EOFError, KeyboardInterrupt):
        _write_stdout("\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())