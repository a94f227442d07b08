# coursekit

Two small console games and a toolbox of helpers for numbers, lists and text.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Games

Both games print ANSI escape sequences to colour the terminal green, red or
yellow after each answer or round, and to clear the screen between games.
Pressing Ctrl-C or ending the input stops a game; the command then exits with
status 1.

### Math quiz

    coursekit-math [--seed N]

You choose how many questions to answer, the operation (`[1]` add, `[2]`
divide, `[3]` multiply, `[4]` subtract, `[5]` mix) and the level (`[1]` easy
1–10, `[2]` medium 11–30, `[3]` hard 31–60, `[4]` mix). Each question shows two
numbers and an operator; you type the result. Division is whole-number
division. At the end the game shows whether you passed (at least as many right
answers as wrong ones) and the counts of right and wrong answers, then asks
whether to play again.

### Stone, paper, scissors

    coursekit-rps [--seed N]

Play 1 to 10 rounds against the computer. Each round shows both choices and the
round's winner; the summary shows how many rounds each side won and the overall
winner. When you play again, the win counts keep including the rounds of the
earlier games.

`--seed` makes the computer's numbers or choices repeatable.

### From Python

```python
import random

from coursekit.math_game import MathGame, Operation, QuestionsLevel
from coursekit.rps_game import RockPaperScissors

MathGame().run()
RockPaperScissors().run()

quiz = MathGame(rng=random.Random(1))
rounds = quiz.play(5, QuestionsLevel.EASY, Operation.ADD)
```

`MathGame` and `RockPaperScissors` take a `reader` (called with a prompt,
returning the typed text), a `write` callable for output and a
`random.Random`. The building blocks are public too: `make_round`,
`calculate`, `final_verdict` and `format_results` in `coursekit.math_game`;
`round_winner`, `overall_winner`, `count_wins` and `format_results` in
`coursekit.rps_game`.

## Helpers

`coursekit.library` holds small functions over numbers, lists and strings:

```python
from coursekit import library

library.is_prime(7)                      # True
library.is_perfect(28)                   # True
library.reverse_number(1234)             # 4321
library.remove_digit(12321, 2)           # 131 (remaining digits, reversed)
library.my_round(-2.5)                   # -3
library.my_floor(-1.5)                   # -2
library.encrypt("abc")                   # "cde"
library.decrypt(library.encrypt("abc"))  # "abc"
library.number_pattern(3)                # "1\n22\n333"
library.letter_pattern(3)                # "A\nBB\nCCC"
```

Some behave in a particular way worth knowing:

- `sum_array` and `average_of_array` leave out the first element of the list.
- `my_sqrt` raises `ValueError` for a negative number; `max_in_array`,
  `min_in_array` and `average_of_array` raise `ValueError` for an empty list.
- `find_password` tries every three-capital-letter word from `AAA` on, writing
  each trial, and returns whether the password was found.

Random helpers (`random_number`, `random_char`, `generate_word`,
`generate_key`, `generate_keys`, `fill_array_with_random_values`,
`shuffle_array`) take an optional `random.Random`, so the same seed gives the
same result. `CharType` selects small letters, capital letters, special
characters or digits.

The `read_*` functions ask again until the answer is valid; they take a
`reader` callable, `input` by default.