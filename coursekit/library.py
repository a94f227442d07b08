"""Small helpers for numbers, lists, text, random keys and console input."""

from __future__ import annotations

import itertools
import random
import string
from collections.abc import Callable, Iterable, Iterator, MutableSequence, Sequence
from enum import Enum
from typing import Optional

Reader = Callable[[str], str]
Writer = Callable[[str], None]

_DEFAULT_RNG = random.Random()


def _pick_rng(rng: Optional[random.Random]) -> random.Random:
    return _DEFAULT_RNG if rng is None else rng


class CharType(Enum):
    """Kinds of characters, each mapped to its inclusive code-point range."""

    SMALL_LETTER = (97, 122)
    CAPITAL_LETTER = (65, 90)
    SPECIAL_CHAR = (33, 47)
    DIGIT = (48, 57)


# ---------------------------------------------------------------- numbers


def is_prime(num: int) -> bool:
    """Return True if num is a prime number."""
    if num < 2:
        return False
    return all(num % divisor for divisor in range(2, num // 2 + 1))


def is_perfect(num: int) -> bool:
    """Return True if num equals the sum of its divisors below itself."""
    return sum(i for i in range(1, num) if num % i == 0) == num


def _signed_digits(n: int) -> Iterator[int]:
    """Yield the digits of n from the lowest one, each carrying the sign of n."""
    sign = -1 if n < 0 else 1
    n = abs(n)
    while n:
        n, digit = divmod(n, 10)
        yield sign * digit


def reverse_number(n: int) -> int:
    """Return n with its digits in reverse order, keeping its sign."""
    result = 0
    for digit in _signed_digits(n):
        result = result * 10 + digit
    return result


def is_palindrome(n: int) -> bool:
    """Return True if n reads the same in both directions."""
    return n == reverse_number(n)


def digit_frequency(n: int, digit: int) -> int:
    """Count how many times digit occurs in n."""
    return sum(1 for d in _signed_digits(n) if d == digit)


def remove_digit(number: int, digit: int) -> int:
    """Return the digits of number in reverse order with every digit dropped."""
    result = 0
    for d in _signed_digits(number):
        if d != digit:
            result = result * 10 + d
    return result


def sum_of_digits(n: int) -> int:
    """Return the sum of the digits of n, negative when n is negative."""
    return sum(_signed_digits(n))


def my_abs(num: float) -> float:
    """Return the absolute value of num."""
    return num if num >= 0 else -num


def fraction_part(num: float) -> float:
    """Return the part of num after the decimal point, with num's sign."""
    return num - int(num)


def my_round(num: float) -> int:
    """Round num to the nearest integer, halves away from zero."""
    int_part = int(num)
    if abs(fraction_part(num)) >= 0.5:
        return int_part + 1 if num >= 0 else int_part - 1
    return int_part


def my_floor(num: float) -> int:
    """Return the largest integer not greater than num."""
    int_part = int(num)
    if fraction_part(num) == 0 or num >= 0:
        return int_part
    return int_part - 1


def my_ceil(num: float) -> int:
    """Return the smallest integer not less than num."""
    int_part = int(num)
    if fraction_part(num) == 0 or num < 0:
        return int_part
    return int_part + 1


def my_sqrt(num: float) -> float:
    """Return the square root of num; negative numbers are rejected."""
    if num < 0:
        raise ValueError(f"cannot take the square root of {num}")
    return num**0.5


# ---------------------------------------------------------------- lists


def search_in_array(values: Sequence[int], target: int) -> int:
    """Return the index of the first target in values, or -1 if absent."""
    return next((i for i, value in enumerate(values) if value == target), -1)


def is_number_in_array(values: Sequence[int], target: int) -> bool:
    """Return True if target occurs in values."""
    return search_in_array(values, target) != -1


def copy_distinct_elements(source: Iterable[int], target: Iterable[int]) -> list[int]:
    """Return target extended by the elements of source it does not hold yet."""
    result = list(target)
    for value in source:
        if value not in result:
            result.append(value)
    return result


def is_palindrome_array(values: Sequence[int]) -> bool:
    """Return True if values reads the same in both directions."""
    items = list(values)
    return items == items[::-1]


def reverse_array(values: MutableSequence[int]) -> None:
    """Reverse values in place."""
    values.reverse()


def reversed_copy(values: Sequence[int]) -> list[int]:
    """Return a new list holding values in reverse order."""
    return list(values)[::-1]


def count_odd_numbers(values: Iterable[int]) -> int:
    """Count the odd numbers in values."""
    return sum(1 for value in values if value % 2 != 0)


def count_even_numbers(values: Iterable[int]) -> int:
    """Count the even numbers in values."""
    return sum(1 for value in values if value % 2 == 0)


def count_positive_numbers(values: Iterable[int]) -> int:
    """Count the numbers in values that are zero or greater."""
    return sum(1 for value in values if value >= 0)


def count_negative_numbers(values: Iterable[int]) -> int:
    """Count the numbers in values below zero."""
    return sum(1 for value in values if value < 0)


def fill_array() -> list[int]:
    """Return the fixed sample list used by the exercises."""
    return [10, 20, 30, 30, 20, 10]


def fill_array_with_order_ints(size: int) -> list[int]:
    """Return the integers 1 to size."""
    return list(range(1, size + 1))


def fill_array_with_random_values(size: int, rng: Optional[random.Random] = None) -> list[int]:
    """Return size random integers between -100 and 100."""
    return [random_number(-100, 100, rng) for _ in range(size)]


def prime_elements(values: Iterable[int]) -> list[int]:
    """Return the prime numbers of values, in order."""
    return [value for value in values if is_prime(value)]


def odd_elements(values: Iterable[int]) -> list[int]:
    """Return the odd numbers of values, in order."""
    return [value for value in values if value % 2 != 0]


def shuffle_array(values: MutableSequence[int], rng: Optional[random.Random] = None) -> None:
    """Shuffle values in place by swapping len(values) random pairs."""
    rng = _pick_rng(rng)
    size = len(values)
    for _ in range(size):
        first = random_number(0, size - 1, rng)
        second = random_number(0, size - 1, rng)
        values[first], values[second] = values[second], values[first]


def sum_two_arrays(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Return the element-wise sums of two lists of equal length."""
    if len(first) != len(second):
        raise ValueError("lists must have the same length")
    return [a + b for a, b in zip(first, second)]


def sum_array(values: Sequence[int]) -> int:
    """Return the sum of every element after the first one."""
    return sum(values[1:])


def average_of_array(values: Sequence[int]) -> float:
    """Return sum_array(values) divided by the number of elements."""
    if not values:
        raise ValueError("cannot average an empty list")
    return sum_array(values) / len(values)


def max_in_array(values: Sequence[int]) -> int:
    """Return the largest element of values."""
    if not values:
        raise ValueError("empty list has no maximum")
    return max(values)


def min_in_array(values: Sequence[int]) -> int:
    """Return the smallest element of values."""
    if not values:
        raise ValueError("empty list has no minimum")
    return min(values)


def check_frequency(values: Sequence[int], number: int) -> int:
    """Count how many times number occurs in values."""
    return sum(1 for value in values if value == number)


def format_array(values: Iterable[int]) -> str:
    """Render values as the 'Original Array' line."""
    return "Original Array : " + "".join(f"{value} " for value in values)


# ---------------------------------------------------------------- random text


def random_number(start: int, stop: int, rng: Optional[random.Random] = None) -> int:
    """Return a random integer between start and stop, both included."""
    return _pick_rng(rng).randint(start, stop)


def random_char(char_type: CharType, rng: Optional[random.Random] = None) -> str:
    """Return a random character of the given kind."""
    low, high = char_type.value
    return chr(random_number(low, high, rng))


def generate_word(char_type: CharType, length: int, rng: Optional[random.Random] = None) -> str:
    """Return a random word of length characters of the given kind."""
    return "".join(random_char(char_type, rng) for _ in range(length))


def generate_key(
    number_of_words: int,
    char_type: CharType,
    word_length: int,
    rng: Optional[random.Random] = None,
) -> str:
    """Return random words joined with dashes."""
    return "-".join(generate_word(char_type, word_length, rng) for _ in range(number_of_words))


def generate_keys(count: int, rng: Optional[random.Random] = None) -> list[str]:
    """Return count keys of five three-letter capital words."""
    return [generate_key(5, CharType.CAPITAL_LETTER, 3, rng) for _ in range(count)]


def format_keys(keys: Iterable[str]) -> str:
    """Render keys one per line with their index."""
    return "\n".join(f"Array[{index}] : {key}" for index, key in enumerate(keys))


# ---------------------------------------------------------------- text


def encrypt(word: str) -> str:
    """Shift every character of word two code points up."""
    return "".join(chr(ord(char) + 2) for char in word)


def decrypt(word: str) -> str:
    """Shift every character of word two code points down."""
    return "".join(chr(ord(char) - 2) for char in word)


def find_password(password: str, write: Writer = print) -> bool:
    """Try every three-capital-letter word in order until password matches."""
    candidates = itertools.product(string.ascii_uppercase, repeat=3)
    for trial, letters in enumerate(candidates, start=1):
        word = "".join(letters)
        write(f"Trail[{trial}]:{word}")
        if word == password:
            write(f"Password is {word}")
            write(f"Found after {trial} trail(s)")
            return True
    return False


def letter_pattern(n: int) -> str:
    """Return lines A, BB, CCC ... up to the n-th letter."""
    return "\n".join(chr(64 + i) * i for i in range(1, n + 1))


def inverted_letter_pattern(n: int) -> str:
    """Return the letter pattern from its longest line down to A."""
    return "\n".join(chr(64 + i) * i for i in range(n, 0, -1))


def number_pattern(n: int) -> str:
    """Return lines 1, 22, 333 ... up to n."""
    return "\n".join(str(i) * i for i in range(1, n + 1))


def inverted_number_pattern(n: int) -> str:
    """Return the number pattern from its longest line down to 1."""
    return "\n".join(str(i) * i for i in range(n, 0, -1))


# ---------------------------------------------------------------- input


def read_num(prompt: str, reader: Reader = input) -> float:
    """Ask for a number until the answer parses as one."""
    while True:
        text = reader(prompt).strip()
        try:
            return float(text)
        except ValueError:
            continue


def read_positive_num(prompt: str, reader: Reader = input) -> float:
    """Ask for a number until it is greater than zero."""
    while True:
        number = read_num(prompt, reader)
        if number > 0:
            return number


def read_word(prompt: str, reader: Reader = input) -> str:
    """Ask for text and return its first word."""
    while True:
        words = reader(prompt).split()
        if words:
            return words[0]


def read_num_in_range(prompt: str, low: float, high: float, reader: Reader = input) -> float:
    """Ask for a number until it lies between low and high, both included."""
    while True:
        number = read_num(prompt, reader)
        if low <= number <= high:
            return number


def read_three_letters_word(reader: Reader = input) -> str:
    """Ask for a word until it is exactly three characters long."""
    while True:
        word = read_word("Enter three letters word: ", reader)
        if len(word) == 3:
            return word


def read_array_elements(reader: Reader = input) -> list[int]:
    """Ask for a size and then for that many whole numbers."""
    size = int(read_positive_num("Enter array size: ", reader))
    return [int(read_num(f"Element [{i}] : ", reader)) for i in range(1, size + 1)]


def read_array_semi_dynamic(reader: Reader = input) -> list[int]:
    """Ask for numbers one by one while the user answers 1 to continue."""
    values: list[int] = []
    while True:
        values.append(int(read_num("\nEnter a number: ", reader)))
        flag = int(read_num("Do you want to add more numbers? [0]:NO | [1]:YES ", reader))
        if flag != 1:
            return values