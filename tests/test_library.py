import math
import random

import pytest

from coursekit.library import (
    CharType,
    average_of_array,
    check_frequency,
    copy_distinct_elements,
    count_even_numbers,
    count_negative_numbers,
    count_odd_numbers,
    count_positive_numbers,
    decrypt,
    digit_frequency,
    encrypt,
    fill_array,
    fill_array_with_order_ints,
    fill_array_with_random_values,
    find_password,
    format_array,
    format_keys,
    fraction_part,
    generate_key,
    generate_keys,
    generate_word,
    inverted_letter_pattern,
    inverted_number_pattern,
    is_number_in_array,
    is_palindrome,
    is_palindrome_array,
    is_perfect,
    is_prime,
    letter_pattern,
    max_in_array,
    min_in_array,
    my_abs,
    my_ceil,
    my_floor,
    my_round,
    my_sqrt,
    number_pattern,
    odd_elements,
    prime_elements,
    random_char,
    random_number,
    read_array_elements,
    read_array_semi_dynamic,
    read_num,
    read_num_in_range,
    read_positive_num,
    read_three_letters_word,
    read_word,
    remove_digit,
    reverse_array,
    reverse_number,
    reversed_copy,
    search_in_array,
    shuffle_array,
    sum_array,
    sum_of_digits,
    sum_two_arrays,
)

SAMPLE = [7, -3, 0, 12, 5, -8, 9, 2, 11, 4]


def make_reader(*answers):
    prompts = []
    queue = iter(answers)

    def reader(prompt):
        prompts.append(prompt)
        return next(queue)

    return reader, prompts


def test_is_prime_small_numbers():
    assert [n for n in range(20) if is_prime(n)] == [2, 3, 5, 7, 11, 13, 17, 19]
    assert not is_prime(-7)


def test_is_perfect_below_500():
    assert [n for n in range(1, 500) if is_perfect(n)] == [6, 28, 496]


def test_search_in_array_finds_first_index():
    values = [5, 6, 7, 6]
    index = search_in_array(values, 6)
    assert values[index] == 6
    assert 6 not in values[:index]
    assert search_in_array(values, 42) == -1


def test_is_number_in_array():
    assert is_number_in_array(SAMPLE, 12)
    assert not is_number_in_array(SAMPLE, 100)


def test_copy_distinct_elements_keeps_order():
    assert copy_distinct_elements([1, 2, 2, 3, 1], []) == [1, 2, 3]
    assert copy_distinct_elements([1, 2, 3], [3]) == [3, 1, 2]


def test_palindrome_array():
    assert is_palindrome_array(fill_array())
    assert is_palindrome_array([])
    assert not is_palindrome_array([1, 2])


def test_reverse_array_in_place_and_copy():
    values = list(SAMPLE)
    reverse_array(values)
    assert values == list(reversed(SAMPLE))
    assert reversed_copy(values) == SAMPLE


def test_reversed_copy_leaves_input_untouched():
    values = list(SAMPLE)
    reversed_copy(values)
    assert values == SAMPLE


def test_random_number_stays_in_range():
    rng = random.Random(1)
    draws = [random_number(-5, 5, rng) for _ in range(200)]
    assert all(-5 <= value <= 5 for value in draws)
    assert random_number(4, 4, rng) == 4


@pytest.mark.parametrize("char_type", list(CharType))
def test_random_char_in_type_range(char_type):
    rng = random.Random(7)
    low, high = char_type.value
    chars = [random_char(char_type, rng) for _ in range(100)]
    assert all(low <= ord(c) <= high for c in chars)


def test_char_type_ranges_from_source():
    rng = random.Random(13)
    capitals = generate_word(CharType.CAPITAL_LETTER, 300, rng)
    specials = generate_word(CharType.SPECIAL_CHAR, 300, rng)
    assert all("A" <= c <= "Z" for c in capitals)
    assert all("!" <= c <= "/" for c in specials)


def test_counts_cover_every_element():
    assert count_odd_numbers(SAMPLE) + count_even_numbers(SAMPLE) == len(SAMPLE)
    assert count_positive_numbers(SAMPLE) + count_negative_numbers(SAMPLE) == len(SAMPLE)


def test_zero_counts_as_positive():
    assert count_positive_numbers([0]) == 1
    assert count_negative_numbers([0]) == 0


def test_fill_array_sample():
    assert fill_array() == [10, 20, 30, 30, 20, 10]


def test_fill_array_with_order_ints():
    values = fill_array_with_order_ints(6)
    assert len(values) == 6
    assert values == sorted(set(values))
    assert values[0] == 1 and values[-1] == 6
    assert fill_array_with_order_ints(0) == []


def test_fill_array_with_random_values():
    values = fill_array_with_random_values(50, random.Random(3))
    assert len(values) == 50
    assert all(-100 <= value <= 100 for value in values)
    assert values == fill_array_with_random_values(50, random.Random(3))


def test_my_abs():
    for value in (-2.5, 0.0, 3.75):
        assert my_abs(value) == abs(value)


def test_fraction_part_keeps_sign():
    assert fraction_part(3.25) == 0.25
    assert fraction_part(-3.25) == -0.25
    assert fraction_part(4.0) == 0


@pytest.mark.parametrize("value", [-3.7, -2.5, -2.0, -0.2, 0.0, 0.4, 1.5, 2.0, 6.9])
def test_floor_and_ceil_match_math(value):
    assert my_floor(value) == math.floor(value)
    assert my_ceil(value) == math.ceil(value)


@pytest.mark.parametrize("value", [-3.7, -2.5, -0.2, 0.4, 1.5, 2.49, 6.9])
def test_my_round_is_nearest(value):
    assert abs(my_round(value) - value) <= 0.5


def test_my_round_halves_go_away_from_zero():
    assert my_round(1.5) == math.ceil(1.5)
    assert my_round(-1.5) == math.floor(-1.5)


def test_my_sqrt():
    for value in (0.0, 2.0, 16.0, 30.25):
        assert my_sqrt(value) ** 2 == pytest.approx(value)
    with pytest.raises(ValueError):
        my_sqrt(-1)


def test_read_num_retries_on_bad_text():
    reader, prompts = make_reader("abc", " 3.5 ")
    assert read_num("n? ", reader) == 3.5
    assert prompts == ["n? ", "n? "]


def test_read_positive_num_skips_non_positive():
    reader, prompts = make_reader("-1", "0", "9")
    assert read_positive_num("n? ", reader) == 9
    assert len(prompts) == 3


def test_read_word_returns_first_token():
    reader, _ = make_reader("   ", "hello world")
    assert read_word("w? ", reader) == "hello"


def test_read_num_in_range():
    reader, prompts = make_reader("0", "11", "10")
    assert read_num_in_range("r? ", 1, 10, reader) == 10
    assert len(prompts) == 3


def test_read_three_letters_word():
    reader, prompts = make_reader("ab", "abcd", "xyz")
    assert read_three_letters_word(reader) == "xyz"
    assert prompts[0] == "Enter three letters word: "


def test_read_array_elements():
    reader, prompts = make_reader("3", "4", "5.9", "6")
    assert read_array_elements(reader) == [4, 5, 6]
    assert prompts[0] == "Enter array size: "
    assert prompts[1] == "Element [1] : "


def test_read_array_semi_dynamic():
    reader, prompts = make_reader("7", "1", "8", "0")
    assert read_array_semi_dynamic(reader) == [7, 8]
    assert prompts[0] == "\nEnter a number: "


def test_format_array():
    assert format_array([1, 2]) == "Original Array : 1 2 "
    assert format_array([]) == "Original Array : "


def test_prime_and_odd_elements_filter_in_order():
    primes = prime_elements(SAMPLE)
    odds = odd_elements(SAMPLE)
    assert all(is_prime(v) for v in primes)
    assert all(v % 2 for v in odds)
    assert primes == [v for v in SAMPLE if v in primes]
    assert len(odds) == count_odd_numbers(SAMPLE)


def test_generate_word():
    word = generate_word(CharType.DIGIT, 8, random.Random(5))
    assert len(word) == 8
    assert word.isdigit()


def test_generate_key_shape():
    key = generate_key(4, CharType.SMALL_LETTER, 2, random.Random(2))
    parts = key.split("-")
    assert len(parts) == 4
    assert all(len(p) == 2 and p.islower() for p in parts)


def test_generate_keys():
    keys = generate_keys(3, random.Random(9))
    assert len(keys) == 3
    for key in keys:
        parts = key.split("-")
        assert len(parts) == 5
        assert all(len(p) == 3 and p.isupper() and p.isalpha() for p in parts)


def test_format_keys():
    assert format_keys(["A", "B"]) == "Array[0] : A\nArray[1] : B"


def test_shuffle_array_keeps_elements():
    values = list(SAMPLE)
    shuffle_array(values, random.Random(11))
    assert sorted(values) == sorted(SAMPLE)
    other = list(SAMPLE)
    shuffle_array(other, random.Random(11))
    assert other == values


def test_sum_two_arrays():
    first, second = [1, 2, 3], [10, 20, 30]
    result = sum_two_arrays(first, second)
    assert [r - b for r, b in zip(result, second)] == first
    with pytest.raises(ValueError):
        sum_two_arrays([1], [1, 2])


def test_sum_array_ignores_first_element():
    rest = [3, 4, 5]
    assert sum_array([100] + rest) == sum_array([-7] + rest)
    assert sum_array([9]) == 0


def test_average_of_array():
    assert average_of_array(SAMPLE) == sum_array(SAMPLE) / len(SAMPLE)
    with pytest.raises(ValueError):
        average_of_array([])


def test_max_and_min():
    assert max_in_array(SAMPLE) == max(SAMPLE)
    assert min_in_array(SAMPLE) == min(SAMPLE)
    with pytest.raises(ValueError):
        max_in_array([])
    with pytest.raises(ValueError):
        min_in_array([])


def test_check_frequency():
    values = fill_array()
    assert check_frequency(values, 30) == values.count(30)
    assert check_frequency(values, 99) == 0


def test_encrypt_round_trip():
    for word in ("Hello", "abc xyz", ""):
        assert decrypt(encrypt(word)) == word
    assert encrypt("AB") == "CD"


def test_find_password_found_first():
    lines = []
    assert find_password("AAA", lines.append)
    assert lines == ["Trail[1]:AAA", "Password is AAA", "Found after 1 trail(s)"]


def test_find_password_reports_trials():
    lines = []
    assert find_password("BZQ", lines.append)
    assert lines[-2] == "Password is BZQ"
    trials = [line for line in lines if line.startswith("Trail[")]
    assert lines[-1] == f"Found after {len(trials)} trail(s)"
    assert trials[-1].endswith(":BZQ")


def test_find_password_not_found():
    lines = []
    assert not find_password("password", lines.append)
    assert all(line.startswith("Trail[") for line in lines)


def test_letter_patterns():
    assert letter_pattern(3) == "A\nBB\nCCC"
    assert inverted_letter_pattern(5).split("\n") == letter_pattern(5).split("\n")[::-1]
    assert letter_pattern(0) == ""


def test_number_patterns():
    lines = number_pattern(4).split("\n")
    assert [len(line) for line in lines] == [1, 2, 3, 4]
    assert inverted_number_pattern(4).split("\n") == lines[::-1]


@pytest.mark.parametrize("n", [1, 12, 345, 9071, 123456])
def test_reverse_number_round_trip(n):
    assert reverse_number(reverse_number(n)) == n
    assert reverse_number(-n) == -reverse_number(n)


def test_is_palindrome():
    assert is_palindrome(12321)
    assert is_palindrome(-44)
    assert not is_palindrome(123)


@pytest.mark.parametrize("n", [1, 1223, 900, 98765])
def test_digit_frequency_counts_every_digit(n):
    assert sum(digit_frequency(n, d) for d in range(10)) == len(str(n))


def test_digit_frequency_value():
    assert digit_frequency(1223, 2) == 2


def test_remove_digit():
    n = 4213
    assert digit_frequency(remove_digit(n, 2), 2) == 0
    assert remove_digit(n, 8) == reverse_number(n)
    assert remove_digit(777, 7) == 0


@pytest.mark.parametrize("n", [9, 123, 4567])
def test_sum_of_digits(n):
    assert sum_of_digits(reverse_number(n)) == sum_of_digits(n)
    assert sum_of_digits(-n) == -sum_of_digits(n)
    assert sum_of_digits(n * 10) == sum_of_digits(n)