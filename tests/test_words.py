import random

import pytest

from lucky_vault.errors import ValidationError
from lucky_vault.words import WordStore, read_word_lines


def test_load_reads_every_line(tmp_path):
    path = tmp_path / "countries.txt"
    path.write_text("Canada\nPeru\nChad\n", encoding="utf-8")

    store = WordStore.load(path)

    assert store.all() == ["Canada", "Peru", "Chad"]
    assert len(store) == 3
    assert store[1] == "Peru"


def test_load_missing_file_fails(tmp_path):
    with pytest.raises(ValidationError, match="Failed to read word list"):
        WordStore.load(tmp_path / "nope.txt")


def test_load_empty_file_fails(tmp_path):
    path = tmp_path / "countries.txt"
    path.write_text("", encoding="utf-8")

    with pytest.raises(ValidationError, match="no entries"):
        WordStore.load(path)


def test_load_blank_line_fails(tmp_path):
    path = tmp_path / "countries.txt"
    path.write_text("Canada\n   \nPeru\n", encoding="utf-8")

    with pytest.raises(ValidationError, match="line 2"):
        WordStore.load(path)


def test_none_path_fails():
    with pytest.raises(ValidationError):
        read_word_lines(None)


def test_none_line_fails():
    with pytest.raises(ValidationError, match="missing"):
        WordStore.from_lines(["Canada", None])


def test_all_returns_independent_copy():
    store = WordStore.from_lines(["Canada", "Peru"])

    copy = store.all()
    copy.append("Chad")
    copy[0] = "Mexico"

    assert store.all() == ["Canada", "Peru"]
    assert store.all() is not store.all()


def test_pick_random_covers_every_word():
    store = WordStore.from_lines(["Canada", "Peru", "Chad"])
    rng = random.Random(7)

    picked = {store.pick_random(rng) for _ in range(200)}

    assert picked == {"Canada", "Peru", "Chad"}


def test_bundled_country_list_is_valid():
    from lucky_vault.config import COUNTRIES_PATH

    store = WordStore.load(COUNTRIES_PATH)

    assert len(store) > 0
    assert all(word.strip() for word in store.all())


def test_word_list_that_is_not_utf8_fails(tmp_path):
    path = tmp_path / "countries.txt"
    path.write_bytes(b"Peru\n\xff\xfeChad\n")

    with pytest.raises(ValidationError, match="Failed to read word list"):
        WordStore.load(path)


def test_byte_order_mark_is_not_part_of_first_word(tmp_path):
    path = tmp_path / "countries.txt"
    path.write_text("Peru\nChad\n", encoding="utf-8-sig")

    store = WordStore.load(path)

    assert store[0] == "Peru"
    assert len(store[0]) == 4
