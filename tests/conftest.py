import pytest


@pytest.fixture
def small_words():
    return ["crane", "cloud", "cigar", "zesty"]


@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("crane\ncloud\ncigar\nzesty\n", encoding="utf-8")
    return path
