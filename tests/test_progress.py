import pytest

from levelinfo.progress import printable_progress


def test_worked_example():
    assert printable_progress("10,20,30", 60) == "10% 30% 60% "


def test_empty_history():
    assert printable_progress("", 50) == ""


def test_trailing_comma_ignored():
    assert printable_progress("10,20,30,", 60) == printable_progress("10,20,30", 60)


@pytest.mark.parametrize("bests", [[100], [5, 5, 90], [1, 2, 3, 4, 5, 85], [33, 33, 34]])
def test_cumulative_sums(bests):
    total = sum(bests)
    text = printable_progress(",".join(map(str, bests)), total)
    values = [int(token.rstrip("%")) for token in text.split()]
    running = []
    acc = 0
    for b in bests:
        acc += b
        running.append(acc)
    assert values == running
    assert values[-1] == total


def test_entry_count_matches_history():
    text = printable_progress("1,2,3,4", 10)
    assert len(text.split()) == 4
    assert text.endswith("10% ")