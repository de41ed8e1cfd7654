import pytest

from structlab.josephus import elimination_order, josephus, main


def test_source_example():
    assert josephus(10, 4) == 5


@pytest.mark.parametrize("people,count", [(10, 4), (7, 3), (1, 5), (12, 1), (5, 20)])
def test_order_and_survivor_cover_everyone(people, count):
    order = list(elimination_order(people, count))
    survivor = josephus(people, count)
    assert len(order) == people - 1
    assert survivor not in order
    assert sorted(order + [survivor]) == list(range(1, people + 1))


def test_count_one_removes_in_sequence():
    assert list(elimination_order(6, 1)) == [1, 2, 3, 4, 5]
    assert josephus(6, 1) == 6


def test_first_removed_is_count_th_person():
    assert next(elimination_order(10, 4)) == 4


def test_single_person_survives():
    assert josephus(1, 3) == 1
    assert list(elimination_order(1, 3)) == []


@pytest.mark.parametrize("people,count", [(0, 3), (-2, 3), (5, 0)])
def test_invalid_arguments(people, count):
    with pytest.raises(ValueError):
        josephus(people, count)
    with pytest.raises(ValueError):
        elimination_order(people, count)


def test_main_prints_rings_and_survivor(capsys):
    assert main(["10", "4"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "".join(f"{n}->" for n in range(1, 11)) + "NULL"
    assert len(lines) == 11
    assert lines[-1] == "5"
    assert lines[-2] == "5->NULL"


def test_main_rejects_no_players():
    with pytest.raises(SystemExit):
        main(["0", "4"])