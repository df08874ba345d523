import pytest

from aoc2024.day13 import Claw, Coord, parse_input, part1, part2


def _machine(a, b, prize):
    return (
        f"Button A: X+{a[0]}, Y+{a[1]}\n"
        f"Button B: X+{b[0]}, Y+{b[1]}\n"
        f"Prize: X={prize[0]}, Y={prize[1]}"
    )


MACHINES = [
    ((94, 34), (22, 67), (8400, 5400)),
    ((26, 66), (67, 21), (12748, 12176)),
    ((17, 86), (84, 37), (7870, 6450)),
    ((69, 23), (27, 71), (18641, 10279)),
]

SAMPLE = "\n\n".join(_machine(*machine) for machine in MACHINES)

SYMMETRIC = _machine((3, 1), (1, 3), (0, 0))


def test_part1_sample():
    assert part1(SAMPLE) == "480"


def test_parse_input_reads_all_claws():
    claws = parse_input(SAMPLE)
    assert len(claws) == 4
    assert claws[0] == Claw(Coord(94, 34), Coord(22, 67), Coord(8400, 5400))
    assert claws[3].prize == Coord(18641, 10279)


def test_sample_claw_matches():
    claws = parse_input(SAMPLE)
    assert claws[0].matches() == [280]
    assert claws[1].matches() == []
    assert claws[2].matches() == [200]
    assert claws[3].matches() == []


def test_parallel_buttons_list_every_way():
    claw = Claw(Coord(1, 1), Coord(2, 2), Coord(4, 4))
    assert claw.matches() == [12, 7]


def test_zero_a_presses_are_not_counted():
    claw = Claw(Coord(5, 5), Coord(1, 1), Coord(3, 3))
    assert claw.matches() == []


def test_part2_moves_prize():
    assert part1(SYMMETRIC) == "0"
    assert part2(SYMMETRIC) == "1000000000"


def test_unrecognised_line_raises():
    with pytest.raises(ValueError):
        parse_input("nonsense")