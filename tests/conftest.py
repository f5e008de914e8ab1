"""Shared fixtures: the classic worked example maps."""
import pytest


FIRST_EXAMPLE = """
#######
#.G...#
#...EG#
#.#.#G#
#..G#E#
#.....#
#######
"""

# (map, completed rounds, remaining health, winning faction char)
COMBAT_EXAMPLES = [
    (FIRST_EXAMPLE, 47, 590, "G"),
    ("""
#######
#G..#E#
#E#E.E#
#G.##.#
#...#E#
#...E.#
#######
""", 37, 982, "E"),
    ("""
#######
#E..EG#
#.#G.E#
#E.##E#
#G..#.#
#..E#.#
#######
""", 46, 859, "E"),
    ("""
#######
#E.G#.#
#.#G..#
#G.#.G#
#G..#.#
#...E.#
#######
""", 35, 793, "G"),
    ("""
#######
#.E...#
#.#..G#
#.###.#
#E#G#G#
#...#G#
#######
""", 54, 536, "G"),
    ("""
#########
#G......#
#.E.#...#
#..##..G#
#...##..#
#...#...#
#.G...G.#
#.....G.#
#########
""", 20, 937, "G"),
]

# (map index in COMBAT_EXAMPLES, minimal elf attack power, outcome)
SEARCH_EXAMPLES = [
    (0, 15, 4988),
    (2, 4, 31284),
    (3, 15, 3478),
    (4, 12, 6474),
    (5, 34, 1140),
]


@pytest.fixture
def first_example():
    """The 7x7 example map whose default outcome is 27730."""
    return FIRST_EXAMPLE


@pytest.fixture(params=COMBAT_EXAMPLES, ids=[f"example{i + 1}" for i in range(len(COMBAT_EXAMPLES))])
def combat_example(request):
    return request.param


@pytest.fixture(params=SEARCH_EXAMPLES, ids=[f"example{i + 1}" for i, _, _ in SEARCH_EXAMPLES])
def search_example(request):
    index, power, outcome = request.param
    return COMBAT_EXAMPLES[index][0], power, outcome
