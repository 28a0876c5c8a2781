import pytest

from ktree.complexnum import Complex
from ktree.main import main

TRAVERSALS = (
    "Pre-order traversal:",
    "Post-order traversal:",
    "BFS traversal:",
    "DFS traversal:",
    "Heap traversal:",
)


def _run(capsys, argv=()):
    code = main(list(argv))
    out = capsys.readouterr().out
    trees = {}
    current = None
    title = None
    for line in out.splitlines():
        if line.startswith("["):
            current = trees.setdefault(line, {"": []})
            title = ""
        elif line.endswith(":"):
            title = line
            current[title] = []
        else:
            current[title].append(line)
    return code, trees


def _values(lines):
    return " ".join(lines).split()


def _parse_complex(text):
    real, imaginary = text[:-1].split("+")
    return Complex(float(real), float(imaginary))


def test_returns_zero_and_reports_rule_violations(capsys):
    code, trees = _run(capsys)
    assert code == 0
    assert trees["[numbers]"][""] == [
        "The tree already has a root",
        "This node already has the max number of children",
    ]


def test_all_three_trees_are_printed(capsys):
    _, trees = _run(capsys)
    assert set(trees) == {"[numbers]", "[complex]", "[strings]"}


@pytest.mark.parametrize("banner", ["[numbers]", "[complex]", "[strings]"])
def test_full_traversals_cover_the_same_nodes(capsys, banner):
    _, trees = _run(capsys)
    sections = trees[banner]
    expected = sorted(_values(sections["Pre-order traversal:"]))
    for title in TRAVERSALS:
        assert sorted(_values(sections[title])) == expected


@pytest.mark.parametrize("banner", ["[numbers]", "[complex]", "[strings]"])
def test_dfs_matches_pre_order_and_root_ends_post_order(capsys, banner):
    _, trees = _run(capsys)
    sections = trees[banner]
    pre = _values(sections["Pre-order traversal:"])
    assert _values(sections["DFS traversal:"]) == pre
    assert _values(sections["BFS traversal:"])[0] == pre[0]
    assert _values(sections["Post-order traversal:"])[-1] == pre[0]


@pytest.mark.parametrize("banner", ["[numbers]", "[complex]", "[strings]"])
def test_in_order_is_subset_of_nodes(capsys, banner):
    _, trees = _run(capsys)
    sections = trees[banner]
    in_order = _values(sections["In-order traversal:"])
    pre = _values(sections["Pre-order traversal:"])
    assert set(in_order) <= set(pre)
    assert len(in_order) == len(set(in_order))


def test_string_tree_dfs_order(capsys):
    _, trees = _run(capsys)
    line = " ".join(trees["[strings]"]["DFS traversal:"]) + " "
    assert line == (
        "Avraham Yitshak Yaakov Reuven Shimon Levi Yehuda Dan Naftali Gad "
        "Asher Yissachar Zevulun Yosef Binyamin Essav Ishmael "
    )


def test_number_heap_is_sorted(capsys):
    _, trees = _run(capsys)
    values = [float(v) for v in trees["[numbers]"]["Heap traversal:"]]
    assert len(values) == 6
    assert values == sorted(values)


def test_complex_heap_is_ordered_by_magnitude(capsys):
    _, trees = _run(capsys)
    numbers = [_parse_complex(v) for v in trees["[complex]"]["Heap traversal:"]]
    assert len(numbers) == 7
    magnitudes = [n.magnitude() for n in numbers]
    assert magnitudes == sorted(magnitudes)
    assert numbers[0] == Complex(1, 2)


@pytest.mark.parametrize("banner", ["[numbers]", "[complex]", "[strings]"])
def test_layout_lists_every_node(capsys, banner):
    _, trees = _run(capsys)
    sections = trees[banner]
    layout = sections["Tree layout:"]
    assert len(layout) == len(_values(sections["Pre-order traversal:"]))
    assert all(" at (" in line for line in layout)


def test_default_layout_root_position(capsys):
    _, trees = _run(capsys)
    assert trees["[numbers]"]["Tree layout:"][0] == "0.0 at (750.0, 210.0)"


def test_width_scales_horizontal_positions(capsys):
    def root_x(sections):
        line = sections["Tree layout:"][0]
        return float(line.split("(")[1].split(",")[0])

    _, wide = _run(capsys)
    _, narrow = _run(capsys, ["--width", "1000"])
    for banner in wide:
        ratio = root_x(narrow[banner]) / root_x(wide[banner])
        assert ratio == pytest.approx(1000 / 1500)


@pytest.mark.parametrize("width", ["0", "-5", "wide"])
def test_invalid_width_is_rejected(capsys, width):
    with pytest.raises(SystemExit) as info:
        main(["--width", width])
    assert info.value.code == 2