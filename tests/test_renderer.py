import pytest
from testyaml.dumping.renderer import StructureRenderer

SCALAR_SAMPLES = [
    (None, "null"),
    (True, "true"),
    (False, "false"),
    (0, "0"),
    (42, "42"),
    (1.5, "1.5"),
    ("value", "value"),
    ("", ""),
]

@pytest.mark.parametrize("value, expected", SCALAR_SAMPLES)
def test_scalars(value, expected):
    assert StructureRenderer().render(value) == expected

def test_flat_mapping():
    assert StructureRenderer().render({"key": "value"}) == (
        "Mapping\n"
        "(\n"
        "    [key] => value\n"
        ")\n"
    )

def test_empty_containers():
    renderer = StructureRenderer()
    assert renderer.render({}) == "Mapping\n(\n)\n"
    assert renderer.render([]) == "Sequence\n(\n)\n"

def test_nested_structure_layout():
    value = {"name": "web", "ports": [80, True], "meta": {"empty": None}}
    assert StructureRenderer().render(value) == (
        "Mapping\n"
        "(\n"
        "    [name] => web\n"
        "    [ports] => Sequence\n"
        "        (\n"
        "            [0] => 80\n"
        "            [1] => true\n"
        "        )\n"
        "\n"
        "    [meta] => Mapping\n"
        "        (\n"
        "            [empty] => null\n"
        "        )\n"
        "\n"
        ")\n"
    )

def test_deep_nesting_indents_by_eight():
    rendered = StructureRenderer().render([[["x"]]])
    assert "                    [0] => x\n" in rendered

def test_non_string_keys():
    rendered = StructureRenderer().render({1: "one", None: "nothing", False: "no"})
    assert "    [1] => one\n" in rendered
    assert "    [null] => nothing\n" in rendered
    assert "    [false] => no\n" in rendered

def test_self_referencing_sequence_prints_marker():
    value = []
    value.append(value)
    assert StructureRenderer().render(value) == (
        "Sequence\n"
        "(\n"
        "    [0] => *RECURSION*\n"
        ")\n"
    )

def test_self_referencing_mapping_prints_marker():
    value = {"name": "loop"}
    value["self"] = value
    assert StructureRenderer().render(value) == (
        "Mapping\n"
        "(\n"
        "    [name] => loop\n"
        "    [self] => *RECURSION*\n"
        ")\n"
    )

def test_shared_container_is_not_recursion():
    """
    The same object reached twice from siblings is rendered twice.
    """
    shared = [1]
    rendered = StructureRenderer().render({"a": shared, "b": shared})
    assert "*RECURSION*" not in rendered
    assert rendered.count("[0] => 1\n") == 2

def test_very_deep_nesting_renders_without_stack_growth():
    value = "leaf"
    for _ in range(5000):
        value = [value]

    rendered = StructureRenderer().render(value)
    assert rendered.count("Sequence\n") == 5000
    assert "[0] => leaf\n" in rendered
    assert rendered.endswith(")\n")

def test_set_renders_as_sorted_sequence():
    assert StructureRenderer().render({"b", "a", "c"}) == (
        "Sequence\n"
        "(\n"
        "    [0] => a\n"
        "    [1] => b\n"
        "    [2] => c\n"
        ")\n"
    )

def test_bytes_are_decoded():
    renderer = StructureRenderer()
    assert renderer.render({"x": b"hello"}) == "Mapping\n(\n    [x] => hello\n)\n"
    assert renderer.format_scalar(b"\xff") == "\udcff"

def test_composite_keys_stay_on_one_line():
    rendered = StructureRenderer().render({("a", "b"): "c", frozenset({2, 1}): "d"})
    assert "    [Sequence(a, b)] => c\n" in rendered
    assert "    [Sequence(1, 2)] => d\n" in rendered
