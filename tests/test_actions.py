import pytest

from mazer.actions.models import GenerateAction, LoadAction, SaveAction, SolveAction
from mazer.actions.toolkit import GenerateAlgorithm, MazeFormat, SolveAlgorithm
from mazer.options import OptionType


def test_generate_executes_with_selected_algorithm(toolkit):
    GenerateAction(OptionType.GENERATE_ELLER, width=8, height=9, seed=1).execute(toolkit)
    GenerateAction(OptionType.GENERATE_AB).execute(toolkit)

    assert toolkit.calls == [
        ("generate", GenerateAlgorithm.ELLER, 8, 9, 1),
        ("generate", GenerateAlgorithm.ALDOUS_BRODER, None, None, None),
    ]


def test_save_dispatches_on_format(toolkit):
    SaveAction(OptionType.SAVE_VECTOR, "m.svg").execute(toolkit)
    SaveAction(OptionType.SAVE_BINARY, "m.bin").execute(toolkit)

    assert toolkit.calls == [("save_vector", "m.svg"), ("save_binary", "m.bin")]


def test_load_and_solve_execute(toolkit):
    LoadAction(OptionType.LOAD_BINARY, "m.bin").execute(toolkit)
    SolveAction(OptionType.SOLVE_BREADTH).execute(toolkit)
    SolveAction(OptionType.SOLVE_EUCLIDEAN, target=1).execute(toolkit)

    assert toolkit.calls == [
        ("load_binary", "m.bin"),
        ("solve", SolveAlgorithm.BREADTH_FIRST, None),
        ("solve", SolveAlgorithm.EUCLIDEAN, 1),
    ]


@pytest.mark.parametrize(
    "option, algorithm",
    [
        (OptionType.SOLVE_MANHATTAN, SolveAlgorithm.MANHATTAN),
        (OptionType.SOLVE_EUCLIDEAN, SolveAlgorithm.EUCLIDEAN),
        (OptionType.SOLVE_BREADTH, SolveAlgorithm.BREADTH_FIRST),
        (OptionType.SOLVE_DEPTH, SolveAlgorithm.DEPTH_FIRST),
    ],
)
def test_solve_algorithm_follows_option(option, algorithm):
    assert SolveAction(option).algorithm is algorithm


def test_labels():
    assert GenerateAction(OptionType.GENERATE_AB, width=10, height=20, seed=42).label() == (
        "generate-ab 10x20 seed=42"
    )
    assert GenerateAction(OptionType.GENERATE_AB, seed=3).label() == "generate-ab seed=3"
    assert GenerateAction(OptionType.GENERATE_ELLER).label() == "generate-eller"
    assert SaveAction(OptionType.SAVE_BINARY, "a.bin").label() == "save-binary a.bin"
    assert SolveAction(OptionType.SOLVE_DEPTH, target=2).label() == "solve-depth maze 2"


def test_to_dict():
    assert GenerateAction(OptionType.GENERATE_ELLER, width=5, height=6).to_dict() == {
        "option": "generate-eller",
        "algorithm": "eller",
        "width": 5,
        "height": 6,
        "seed": None,
    }
    assert SaveAction(OptionType.SAVE_VECTOR, "m.svg").to_dict() == {
        "option": "save-vector",
        "format": MazeFormat.VECTOR.value,
        "path": "m.svg",
    }
    assert LoadAction(OptionType.LOAD_BINARY, "m.bin").to_dict()["format"] == "binary"
    assert SolveAction(OptionType.SOLVE_DEPTH).to_dict()["target"] is None


def test_actions_reject_mismatched_options():
    with pytest.raises(ValueError):
        GenerateAction(OptionType.SAVE_BINARY)
    with pytest.raises(ValueError):
        SaveAction(OptionType.LOAD_BINARY, "a.bin")
    with pytest.raises(ValueError):
        LoadAction(OptionType.SAVE_BINARY, "a.bin")
    with pytest.raises(ValueError):
        SolveAction(OptionType.GENERATE_AB)


def test_generate_requires_width_and_height_together():
    with pytest.raises(ValueError):
        GenerateAction(OptionType.GENERATE_AB, width=10)
