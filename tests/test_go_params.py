import pytest

from magpie.go_params import (
    GoParseError,
    SearchType,
    StopCondition,
    parse_go_command,
)


def test_sim_command_fields():
    params = parse_go_command(" sim depth 2 threads 3 plays 10 i 100 stopcondition 99")
    assert params.search_type == SearchType.SIM_MONTECARLO
    assert params.depth == 2
    assert params.threads == 3
    assert params.num_plays == 10
    assert params.max_iterations == 100
    assert params.stop_condition == StopCondition.PCT99
    assert params.static_search_only is False


@pytest.mark.parametrize(
    "value,expected",
    [("95", StopCondition.PCT95), ("98", StopCondition.PCT98), ("99", StopCondition.PCT99)],
)
def test_stop_conditions(value, expected):
    params = parse_go_command(f"sim depth 1 threads 1 i 5 stopcondition {value}")
    assert params.stop_condition == expected


def test_parsed_stop_condition_values_match_constants():
    default = parse_go_command("sim depth 1 threads 1")
    assert int(default.stop_condition) == 0
    params = parse_go_command("sim depth 1 threads 1 i 5 stopcondition 99")
    assert int(params.stop_condition) == 3


def test_infer_command_fields():
    params = parse_go_command(
        " infer tiles ABC pidx 1 score 22 exch 0 eqmargin 2.5 threads 4"
    )
    assert params.search_type == SearchType.INFERENCE_SOLVE
    assert params.tiles == "ABC"
    assert params.player_index == 1
    assert params.score == 22
    assert params.number_of_tiles_exchanged == 0
    assert params.equity_margin == pytest.approx(2.5)
    assert params.threads == 4


def test_static_flag_and_intervals():
    params = parse_go_command("sim static depth 1 threads 1 info 7 checkstop 9")
    assert params.static_search_only is True
    assert params.print_info_interval == 7
    assert params.check_stopping_condition_interval == 9


def test_extra_spaces_are_ignored():
    params = parse_go_command("   sim    depth   3   threads   2  ")
    assert params.depth == 3
    assert params.threads == 2


def test_integer_prefix_parsing():
    params = parse_go_command("sim depth 4x threads 2 plays abc")
    assert params.depth == 4
    assert params.num_plays == 0


def test_value_token_can_also_be_keyword():
    params = parse_go_command("plays sim depth 1 threads 1")
    assert params.num_plays == 0
    assert params.search_type == SearchType.SIM_MONTECARLO


def test_each_parse_starts_fresh():
    first = parse_go_command("sim static depth 5 threads 2")
    second = parse_go_command("infer tiles A threads 2")
    assert first.static_search_only is True
    assert second.static_search_only is False
    assert second.depth == 0
    assert second.search_type == SearchType.INFERENCE_SOLVE


def test_tiles_at_rack_size_accepted():
    params = parse_go_command("infer tiles ABCDEFG threads 1")
    assert params.tiles == "ABCDEFG"


@pytest.mark.parametrize(
    "command",
    [
        "infer tiles ABCDEFGH threads 1",
        "infer pidx 2 threads 1",
        "infer pidx -1 threads 1",
        "sim depth 1 threads 1 i 5 stopcondition 97",
        "sim infer depth 1 threads 1",
        "sim sim depth 1 threads 1",
        "sim depth 1 threads 1 stopcondition 95",
        "sim threads 1",
        "sim depth 0 threads 1",
        "infer threads 0",
        "infer threads -3",
    ],
)
def test_invalid_commands_raise(command):
    with pytest.raises(GoParseError):
        parse_go_command(command)


def test_error_is_value_error():
    with pytest.raises(ValueError, match="positive depth"):
        parse_go_command("sim threads 1")