from agtx.input_mode import InputMode


def test_default_is_normal():
    assert InputMode.default() is InputMode.NORMAL


def test_modes_are_distinct():
    default = InputMode.default()
    others = [mode for mode in InputMode if mode is not default]
    assert len(others) == 3
    assert len({mode.value for mode in InputMode}) == 4
    assert InputMode.INPUT_TITLE in others
    assert InputMode.SELECT_PLUGIN in others
    assert InputMode.INPUT_DESCRIPTION in others


def test_lookup_by_value_round_trips():
    for mode in InputMode:
        assert InputMode(mode.value) is mode