from mazer.options import (
    ARG_STRINGS,
    NUM_OPTIONS,
    OptionType,
    option_string,
)


def test_option_table_has_nine_distinct_spellings():
    assert NUM_OPTIONS == 9
    assert len(set(ARG_STRINGS)) == NUM_OPTIONS
    assert list(ARG_STRINGS) == [option_string(option) for option in OptionType]


def test_lookup_round_trips_every_option():
    for option in OptionType:
        assert OptionType.lookup(option_string(option)) is option


def test_lookup_unknown_token_is_not_an_option():
    assert OptionType.lookup("generate") is None
    assert OptionType.lookup("GENERATE-AB") is None
    assert OptionType.lookup("") is None
    assert OptionType.lookup("42") is None


def test_option_categories_partition_the_table():
    generate = {o for o in OptionType if o.is_generate}
    save = {o for o in OptionType if o.is_save}
    solve = {o for o in OptionType if o.is_solve}

    assert generate == {OptionType.GENERATE_AB, OptionType.GENERATE_ELLER}
    assert save == {OptionType.SAVE_VECTOR, OptionType.SAVE_BINARY}
    assert len(solve) == 4
    assert set(OptionType) - generate - save - solve == {OptionType.LOAD_BINARY}


def test_every_option_has_a_description():
    assert all(option.description for option in OptionType)
