from mazer.cli_builder import build_arg_parser


def test_cli_parser_defaults_and_options_present():
    parser = build_arg_parser()
    defaults = vars(parser.parse_args([]))

    assert defaults["out"] is None
    assert defaults["list_options"] is False
    assert defaults["dry_run"] is False
    assert defaults["no_color"] is False


def test_maze_tokens_are_left_in_order():
    parser = build_arg_parser()

    args, unknown = parser.parse_known_args(
        ["generate-ab", "10", "--dry-run", "20", "-5", "save-vector", "m.svg"]
    )

    assert args.dry_run is True
    assert unknown == ["generate-ab", "10", "20", "-5", "save-vector", "m.svg"]


def test_help_lists_every_option():
    help_text = build_arg_parser().format_help()

    for spelling in ["generate-ab", "generate-eller", "save-vector", "solve-depth"]:
        assert spelling in help_text
