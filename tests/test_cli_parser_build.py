import tasks


def test_build_parser_has_core_commands():
    parser = tasks.build_parser()
    help_text = parser.format_help()
    for command in ("tui", "list", "archive", "hotkey"):
        assert command in help_text


def test_parser_routes_to_commands():
    parser = tasks.build_parser()
    args = parser.parse_args(["--tasks-dir", "/tmp/x", "list", "--notes", "--pane", "shelf"])
    assert args.func is tasks.cmd_list
    assert args.tasks_dir == "/tmp/x"
    assert args.pane == "shelf"
    assert args.notes is True

    args = parser.parse_args(["hotkey", "Ctrl+K"])
    assert args.func is tasks.cmd_hotkey
    assert args.value == "Ctrl+K"


def test_main_runs_list(tmp_path, capsys):
    assert tasks.main(["--tasks-dir", str(tmp_path), "list"]) == 0
    assert "(no tasks)" in capsys.readouterr().out


def test_version_flag(capsys):
    assert tasks.main(["--version"]) == 0
    assert capsys.readouterr().out.strip()
