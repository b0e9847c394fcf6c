import main


def feed_input(monkeypatch, answers):
    answers = iter(answers)
    monkeypatch.setattr('builtins.input', lambda prompt="": next(answers))


def test_get_config_test_mode_returns_copy():
    config = main.getConfig(True)
    assert config == main.DEFAULT_CONFIG
    config['generations'] = 1
    assert main.DEFAULT_CONFIG['generations'] == 30


def test_get_config_user_mode(monkeypatch):
    feed_input(monkeypatch, ["Tub", "4", "2"])
    assert main.getConfig(False) == {'pattern': 'tub', 'generations': 4, 'log_interval': 2}


def test_mode_selection(monkeypatch, capsys):
    feed_input(monkeypatch, ["x", "q", "2"])
    assert main.getModeSelection() is False
    out = capsys.readouterr().out
    assert "Invalid choice" in out
    assert str(main.DEFAULT_CONFIG) in out


def test_main_runs_test_mode(monkeypatch, tmp_path, capsys):
    monkeypatch.chdir(tmp_path)
    feed_input(monkeypatch, ["1"])
    main.main()
    out = capsys.readouterr().out
    assert "Generation " in out


def test_main_user_mode_reports_cycle(monkeypatch, tmp_path, capsys):
    monkeypatch.chdir(tmp_path)
    feed_input(monkeypatch, ["2", "blinker", "6", "1"])
    main.main()
    out = capsys.readouterr().out
    assert "Generation 2:" in out
    assert "period 2 from generation 0" in out
