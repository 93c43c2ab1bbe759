"""CLI behaviour tests."""

from __future__ import annotations

import pytest

from cenv.cli import _build_parser, main


def test_cli_accepts_keyword_and_flags() -> None:
    parser = _build_parser()
    args = parser.parse_args(["staging", "--verbose", "--dry-run", "--loose"])
    assert args.keyword == "staging"
    assert args.verbose is True
    assert args.dry_run is True
    assert args.activation == "loose"


def test_cli_keyword_is_optional_for_list() -> None:
    args = _build_parser().parse_args(["--list"])
    assert args.keyword is None
    assert args.list is True
    assert args.activation is None


def test_cli_rejects_conflicting_activation_flags() -> None:
    with pytest.raises(SystemExit):
        _build_parser().parse_args(["a", "--loose", "--strict"])


def test_main_switches_env(sample_project, monkeypatch, capsys) -> None:
    monkeypatch.chdir(sample_project.path())

    main(["two"])

    assert capsys.readouterr().out == "Updated .env to two\n"
    assert "# ++ two ++\nTEST_A=2\nTEST_B=2\n" in sample_project.read()
    assert "# TEST_A=3" in sample_project.read()


def test_main_accepts_file_option(sample_project, capsys) -> None:
    main(["one", "--file", str(sample_project.path(".env"))])

    assert capsys.readouterr().out == "Updated .env to one\n"
    assert sample_project.read().startswith("# ++ one ++\nTEST_A=1\n")


def test_main_missing_keyword_lists_available(sample_project, monkeypatch, capsys) -> None:
    monkeypatch.chdir(sample_project.path())

    with pytest.raises(SystemExit) as excinfo:
        main([])

    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert "Problem parsing arguments: Keyword missing" in err
    assert "Available keywords: one, three, two" in err


def test_main_unknown_keyword_fails_without_writing(sample_project, monkeypatch, capsys) -> None:
    monkeypatch.chdir(sample_project.path())
    before = sample_project.read()

    with pytest.raises(SystemExit) as excinfo:
        main(["missing"])

    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert 'keyword "missing" was not found in .env file' in err
    assert "Available keywords: one, three, two" in err
    assert sample_project.read() == before


def test_main_unreadable_file(tmp_path, monkeypatch, capsys) -> None:
    monkeypatch.chdir(tmp_path)

    with pytest.raises(SystemExit) as excinfo:
        main(["one"])

    assert excinfo.value.code == 1
    assert "Unable to read .env file" in capsys.readouterr().err


def test_main_lists_keywords(sample_project, monkeypatch, capsys) -> None:
    monkeypatch.chdir(sample_project.path())

    main(["--list"])

    assert capsys.readouterr().out == "one\nthree\ntwo\n"


def test_main_lists_nothing_for_plain_file(env_builder, capsys) -> None:
    env_builder.write({".env": "KEY=value\n"})

    main(["--list", "--file", str(env_builder.path(".env"))])

    assert capsys.readouterr().out == "No keywords found in .env file\n"


def test_main_dry_run_prints_diff(sample_project, monkeypatch, capsys) -> None:
    monkeypatch.chdir(sample_project.path())
    before = sample_project.read()

    main(["one", "--dry-run"])

    out = capsys.readouterr().out
    assert out.startswith(".env changes (dry-run):\n")
    assert "+TEST_A=1" in out
    assert sample_project.read() == before


def test_main_reports_invalid_config(sample_project, monkeypatch, capsys) -> None:
    sample_project.write({".cenv.yml": "activation: sometimes\n"})
    monkeypatch.chdir(sample_project.path())

    with pytest.raises(SystemExit) as excinfo:
        main(["one"])

    assert excinfo.value.code == 1
    assert "Problem loading configuration" in capsys.readouterr().err


def test_main_config_option_must_exist(tmp_path, capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["one", "--config", str(tmp_path / "nope.yml")])

    assert excinfo.value.code == 1
    assert "does not exist" in capsys.readouterr().err


def test_main_loose_flag_overrides_config(env_builder, monkeypatch, capsys) -> None:
    env_builder.write({".env": "# ++ a ++\n# note\n# KEY=1\n"})
    monkeypatch.chdir(env_builder.path())

    main(["a", "--loose"])

    assert env_builder.read() == "# ++ a ++\nnote\nKEY=1\n"


def test_main_reports_undecodable_config(sample_project, capsys) -> None:
    sample_project.path(".cenv.yml").write_bytes(b"activation: \xff\n")

    with pytest.raises(SystemExit) as excinfo:
        main(["one", "--file", str(sample_project.path(".env"))])

    assert excinfo.value.code == 1
    assert "Problem loading configuration: Unable to read .cenv.yml" in capsys.readouterr().err
