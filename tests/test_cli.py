import json

from typer.testing import CliRunner

from lexispell.cli.main import app


runner = CliRunner()


def _config(tmp_path):
    (tmp_path / "seed.txt").write_text("have\nfew\nfig\npolymorphism\n", encoding="utf-8")
    (tmp_path / "train.txt").write_text("I have a few figs\nI ate a fig\n", encoding="utf-8")
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("seed: seed.txt\ntraining: train.txt\n", encoding="utf-8")
    return cfg


def test_exists(tmp_path):
    cfg = _config(tmp_path)
    res = runner.invoke(app, ["check", "exists", "have", "--config", str(cfg)])
    assert res.exit_code == 0
    assert res.output.strip() == "true"
    res = runner.invoke(app, ["check", "exists", "figs", "--config", str(cfg)])
    assert res.output.strip() == "false"


def test_suggest_json(tmp_path):
    cfg = _config(tmp_path)
    res = runner.invoke(app, ["check", "suggest", "fiw", "--config", str(cfg), "--json"])
    assert res.exit_code == 0
    assert json.loads(res.output) == ["few", "fig"]


def test_analyze(tmp_path):
    cfg = _config(tmp_path)
    res = runner.invoke(app, ["check", "analyze", "I havv 3 figz", "--config", str(cfg)])
    assert res.exit_code == 0
    out = json.loads(res.output)
    assert out["havv"] == ["have"]
    assert out["figz"] == ["fig"]
    assert "3" not in out


def test_bad_config(tmp_path):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("training: train.txt\n", encoding="utf-8")
    res = runner.invoke(app, ["check", "exists", "have", "--config", str(cfg)])
    assert res.exit_code != 0


def test_index_compile_then_query(tmp_path):
    words = tmp_path / "words.txt"
    words.write_text("pear\nfig\nkiwi\nfig\n", encoding="utf-8")
    out = tmp_path / "index.txt"
    res = runner.invoke(app, ["index", "compile", "--input", str(words), "--output", str(out)])
    assert res.exit_code == 0
    assert "3 words into 2 buckets" in res.output
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("index: index.txt\n", encoding="utf-8")
    res = runner.invoke(app, ["--log-level", "debug", "check", "exists", "kiwi", "--config", str(cfg)])
    assert res.exit_code == 0
    assert res.output.strip().splitlines()[-1] == "true"


def test_bad_log_level_in_config(tmp_path):
    cfg = _config(tmp_path)
    cfg.write_text("seed: seed.txt\nlog_level: verbose\n", encoding="utf-8")
    res = runner.invoke(app, ["check", "exists", "have", "--config", str(cfg)])
    assert res.exit_code == 2
    assert "verbose" in res.output


def test_malformed_yaml_config(tmp_path):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("seed: [unclosed\n", encoding="utf-8")
    res = runner.invoke(app, ["check", "exists", "have", "--config", str(cfg)])
    assert res.exit_code == 2


def test_missing_seed_file(tmp_path):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("seed: nope.txt\n", encoding="utf-8")
    res = runner.invoke(app, ["check", "exists", "have", "--config", str(cfg)])
    assert res.exit_code == 2


def test_bad_global_log_level(tmp_path):
    cfg = _config(tmp_path)
    res = runner.invoke(app, ["--log-level", "bogus", "check", "exists", "have", "--config", str(cfg)])
    assert res.exit_code == 2


def test_index_compile_strips_surrounding_spaces(tmp_path):
    words = tmp_path / "words.txt"
    words.write_text("pear \n  fig\n\n", encoding="utf-8")
    out = tmp_path / "index.txt"
    res = runner.invoke(app, ["index", "compile", "--input", str(words), "--output", str(out)])
    assert res.exit_code == 0
    assert out.read_text(encoding="utf-8") == "3\tfig\n4\tpear\n"
