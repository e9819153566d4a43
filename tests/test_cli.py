"""Tests for lexvec.cli — resolving and printing a configuration."""

from __future__ import annotations

import pytest
import yaml

from lexvec.cli import main, resolve_config
from lexvec.relation import RelationType


@pytest.fixture
def yaml_config(tmp_path):
    path = tmp_path / "lexvec.yaml"
    path.write_text("dim: 300\nwindow: 8\nrelation_type: co\n")
    return str(path)


class TestResolveConfig:
    def test_defaults(self):
        config = resolve_config([])
        assert config.dim == 10
        assert config.relation_type is RelationType.PPMI

    def test_flags_only(self):
        config = resolve_config(["-d", "50", "--rel", "pmi", "--to-lower"])
        assert config.dim == 50
        assert config.relation_type is RelationType.PMI
        assert config.to_lower is True

    def test_yaml_only(self, yaml_config):
        config = resolve_config(["--config", yaml_config])
        assert config.dim == 300
        assert config.window == 8
        assert config.relation_type is RelationType.COLLOCATION

    def test_flags_override_yaml(self, yaml_config):
        config = resolve_config(["-w", "2", "--config", yaml_config, "--rel=logco"])
        assert config.dim == 300
        assert config.window == 2
        assert config.relation_type is RelationType.LOG_COLLOCATION

    def test_config_path_not_stored_on_config(self, yaml_config):
        config = resolve_config(["--config", yaml_config])
        assert not hasattr(config, "config_path")

    def test_bad_rel_exits(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            resolve_config(["--rel", "bogus"])
        assert excinfo.value.code == 2
        assert "bogus not in ppmi|pmi|co|logco" in capsys.readouterr().err


class TestMain:
    def test_prints_yaml(self, capsys):
        main(["--dim", "64", "--rel", "logco"])
        data = yaml.safe_load(capsys.readouterr().out)
        assert data["dim"] == 64
        assert data["relation_type"] == "logco"
        assert data["batch_size"] == 100000

    def test_help_exits_cleanly(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--help"])
        assert excinfo.value.code == 0
        out = capsys.readouterr().out
        assert "--goroutines" in out
        assert "--config" in out
