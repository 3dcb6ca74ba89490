import logging

import pytest

from logging_config import setup_logging
from main import main
from rng import RandomSource


@pytest.fixture(autouse=True)
def seeded(monkeypatch):
    monkeypatch.setenv("MCBENCH_SEED", "123")
    monkeypatch.setenv("MCBENCH_LOG_LEVEL", "WARNING")


def test_no_command(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["mcbench"])
    assert exc.value.code == 1
    assert "Usage" in capsys.readouterr().out


def test_unknown_command():
    with pytest.raises(SystemExit) as exc:
        main(["mcbench", "integrate-everything"])
    assert exc.value.code == 1


def test_missing_arguments(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["mcbench", "pi", "100"])
    assert exc.value.code == 1
    assert "pi <num_points> <source>" in capsys.readouterr().out


def test_unknown_source(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["mcbench", "pi", "100", "WELL_512_A"])
    assert exc.value.code == 1
    assert "Unknown random source" in capsys.readouterr().out


def test_bad_number(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["mcbench", "gaussian", "lots"])
    assert exc.value.code == 1


def test_bad_seed(monkeypatch):
    monkeypatch.setenv("MCBENCH_SEED", "abc")
    with pytest.raises(SystemExit):
        main(["mcbench", "sources"])


def test_sources(capsys):
    main(["mcbench", "sources"])
    assert capsys.readouterr().out.split() == [s.name for s in RandomSource]


def test_pi(capsys):
    main(["mcbench", "pi", "1000", "pcg_64"])
    assert "After generating 2000 random numbers" in capsys.readouterr().out


def test_pi_is_seeded(capsys):
    main(["mcbench", "pi", "1000", "mt"])
    first = capsys.readouterr().out
    main(["mcbench", "pi", "1000", "mt"])
    assert capsys.readouterr().out == first


def test_estimate_pi(capsys):
    main(["mcbench", "estimate-pi", "1000", "jdk"])
    out = capsys.readouterr().out
    assert out.startswith("pi=")
    assert "Pi estimation took" in out


def test_estimate_pi_workers(capsys):
    main(["mcbench", "estimate-pi", "1000", "lcg", "2"])
    assert "Total samples: 1000" in capsys.readouterr().out


def test_gaussian(capsys):
    main(["mcbench", "gaussian", "100"])
    assert "Gaussian sampling took" in capsys.readouterr().out


def test_generation(capsys):
    main(["mcbench", "generation", "10", "lcg", "sfc_64"])
    out = capsys.readouterr().out
    assert "LCG" in out
    assert "SFC_64" in out


def test_visual(tmp_path, capsys):
    path = tmp_path / "out.png"
    main(["mcbench", "visual", str(path), "500", "philox"])
    assert path.exists()
    assert "Saved 500 points" in capsys.readouterr().out


def test_negative_seed(monkeypatch, capsys):
    monkeypatch.setenv("MCBENCH_SEED", "-1")
    main(["mcbench", "pi", "100", "mt"])
    assert "After generating 200 random numbers" in capsys.readouterr().out


def test_log_file(monkeypatch, tmp_path):
    path = tmp_path / "mcbench.log"
    monkeypatch.setenv("MCBENCH_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("MCBENCH_LOG_FILE", str(path))
    main(["mcbench", "pi", "10", "lcg"])

    logger = logging.getLogger("mcbench")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    text = path.read_text(encoding="utf-8")
    assert "mcbench.rng - DEBUG - Created LCG provider (seed=123)" in text


def test_setup_logging_replaces_handlers(tmp_path):
    setup_logging(logging.WARNING)
    logger = setup_logging(logging.WARNING, str(tmp_path / "a.log"))
    assert len(logger.handlers) == 2
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
