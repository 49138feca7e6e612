import logging
import os

from point_quadtree import main


def _write_config(path, bounds, module_levels=""):
    path.write_text(
        f"tree:\n  bounds: {bounds}\n"
        "logging:\n  global_level: INFO\n"
        f"  module_levels:\n{module_levels}"
    )
    return path


def test_bootstrap_uses_config_bounds(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cfg = _write_config(tmp_path / "c.yaml", "[0, 0, 10, 20]", "    test.main.module: ERROR\n")
    state = main.bootstrap(cfg)
    assert state["bounds"] == (0.0, 0.0, 10.0, 20.0)
    assert state["tree"] is None
    assert logging.getLogger("test.main.module").level == logging.ERROR


def test_bootstrap_ignores_invalid_module_level(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cfg = _write_config(tmp_path / "c.yaml", "[0, 0, 10, 20]", "    test.main.invalid: NOPE\n")
    main.bootstrap(cfg)
    assert logging.getLogger("test.main.invalid").level == logging.NOTSET


def test_bootstrap_reads_config_path_from_env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cfg = _write_config(tmp_path / "env.yaml", "[1, 2, 3, 4]", "    {}\n")
    monkeypatch.setenv("POINT_QUADTREE_CONFIG", str(cfg))
    assert main.bootstrap()["bounds"] == (1.0, 2.0, 3.0, 4.0)


def test_bootstrap_loads_dotenv(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("POINT_QUADTREE_CONFIG", raising=False)
    cfg = _write_config(tmp_path / "dot.yaml", "[5, 5, 6, 6]", "    {}\n")
    (tmp_path / ".env").write_text(f"POINT_QUADTREE_CONFIG={cfg}\n")
    try:
        assert main.bootstrap()["bounds"] == (5.0, 5.0, 6.0, 6.0)
    finally:
        os.environ.pop("POINT_QUADTREE_CONFIG", None)


def test_run_executes_until_quit():
    state = {"tree": None, "bounds": (0, 0, 10, 10), "running": True}
    lines = ["/insert 5 5", "not a command", "/insert 7 2", "/quit", "/insert 1 1"]
    main.run(lines, state)
    assert state["running"] is False
    assert state["tree"].size() == 2


def test_profile_uses_profiling_section_of_loaded_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cfg = tmp_path / "c.yaml"
    cfg.write_text(
        "tree:\n  bounds: [0, 0, 100, 100]\n"
        "profiling:\n  default_queries: 3\n  out_path: custom.prof\n"
    )
    state = main.bootstrap(cfg)
    assert state["profiling"].default_queries == 3
    main.run(["/random 20 1", "/profile"], state)
    assert (tmp_path / "custom.prof").exists()
    assert not (tmp_path / "profile.prof").exists()
