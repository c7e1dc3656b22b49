import os
import subprocess
import sys
from pathlib import Path
import pytest

REPO_ROOT = Path(__file__).resolve().parents[2]

def run_cli_command(args, config_dir=None):
    env = dict(os.environ)
    env.pop("TMUX", None)
    # keep the developer's tmux server out of session naming
    env["TMUX_CLUSTER_TMUX"] = "tmux-cluster-missing-tmux"
    if config_dir is not None:
        env["TMUX_CLUSTER_CONFIG_DIR"] = str(config_dir)
    return subprocess.run(
        [sys.executable, "-m", "tmuxcluster"] + args,
        capture_output=True, text=True, cwd=REPO_ROOT, env=env,
    )

@pytest.fixture
def config_dir(tmp_path):
    (tmp_path / "clusters").write_text("web web1 web2\n")
    (tmp_path / "tags").write_text("db1 db\n")
    return tmp_path

def test_help():
    result = run_cli_command(["--help"])
    assert "Usage" in result.stdout
    assert "--dump-hosts" in result.stdout

def test_version():
    result = run_cli_command(["--version"])
    assert result.returncode == 0
    assert "tmux-cluster" in result.stdout

def test_dump_hosts(config_dir):
    result = run_cli_command(["-d", "web"], config_dir)
    assert result.returncode == 0
    assert result.stdout == "web1 web2\n"

def test_dump_commands(config_dir):
    result = run_cli_command(["--dump-commands", "--exclude", "web2", "web"], config_dir)
    assert result.returncode == 0
    assert result.stdout.splitlines()[-1] == "select-layout -t cluster-web tiled"

def test_usage_error_exit_code(config_dir):
    result = run_cli_command(["-d", "-t", "web"], config_dir)
    assert result.returncode == 2
    assert "mutually exclusive" in result.stderr

def test_config_error_exit_code(tmp_path):
    result = run_cli_command(["-d", "web"], tmp_path / "absent")
    assert result.returncode == 3

def test_name_collision_exit_code(config_dir):
    result = run_cli_command(["-d", "-c", "db other1"], config_dir)
    assert result.returncode == 3
    assert "already defined" in result.stderr

def test_no_hosts_exit_code(config_dir):
    result = run_cli_command(["-d", "-x", "web", "web"], config_dir)
    assert result.returncode == 1

def test_undecodable_config_exit_code(tmp_path):
    (tmp_path / "clusters").write_bytes(b"web web1 caf\xe9\n")
    result = run_cli_command(["-d", "web"], tmp_path)
    assert result.returncode == 3
    assert "Cannot read" in result.stderr
