import json
import os
import subprocess
import sys
from pathlib import Path

from graffiti_core.reader import iter_messages


def run(args, cwd):
    env = dict(os.environ)
    env["PYTHONPATH"] = str(Path(cwd) / "src") + os.pathsep + env.get("PYTHONPATH", "")
    return subprocess.run([sys.executable, *args], cwd=cwd, env=env, check=False, capture_output=True, text=True)


def test_sim_fills_small_wall(tmp_path):
    repo = Path(__file__).resolve().parents[1]
    out = tmp_path / "sim.bin"

    r = run(["tools/sim_wall.py", str(out), "--posts", "7", "--max-wall-size", str(8 + 5 * 136)], cwd=repo)
    assert r.returncode == 0, r.stderr + r.stdout

    summary = json.loads(r.stdout.strip().splitlines()[-1])
    assert summary["accepted"] == 5
    assert summary["rejected"] == 2
    assert summary["message_count"] == summary["max_messages"] == 5
    assert summary["size"] == 8 + 5 * 136
    assert len(list(iter_messages(out.read_bytes()))) == 5


def test_sim_stops_at_account_limit(tmp_path):
    repo = Path(__file__).resolve().parents[1]
    out = tmp_path / "small.bin"

    r = run(["tools/sim_wall.py", str(out), "--posts", "4", "--max-account-size", str(8 + 2 * 136)], cwd=repo)
    assert r.returncode == 0, r.stderr + r.stdout

    summary = json.loads(r.stdout.strip().splitlines()[-1])
    assert (summary["accepted"], summary["rejected"]) == (2, 2)
    assert summary["max_messages"] == 66_176
    assert summary["size"] == 8 + 2 * 136
