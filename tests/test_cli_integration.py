import os
import subprocess
import sys
from pathlib import Path

CASES = Path(__file__).parent / "cases"
SRC = Path(__file__).parent.parent / "src"


def _run_cli(args, cwd: Path):
    env = os.environ.copy()
    pythonpath = env.get("PYTHONPATH", "")
    env["PYTHONPATH"] = str(SRC.resolve()) + (os.pathsep + pythonpath if pythonpath else "")
    result = subprocess.run(
        [sys.executable, "-m", "cli", *args],
        cwd=cwd,
        env=env,
        check=False,
        capture_output=True,
        text=True,
    )
    return result


def test_cli_generates_go_file(tmp_path):
    result = _run_cli(
        [
            "generate",
            str(CASES / "starwars.graphql"),
            "--out-dir",
            str(tmp_path),
            "--options",
            '{"descriptions": true}',
        ],
        cwd=tmp_path,
    )
    assert result.returncode == 0, result.stderr
    output_path = tmp_path / "starwars.go"
    assert output_path.read_bytes() == (CASES / "starwars.gotxt").read_bytes()


def test_cli_rejects_malformed_options(tmp_path):
    result = _run_cli(
        [
            "generate",
            str(CASES / "starwars.graphql"),
            "--out-dir",
            str(tmp_path),
            "--options",
            "{not json",
        ],
        cwd=tmp_path,
    )
    assert result.returncode == 1
    assert "go generator failed" in result.stderr
    assert not (tmp_path / "starwars.go").exists()


def test_cli_reports_syntax_errors(tmp_path):
    schema = tmp_path / "broken.graphql"
    schema.write_text("type Query {", encoding="utf-8")
    result = _run_cli(["generate", str(schema)], cwd=tmp_path)
    assert result.returncode == 1
    assert "Parsing failed" in result.stderr
    assert not (tmp_path / "broken.go").exists()


def test_cli_strict_mode_fails_on_diagnostics(tmp_path):
    schema = tmp_path / "ops.graphql"
    schema.write_text("type Query { a: Int }\nquery Q { a }\n", encoding="utf-8")

    lenient = _run_cli(["generate", str(schema)], cwd=tmp_path)
    assert lenient.returncode == 0, lenient.stderr
    assert "WARNING" in lenient.stderr
    assert (tmp_path / "ops.go").exists()

    (tmp_path / "ops.go").unlink()
    strict = _run_cli(["generate", str(schema), "--strict"], cwd=tmp_path)
    assert strict.returncode == 1
    assert not (tmp_path / "ops.go").exists()


def test_cli_missing_input(tmp_path):
    result = _run_cli(["generate", str(tmp_path / "nope.graphql")], cwd=tmp_path)
    assert result.returncode == 1
    assert "Input file not found" in result.stderr
