import os, subprocess, sys

from attestation_verifier.nullifier import derive_nullifier

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def run_tool(args, **env):
    full_env = {k: v for k, v in os.environ.items() if k not in ("NULLIFIER_SALT", "VERIFIER_PORT")}
    full_env.update(PYTHONPATH=ROOT, **env)
    return subprocess.run(
        [sys.executable, os.path.join(ROOT, "tools", "derive_nullifier.py"), *args],
        capture_output=True, text=True, env=full_env,
    )


def test_derive_nullifier_tool_matches_service():
    out = run_tool(["dk-1", "dk-2"], NULLIFIER_SALT="pepper")
    assert out.returncode == 0
    lines = out.stdout.strip().splitlines()
    assert lines == [
        f"dk-1\t{derive_nullifier('dk-1', 'pepper')}",
        f"dk-2\t{derive_nullifier('dk-2', 'pepper')}",
    ]


def test_derive_nullifier_tool_uses_default_salt():
    out = run_tool(["dk-1"])
    assert out.stdout.strip() == f"dk-1\t{derive_nullifier('dk-1', 'vh-nullifier-salt')}"


def test_derive_nullifier_tool_reports_config_error():
    out = run_tool(["dk-1"], VERIFIER_PORT="not-a-port")
    assert out.returncode == 2
    assert "Configuration error" in out.stderr
