#!/usr/bin/env python
"""
Launch the pricing gateway API or the Streamlit UI.

Usage:
    python scripts/run.py api      # uvicorn on the configured PORT
    python scripts/run.py ui       # Streamlit UI talking to the running API
"""
import argparse
import os
import subprocess
import sys
from pathlib import Path


PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"


def build_env() -> dict:
    """Child environment with src/ on PYTHONPATH."""
    env = os.environ.copy()
    paths = [p for p in env.get("PYTHONPATH", "").split(os.pathsep) if p]
    if str(SRC_PATH) not in paths:
        paths.insert(0, str(SRC_PATH))
    env["PYTHONPATH"] = os.pathsep.join(paths)
    return env


def api_command() -> list[str]:
    if str(SRC_PATH) not in sys.path:
        sys.path.insert(0, str(SRC_PATH))
    from pricing_gateway.config.settings import get_settings

    return [
        sys.executable, "-m", "uvicorn",
        "pricing_gateway.api.main:app",
        "--host", "0.0.0.0",
        "--port", str(get_settings().port),
    ]


def ui_command() -> list[str]:
    ui_path = SRC_PATH / "pricing_gateway" / "ui" / "app_streamlit.py"
    if not ui_path.exists():
        print(f"ERROR: UI module not found at {ui_path}")
        sys.exit(1)
    return [sys.executable, "-m", "streamlit", "run", str(ui_path)]


def main():
    parser = argparse.ArgumentParser(description="Run the pricing gateway")
    parser.add_argument("target", choices=["api", "ui"])
    args = parser.parse_args()

    cmd = api_command() if args.target == "api" else ui_command()
    print(f"Starting {args.target}: {' '.join(cmd)}")

    try:
        subprocess.run(cmd, cwd=str(PROJECT_ROOT), env=build_env())
    except KeyboardInterrupt:
        print("\nStopped.")


if __name__ == "__main__":
    main()
