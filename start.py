"""Simple launcher for the route finder web app.

Starts the Gradio server in apps/app.py, preferring the project's
virtualenv interpreter when one exists.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path


def main() -> None:
    project_root = Path(__file__).resolve().parent

    script_path = project_root / "apps" / "app.py"
    if not script_path.exists():
        print(f"Cannot find {script_path.relative_to(project_root)}.")
        sys.exit(1)

    venv_python = project_root / ".venv" / "bin" / "python"
    if not venv_python.exists():
        venv_python = project_root / ".venv" / "Scripts" / "python.exe"

    python_exe = str(venv_python) if venv_python.exists() else sys.executable
    cmd = [python_exe, str(script_path)]
    print(f"Starting Smart Route Finder with: {' '.join(cmd)}")
    subprocess.run(cmd, check=False)


if __name__ == "__main__":
    main()
