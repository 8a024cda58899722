from __future__ import annotations

import subprocess
import sys
from pathlib import Path


def test_streamlit_app_compiles() -> None:
    repo_root = Path(__file__).resolve().parents[1]

    result = subprocess.run(
        [sys.executable, "-m", "py_compile", str(repo_root / "app.py")],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 0, (
        "py_compile failed for app.py.\n"
        f"stdout:\n{result.stdout}\n"
        f"stderr:\n{result.stderr}"
    )
