import os
import pytest
from pathlib import Path
import subprocess
import sys

# Define paths relative to the main tests/ directory
TESTS_ROOT_DIR = Path(__file__).parent # This is tests/integration/
PROJECT_ROOT = TESTS_ROOT_DIR.parent.parent # Go up two levels to project root


@pytest.fixture
def run_cli_tool():
    """Fixture to provide a helper function for running the CLI tool."""
    def _run_cli(norm_file: Path, verbose: bool = False, cwd: Path = PROJECT_ROOT):
        """Helper function to run the CLI tool as a subprocess."""
        cmd = [
            sys.executable,  # Use the current Python executable
            "-m",
            "norm.cli",  # Invoke the module's entry point
            str(norm_file),
        ]
        if verbose:
            cmd.append("-v")

        # Make the src layout importable even without an installed package
        env = dict(os.environ)
        env["PYTHONPATH"] = os.pathsep.join(
            p for p in [str(PROJECT_ROOT / "src"), env.get("PYTHONPATH", "")] if p
        )

        result = subprocess.run(cmd, capture_output=True, text=True, cwd=cwd, env=env, check=False)

        if result.returncode != 0:
            print(f"--- CLI Output for {norm_file.name} ---")
            print(f"Command: {' '.join(cmd)}")
            print("STDOUT:", result.stdout)
            print("STDERR:", result.stderr)
            print("--- End CLI Output ---")

        return result
    return _run_cli


@pytest.fixture(scope="session")
def fixtures_dir() -> Path:
    return Path(__file__).parent.parent / "fixtures"


@pytest.fixture(scope="session")
def project_root() -> Path:
    return Path(__file__).parent.parent.parent
