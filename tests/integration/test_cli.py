"""End-to-end tests of the norm command line."""

import ast
import shutil

from tests.test_utils import make_norm


def test_generates_configured_output_file(tmp_path, fixtures_dir, run_cli_tool):
    norm_file = tmp_path / "example.norm.sql"
    shutil.copy(fixtures_dir / "example.norm.sql", norm_file)

    result = run_cli_tool(norm_file)
    assert result.returncode == 0, f"CLI failed: {result.stderr}"

    output = tmp_path / "store.py"
    assert output.is_file(), "Generated file was not created."
    tree = ast.parse(output.read_text())
    names = {node.name for node in tree.body if isinstance(node, (ast.FunctionDef, ast.ClassDef))}
    assert {"add_user", "get_user_list_no_model", "get_user_list_no_model_scan", "get_balance"} <= names
    assert {"GetUserListNoModelOutput", "GetUserListNoModelCursor", "GetBalanceOutput"} <= names
    assert "Successfully generated" in result.stderr


def test_default_output_file(tmp_path, run_cli_tool):
    norm_file = tmp_path / "queries.norm.sql"
    norm_file.write_text(make_norm("-- !exec Ping\nSELECT 1"))

    result = run_cli_tool(norm_file)
    assert result.returncode == 0, f"CLI failed: {result.stderr}"
    assert (tmp_path / "db.py").is_file()


def test_format_error_aborts_without_output(tmp_path, run_cli_tool):
    norm_file = tmp_path / "bad.norm.sql"
    norm_file.write_text("-- !norm\n-- !file out.py\n\n-- !exec AddUser\n-- !input email\nINSERT INTO users VALUES ($1)\n")

    result = run_cli_tool(norm_file)
    assert result.returncode == 1
    assert "Format error" in result.stderr
    assert "on line 5" in result.stderr
    assert not (tmp_path / "out.py").exists()


def test_unknown_directive_aborts(tmp_path, run_cli_tool):
    norm_file = tmp_path / "bad.norm.sql"
    norm_file.write_text("-- !norm\n-- !read Foo\n-- !foo x\nSELECT 1\n")

    result = run_cli_tool(norm_file)
    assert result.returncode == 1
    assert "Unknown command on line 3" in result.stderr
    assert not (tmp_path / "db.py").exists()


def test_missing_sentinel_aborts(tmp_path, run_cli_tool):
    norm_file = tmp_path / "plain.sql"
    norm_file.write_text("SELECT 1;\n")

    result = run_cli_tool(norm_file)
    assert result.returncode == 1
    assert "Not a valid norm file" in result.stderr


def test_name_collision_aborts_without_output(tmp_path, run_cli_tool):
    norm_file = tmp_path / "clash.norm.sql"
    norm_file.write_text(make_norm("-- !exec CreateTable\nCREATE TABLE t (x INT)", "-- !exec CloseConnection\nDELETE FROM t"))

    result = run_cli_tool(norm_file)
    assert result.returncode == 1
    assert "Generated name 'close_connection'" in result.stderr
    assert "for command 'CloseConnection' on line 6" in result.stderr
    assert not (tmp_path / "db.py").exists()


def test_formatter_failure_keeps_previous_output(tmp_path, run_cli_tool):
    previous = tmp_path / "db.py"
    previous.write_text("# previous output\n")
    norm_file = tmp_path / "bad_types.norm.sql"
    # An input type that is not a Python expression makes the generated code unparsable
    norm_file.write_text(make_norm("-- !exec Broken\n-- !input x in(t\nSELECT $1"))

    result = run_cli_tool(norm_file)
    assert result.returncode == 1
    assert previous.read_text() == "# previous output\n"


def test_nonexistent_input_file(tmp_path, run_cli_tool):
    result = run_cli_tool(tmp_path / "missing.norm.sql")
    assert result.returncode != 0


def test_verbose_logs_debug_messages(tmp_path, run_cli_tool):
    norm_file = tmp_path / "queries.norm.sql"
    norm_file.write_text(make_norm("-- !exec Ping\nSELECT 1"))

    result = run_cli_tool(norm_file, verbose=True)
    assert result.returncode == 0, f"CLI failed: {result.stderr}"
    assert "DEBUG:" in result.stderr
