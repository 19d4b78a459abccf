# ===== SECTION: TEMPLATES =====
# Jinja2 templates for the generated module. Rendered with trim_blocks and
# lstrip_blocks, so block tags on their own line leave no trace. The output
# is valid Python but not canonical; the formatter normalizes spacing.

HEADER_TEMPLATE = '''\
# Code generated by norm. DO NOT EDIT.
# Generated on: {{ date }}
#
# Rows are read by position, so connections must use the default
# tuple-like row factory of their DB-API driver.
"""Data access functions for the {{ package }} package."""
import importlib
from contextlib import closing
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

import {{ driver_lib }}  # noqa: F401
{% for entry in imports %}
{{ entry | import_line }}
{% endfor %}

DRIVER_NAME = {{ driver_name | pystr }}


class NormError(Exception):
    """Base class for errors raised by the generated functions."""


class NoRowsError(NormError, LookupError):
    """A single-row query produced no rows."""


class ScanError(NormError, ValueError):
    """A result row does not match the declared outputs."""


def _scan_row(row: Any, count: int, name: str) -> Tuple[Any, ...]:
    values = tuple(row)
    if len(values) != count:
        raise ScanError(f"{name}: expected {count} column(s) in result row, got {len(values)}")
    return values


def _ping(conn: Any) -> None:
    with closing(conn.cursor()) as _cur:
        _cur.execute({{ ping_query | pystr }})
        _cur.fetchone()


def open_connection(conn_str: str) -> Any:
    """Opens a connection with the configured driver and checks that it is alive."""
    driver = importlib.import_module(DRIVER_NAME)
    conn = driver.connect(conn_str)
    try:
        _ping(conn)
    except Exception:
        conn.close()
        raise
    return conn


def close_connection(conn: Any) -> None:
    """Releases a connection returned by open_connection."""
    conn.close()
'''

# Record type for the outputs of a read command that declares no model
RECORD_TEMPLATE = '''\
{% if not command.model %}


@dataclass
class {{ output_class }}:
{% for out in command.outputs %}
    {{ out.name }}: {{ out.type }}
{% else %}
    pass
{% endfor %}
{% endif %}
'''

EXEC_TEMPLATE = '''\
{{ sql_const }} = {{ command.body_string | pystr }}


def {{ func }}(conn: Any{{ command.inputs | param_list }}) -> None:
{% if command.doc %}
{{ command.doc | docstring }}
{% endif %}
    with closing(conn.cursor()) as _cur:
        _cur.execute({{ sql_const }}{{ command.inputs | bind_args }})
'''

READ_ONE_TEMPLATE = '''\
{{ sql_const }} = {{ command.body_string | pystr }}
{% include "record" %}


def {{ func }}(conn: Any{{ command.inputs | param_list }}) -> {{ result_type }}:
{% if command.doc %}
{{ command.doc | docstring }}
{% endif %}
    with closing(conn.cursor()) as _cur:
        _cur.execute({{ sql_const }}{{ command.inputs | bind_args }})
        _row = _cur.fetchone()
    if _row is None:
        raise NoRowsError({{ (func ~ ": no rows in result set") | pystr }})
{% if command.outputs %}
    {{ command.outputs | output_locals }} = _scan_row(_row, {{ command.outputs | length }}, {{ func | pystr }})
{% else %}
    _scan_row(_row, 0, {{ func | pystr }})
{% endif %}
    return {{ result_type }}({{ command.outputs | keyword_binding }})
'''

READ_MANY_TEMPLATE = '''\
{{ sql_const }} = {{ command.body_string | pystr }}
{% include "record" %}


class {{ cursor_class }}:
    """Row-by-row access to the results of {{ func }}."""

    def __init__(self, cur: Any) -> None:
        self._cur = cur
        self._row = None
        self._closed = False

    def advance(self) -> bool:
        """Moves to the next row; returns False when there are no more rows."""
        self._row = self._cur.fetchone()
        return self._row is not None

    def bind_current(self) -> {{ command.outputs | tuple_type }}:
        """Returns the values of the current row in output order."""
        if self._row is None:
            raise ScanError({{ (func ~ ": no current row, call advance() first") | pystr }})
        return _scan_row(self._row, {{ command.outputs | length }}, {{ func | pystr }})

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._cur.close()

    def __enter__(self) -> "{{ cursor_class }}":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


def {{ scan_func }}(conn: Any{{ command.inputs | param_list }}) -> {{ cursor_class }}:
{% if command.doc %}
{{ command.doc | docstring }}
{% endif %}
    _cur = conn.cursor()
    try:
        _cur.execute({{ sql_const }}{{ command.inputs | bind_args }})
    except Exception:
        _cur.close()
        raise
    return {{ cursor_class }}(_cur)


def {{ func }}(conn: Any{{ command.inputs | param_list }}) -> List[{{ result_type }}]:
{% if command.doc %}
{{ command.doc | docstring }}
{% endif %}
    _ret: List[{{ result_type }}] = []
    with {{ scan_func }}(conn{{ command.inputs | call_args }}) as _res:
        while _res.advance():
{% if command.outputs %}
            {{ command.outputs | output_locals }} = _res.bind_current()
{% else %}
            _res.bind_current()
{% endif %}
            _ret.append({{ result_type }}({{ command.outputs | keyword_binding }}))
    return _ret
'''

TEMPLATES = {
    "header": HEADER_TEMPLATE,
    "record": RECORD_TEMPLATE,
    "exec": EXEC_TEMPLATE,
    "read_one": READ_ONE_TEMPLATE,
    "read": READ_MANY_TEMPLATE,
}
