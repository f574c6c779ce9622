"""
Pure SQL statement builders.
"""

from .ddl import create_table_sql, drop_table_sql
from .dml import insert_sql, select_by_key_sql

__all__ = ["create_table_sql", "drop_table_sql", "insert_sql", "select_by_key_sql"]
