from pathlib import Path

from src.hr_payroll.hr_payroll.database.bootstrap import _strip_create_db_and_use, iter_sql_statements

SCHEMA = Path(__file__).resolve().parents[2] / "database" / "schema.sql"


def test_split_ignores_semicolons_in_quotes_and_comments():
    sql = """
    -- leading comment; with a semicolon
    INSERT INTO t VALUES ('a;b');
    INSERT INTO t VALUES ("c;d"); -- trailing
    SELECT 1
    """

    statements = list(iter_sql_statements(sql))

    assert statements == [
        "INSERT INTO t VALUES ('a;b')",
        'INSERT INTO t VALUES ("c;d")',
        "SELECT 1",
    ]


def test_single_dash_is_kept():
    assert list(iter_sql_statements("SELECT 5-3;")) == ["SELECT 5-3"]


def test_schema_creates_the_four_tables():
    sql = _strip_create_db_and_use(SCHEMA.read_text(encoding="utf-8"))

    statements = list(iter_sql_statements(sql))

    assert len(statements) == 4
    assert all(s.upper().startswith("CREATE TABLE IF NOT EXISTS") for s in statements)
    names = [s.split()[5] for s in statements]
    assert names == ["departments", "employees", "attendance_records", "salary_records"]
