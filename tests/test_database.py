from sqlalchemy import create_engine, insert, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.schema import CreateTable

from dashboard_seed import database
from dashboard_seed.models import CustomerModel, RevenueModel, UserModel


def test_postgres_scheme_is_normalized():
    url = database.normalize_database_url("postgres://u:p@db.example.com:5432/dash")
    assert url == "postgresql://u:p@db.example.com:5432/dash"
    assert database.normalize_database_url("sqlite:///./x.db") == "sqlite:///./x.db"


def test_postgres_engine_uses_unverified_tls_and_pool():
    options = database.engine_options("postgresql://u:p@db.example.com/dash")

    assert options["connect_args"] == {"sslmode": "require"}
    assert options["pool_size"] == database.DB_POOL_SIZE
    assert options["max_overflow"] == database.DB_MAX_OVERFLOW
    assert options["pool_pre_ping"] is True


def test_sqlite_engine_allows_cross_thread_use():
    options = database.engine_options("sqlite:///./x.db")

    assert options["connect_args"] == {"check_same_thread": False}
    assert "pool_size" not in options


def test_check_connection_reports_reachable_database(test_engine):
    assert database.check_connection(test_engine) is True


def test_check_connection_logs_and_returns_false_when_unreachable(tmp_path, caplog):
    unreachable = create_engine(f"sqlite:///{(tmp_path / 'missing' / 'x.db').as_posix()}")

    assert database.check_connection(unreachable) is False
    assert "Database connection error" in caplog.text


def test_id_default_uses_uuid_ossp_on_postgres():
    ddl = str(CreateTable(UserModel.__table__).compile(dialect=postgresql.dialect()))

    assert "id UUID DEFAULT uuid_generate_v4() NOT NULL" in ddl
    assert "UNIQUE (email)" in ddl


def test_id_default_on_sqlite_is_random_hex():
    ddl = str(CreateTable(CustomerModel.__table__).compile(dialect=sqlite.dialect()))
    assert "randomblob(16)" in ddl


def test_revenue_month_is_the_key():
    ddl = str(CreateTable(RevenueModel.__table__).compile(dialect=postgresql.dialect()))
    assert "month VARCHAR(4) NOT NULL" in ddl
    assert "PRIMARY KEY (month)" in ddl


def test_server_generates_ids_when_insert_omits_them(test_engine):
    CustomerModel.__table__.create(bind=test_engine)
    with test_engine.begin() as conn:
        conn.execute(
            insert(CustomerModel.__table__).values(name="Amy Burns", email="amy@burns.com", image_url="/customers/amy-burns.png")
        )
        ids = conn.execute(select(CustomerModel.id)).scalars().all()

    assert len(ids) == 1
    assert len(ids[0]) == 36
