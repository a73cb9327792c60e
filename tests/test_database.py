import sqlite3

import pytest

from creditledger.database import Database, connect_database
from creditledger.models import Bank, Label, LabelName, PaymentType


@pytest.fixture
def db(tmp_path):
    database = Database(tmp_path / "ledger.db")
    database.create_schema()
    yield database
    database.close()


def test_insert_label_round_trip(db):
    label = db.insert_label(3, "PAYPAL *VPNISE")
    assert db.select_labels() == [label]
    assert (label.id_label, label.abb_ctx) == (3, "PAYPAL *VPNISE")


def test_select_labels_where_filters(db):
    first = db.insert_label(1, "SHOP")
    db.insert_label(2, "GAS")
    third = db.insert_label(1, "MARKET")
    assert db.select_labels_where(1) == [first, third]
    assert db.select_labels_where(9) == []


def test_count_labels_where(db):
    db.insert_label(1, "SHOP")
    db.insert_label(1, "MARKET")
    db.insert_label(2, "GAS")
    assert db.count_labels_where(1) == len(db.select_labels_where(1))
    assert db.count_labels_where(5) == 0


def test_select_labels_like_matches_wrapped_text(db):
    wrapped = db.insert_label(1, "%SHOP%")
    db.insert_label(1, "SHOP")
    assert db.select_labels_like("SHOP") == [wrapped]


def test_label_names_round_trip(db):
    food = db.insert_label_name("food")
    travel = db.insert_label_name("travel")
    assert db.select_labels_name() == [food, travel]
    assert db.select_labels_name_where(travel.id) == [LabelName(travel.id, "travel")]


def test_delete_label_name(db):
    food = db.insert_label_name("food")
    travel = db.insert_label_name("travel")
    db.delete_label_name(food.id)
    assert db.select_labels_name() == [travel]


def test_delete_label(db):
    first = db.insert_label(1, "SHOP")
    second = db.insert_label(1, "MARKET")
    db.delete_label(first.id)
    assert db.select_labels() == [second]


def test_credit_round_trip(db):
    credit = db.insert_credit("2024-12-24", "PAYPAL *VPNISE", 120.25, 1, "2024-12", 2)
    assert db.select_credit() == [credit]
    assert credit.amount == 120.25


def test_installment_and_items(db):
    plan = db.insert_installment("2024-12-24", "2025-01-24", 2, "phone", 1, 100.0, 200.0)
    item_one = db.insert_installment_item("2024-12-24", "2024-12", 1, 100.0, plan.id)
    item_two = db.insert_installment_item("2025-01-24", "2025-01", 1, 100.0, plan.id)
    other = db.insert_installment_item("2025-01-24", "2025-01", 1, 5.0, plan.id + 1)
    assert db.select_installment() == [plan]
    assert db.select_installment_items() == [item_one, item_two, other]
    assert db.select_installment_items_where(plan.id) == [item_one, item_two]


def test_banks_and_payment_types(db):
    with db.connection:
        db.connection.execute("INSERT INTO bank (id, name) VALUES (1, 'KBANK')")
        db.connection.execute("INSERT INTO bank (id, name) VALUES (2, 'OTHER')")
        db.connection.execute("INSERT INTO payment_type (id, chanel) VALUES (2, 'INSTALLMENT')")
    assert db.select_bank() == [Bank(1, "KBANK"), Bank(2, "OTHER")]
    assert db.select_bank_where(2) == [Bank(2, "OTHER")]
    assert db.select_payment_type_where(2) == [PaymentType(2, "INSTALLMENT")]
    assert db.select_payment_type_where(1) == []


def test_create_schema_keeps_data(db):
    label = db.insert_label(1, "SHOP")
    db.create_schema()
    assert db.select_labels() == [label]


def test_context_manager_closes(tmp_path):
    with Database(tmp_path / "ledger.db") as database:
        database.create_schema()
        database.insert_label(1, "SHOP")
    with pytest.raises(sqlite3.ProgrammingError):
        database.select_labels()


def test_data_persists_between_connections(tmp_path):
    path = tmp_path / "ledger.db"
    with Database(path) as database:
        database.create_schema()
        label = database.insert_label(4, "GAS")
    with Database(path) as database:
        assert database.select_labels() == [Label(label.id, 4, "GAS")]


def test_connect_database_with_url(tmp_path):
    with connect_database(tmp_path / "ledger.db") as database:
        database.create_schema()
        assert database.select_labels() == []


def test_connect_database_from_environment(tmp_path, monkeypatch):
    path = tmp_path / "env.db"
    monkeypatch.setenv("DATABASE_URL", str(path))
    with connect_database() as database:
        assert database.path == str(path)
        database.create_schema()
        food = database.insert_label_name("food")
        assert database.select_labels_name() == [food]
    assert path.exists()


def test_connect_database_from_dotenv(tmp_path, monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "dotenv.db"
    (tmp_path / ".env").write_text(f"DATABASE_URL={path}\n")
    with connect_database() as database:
        assert database.path == str(path)


def test_connect_database_without_url_raises(tmp_path, monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.chdir(tmp_path)
    with pytest.raises(RuntimeError, match="DATABASE_URL must be set"):
        connect_database()