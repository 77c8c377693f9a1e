import json

import pytest

from invoice_dashboard.services import DashboardService, JsonDataStore, SqlDataStore
from invoice_dashboard.services.data_store_sql import create_database_engine

CUSTOMERS = [
    {"id": "c1", "name": "Evil Rabbit", "email": "evil@rabbit.com", "image_url": "/customers/evil-rabbit.png"},
    {"id": "c2", "name": "Amy Burns", "email": "amy@burns.com", "image_url": "/customers/amy-burns.png"},
    {"id": "c3", "name": "Lee Robinson", "email": "lee@robinson.com", "image_url": "/customers/lee-robinson.png"},
]

INVOICES = [
    {"id": "inv-a", "customer_id": "c1", "amount": 100, "status": "paid", "date": "2023-01-10"},
    {"id": "inv-b", "customer_id": "c2", "amount": 1500, "status": "pending", "date": "2023-03-01"},
    {"id": "inv-c", "customer_id": "c1", "amount": 200, "status": "paid", "date": "2023-02-15"},
    {"id": "inv-d", "customer_id": "c2", "amount": 40, "status": "pending", "date": "2023-03-01"},
    {"id": "inv-e", "customer_id": "c2", "amount": 10, "status": "pending", "date": "2022-12-31"},
]

REVENUE = [{"month": "Jan", "revenue": 2000}, {"month": "Feb", "revenue": 1800}]

USERS = [
    {"id": "u1", "name": "User", "email": "user@nextmail.com", "password": "123456"},
    {"id": "u2", "name": "Other", "email": "other@nextmail.com", "password": "abcdef"},
]


def write_documents(directory, invoices=INVOICES, customers=CUSTOMERS, revenue=REVENUE, users=USERS):
    for name, records in (
        ("invoices.json", invoices),
        ("customers.json", customers),
        ("revenue.json", revenue),
        ("users.json", users),
    ):
        (directory / name).write_text(json.dumps(records), encoding="utf-8")
    return directory


@pytest.fixture
def data_dir(tmp_path):
    return write_documents(tmp_path)


@pytest.fixture
def json_store(data_dir):
    return JsonDataStore(data_dir)


@pytest.fixture
def service(json_store):
    return DashboardService(json_store)


@pytest.fixture
def sql_store(json_store):
    store = SqlDataStore(create_database_engine("sqlite://"))
    store.seed(json_store)
    return store


@pytest.fixture
def sql_service(sql_store):
    return DashboardService(sql_store)
