import unittest

from fastapi.testclient import TestClient

from salesview.config import Settings
from salesview.database.store import TransactionStore
from salesview.main import create_app
from salesview.routers.transactions import split_values
from tests.support import make_store


def _settings(**overrides):
    values = dict(DATABASE_URL="sqlite:///:memory:", MAX_PAGE_SIZE=50)
    values.update(overrides)
    return Settings(**values)


class TransactionsApiTest(unittest.TestCase):
    def setUp(self):
        self.store = make_store()
        self.client = TestClient(create_app(settings=_settings(), store=self.store))
        self.client.__enter__()

    def tearDown(self):
        self.client.__exit__(None, None, None)

    def test_first_page_with_defaults(self):
        response = self.client.get("/api/transactions")
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["currentPage"], 1)
        self.assertEqual(body["pageSize"], 10)
        self.assertEqual(body["totalRecords"], 7)
        self.assertEqual(body["totalPages"], 1)
        self.assertEqual(body["transactions"][0]["Transaction ID"], "T-7")

    def test_comma_joined_filters_and_sort(self):
        response = self.client.get(
            "/api/transactions",
            params={
                "customerRegion": "North, South",
                "gender": "Female",
                "sortBy": "customerName",
                "sortOrder": "asc",
                "limit": 2,
            },
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["totalRecords"], 3)
        self.assertEqual(body["totalPages"], 2)
        self.assertEqual(
            [item["Customer Name"] for item in body["transactions"]],
            ["Alice Smith", "Carol King"],
        )

    def test_empty_parameters_are_ignored(self):
        response = self.client.get(
            "/api/transactions",
            params={"search": "", "ageMin": "", "tags": "", "dateStart": ""},
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["totalRecords"], 7)

    def test_age_range_and_tags(self):
        response = self.client.get(
            "/api/transactions",
            params={"ageMin": "20", "ageMax": "40", "tags": "red,organic"},
        )
        body = response.json()
        self.assertEqual(
            sorted(item["Transaction ID"] for item in body["transactions"]),
            ["T-1", "T-3", "T-7"],
        )

    def test_page_past_the_end(self):
        response = self.client.get("/api/transactions", params={"page": 5, "limit": 5})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["transactions"], [])
        self.assertEqual(body["totalRecords"], 7)
        self.assertEqual(body["currentPage"], 5)

    def test_invalid_paging_and_numbers(self):
        self.assertEqual(self.client.get("/api/transactions", params={"page": 0}).status_code, 422)
        self.assertEqual(self.client.get("/api/transactions", params={"limit": 51}).status_code, 400)
        response = self.client.get("/api/transactions", params={"ageMin": "old"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["detail"], "ageMin must be an integer.")

    def test_date_bounds_must_be_dates(self):
        response = self.client.get("/api/transactions", params={"dateEnd": "soon"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["detail"], "dateEnd must be a date (DD-MM-YYYY).")

        response = self.client.get(
            "/api/transactions",
            params={"dateStart": "2023-02-01", "dateEnd": "2023-05-31"},
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["totalRecords"], 4)

    def test_filter_options(self):
        response = self.client.get("/api/transactions/filter-options")
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["regions"], ["East", "North", "South", "West"])
        self.assertEqual(body["paymentMethods"], ["Cash", "Credit Card", "Debit Card", "UPI"])
        self.assertEqual(body["tags"], ["blue", "green", "green-tea", "organic", "red"])

    def test_summary(self):
        response = self.client.get("/api/transactions/summary", params={"customerRegion": "North"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json(),
            {
                "totalRecords": 3,
                "totalUnits": 12,
                "totalAmount": 770.0,
                "totalDiscount": 130.0,
                "discountedRecords": 2,
            },
        )

    def test_health_reports_record_count(self):
        body = self.client.get("/api/health").json()
        self.assertEqual(body["status"], "ok")
        self.assertEqual(body["recordCount"], 7)

    def test_query_failure_is_opaque(self):
        with self.store.engine.begin() as conn:
            conn.exec_driver_sql("DROP TABLE transactions")

        response = self.client.get("/api/transactions")
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"detail": "Failed to fetch transactions"})

        response = self.client.get("/api/transactions/filter-options")
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"detail": "Failed to fetch filter options"})

        body = self.client.get("/api/health").json()
        self.assertEqual(body["status"], "degraded")
        self.assertEqual(body["database"], "connection error")

    def test_root_lists_endpoints(self):
        body = self.client.get("/").json()
        self.assertEqual(body["endpoints"]["filterOptions"], "/api/transactions/filter-options")


class UnavailableStoreTest(unittest.TestCase):
    def test_startup_failure_degrades_instead_of_crashing(self):
        store = TransactionStore("nosuchdialect://localhost/sales")
        app = create_app(settings=_settings(), store=store)
        with TestClient(app) as client:
            health = client.get("/api/health")
            self.assertEqual(health.status_code, 200)
            self.assertEqual(health.json()["status"], "degraded")
            self.assertEqual(health.json()["database"], "unavailable")

            response = client.get("/api/transactions")
            self.assertEqual(response.status_code, 503)
            self.assertEqual(response.json(), {"detail": "Database unavailable"})


class SplitValuesTest(unittest.TestCase):
    def test_split_values(self):
        self.assertEqual(split_values("North, South,,East "), ["North", "South", "East"])
        self.assertEqual(split_values(""), [])
        self.assertEqual(split_values(None), [])


if __name__ == "__main__":
    unittest.main()
