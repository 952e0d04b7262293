from salesview.core.constants import TRANSACTION_COLUMNS
from salesview.database.store import TransactionStore


def make_row(**overrides):
    row = {column: None for column in TRANSACTION_COLUMNS}
    row.update(
        transaction_id="T-1",
        date="01-01-2023",
        customer_id="C-1",
        customer_name="Jane Roe",
        phone_number="9000000000",
        gender="Female",
        age=30,
        customer_region="North",
        customer_type="Regular",
        product_id="P-1",
        product_name="Kettle",
        brand="Acme",
        product_category="Home",
        tags="kitchen",
        quantity=1,
        price_per_unit=100.0,
        discount_percentage=0.0,
        total_amount=100.0,
        final_amount=100.0,
        payment_method="Cash",
        order_status="Completed",
        delivery_type="Standard",
        store_id="S-1",
        store_location="Mumbai",
        salesperson_id="E-1",
        employee_name="Ravi",
    )
    row.update(overrides)
    return row


SAMPLE_ROWS = [
    make_row(
        transaction_id="T-1", customer_name="John Doe", phone_number="9876500001",
        gender="Male", age=25, customer_region="North", product_category="Electronics",
        tags="red,blue", quantity=3, payment_method="UPI", date="2023-01-05",
        discount_percentage=10.0, total_amount=300.0, final_amount=270.0,
    ),
    make_row(
        transaction_id="T-2", customer_name="Johnny Walker", phone_number="9876500002",
        gender="Male", age=41, customer_region="South", product_category="Clothing",
        tags="blue, green", quantity=1, payment_method="Cash", date="2023-02-10",
    ),
    make_row(
        transaction_id="T-3", customer_name="Alice Smith", phone_number="9123400003",
        gender="Female", age=33, customer_region="North", product_category="Beauty",
        tags="red", quantity=5, payment_method="Credit Card", date="2023-03-15",
    ),
    make_row(
        transaction_id="T-4", customer_name="Bob Stone", phone_number="9123400004",
        gender="Male", age=52, customer_region="East", product_category="Electronics",
        tags="green-tea", quantity=2, payment_method="UPI", date="2023-04-20",
    ),
    make_row(
        transaction_id="T-5", customer_name="Carol King", phone_number="9555500005",
        gender="Female", age=19, customer_region="North", product_category="Clothing",
        tags=None, quantity=4, payment_method="Debit Card", date="2023-05-25",
        discount_percentage=20.0, total_amount=500.0, final_amount=400.0,
    ),
    make_row(
        transaction_id="T-6", customer_name="Dave Brown", phone_number="9555500006",
        gender="Male", age=64, customer_region="West", product_category="Home",
        tags="blue", quantity=6, payment_method="Cash", date="2023-06-30",
    ),
    make_row(
        transaction_id="T-7", customer_name="Eve Adams", phone_number="9000000007",
        gender="Female", age=28, customer_region="South", product_category="Beauty",
        tags="organic", quantity=7, payment_method="UPI", date="2023-07-04",
    ),
]


def make_store(rows=None):
    store = TransactionStore("sqlite:///:memory:").open()
    store.insert_batch([dict(row) for row in (SAMPLE_ROWS if rows is None else rows)])
    return store
