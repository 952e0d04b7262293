API_PREFIX = "/api"

SORT_COLUMNS = {
    "date": "date",
    "quantity": "quantity",
    "customerName": "customer_name",
}
DEFAULT_SORT_BY = "date"
DEFAULT_SORT_ORDER = "desc"

# Source file headers -> table columns. Also the display names used in API rows.
DISPLAY_COLUMNS = (
    ("Transaction ID", "transaction_id"),
    ("Date", "date"),
    ("Customer ID", "customer_id"),
    ("Customer Name", "customer_name"),
    ("Phone Number", "phone_number"),
    ("Gender", "gender"),
    ("Age", "age"),
    ("Customer Region", "customer_region"),
    ("Customer Type", "customer_type"),
    ("Product ID", "product_id"),
    ("Product Name", "product_name"),
    ("Brand", "brand"),
    ("Product Category", "product_category"),
    ("Tags", "tags"),
    ("Quantity", "quantity"),
    ("Price per Unit", "price_per_unit"),
    ("Discount Percentage", "discount_percentage"),
    ("Total Amount", "total_amount"),
    ("Final Amount", "final_amount"),
    ("Payment Method", "payment_method"),
    ("Order Status", "order_status"),
    ("Delivery Type", "delivery_type"),
    ("Store ID", "store_id"),
    ("Store Location", "store_location"),
    ("Salesperson ID", "salesperson_id"),
    ("Employee Name", "employee_name"),
)

TRANSACTION_COLUMNS = tuple(column for _, column in DISPLAY_COLUMNS)
INTEGER_COLUMNS = frozenset({"age", "quantity"})
DECIMAL_COLUMNS = frozenset(
    {"price_per_unit", "discount_percentage", "total_amount", "final_amount"}
)

INDEXED_COLUMNS = (
    "customer_name",
    "phone_number",
    "customer_region",
    "gender",
    "product_category",
    "payment_method",
    "date",
)
