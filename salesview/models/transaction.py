from sqlalchemy import Column, Float, Index, Integer, String

from salesview.core.constants import INDEXED_COLUMNS
from salesview.database.base import Base


class Transaction(Base):
    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    transaction_id = Column(String)
    # DD-MM-YYYY text, not a native date
    date = Column(String)

    customer_id = Column(String)
    customer_name = Column(String)
    phone_number = Column(String)
    gender = Column(String)
    age = Column(Integer)
    customer_region = Column(String)
    customer_type = Column(String)

    product_id = Column(String)
    product_name = Column(String)
    brand = Column(String)
    product_category = Column(String)
    tags = Column(String)

    quantity = Column(Integer)
    price_per_unit = Column(Float)
    discount_percentage = Column(Float)
    total_amount = Column(Float)
    final_amount = Column(Float)

    payment_method = Column(String)
    order_status = Column(String)
    delivery_type = Column(String)
    store_id = Column(String)
    store_location = Column(String)
    salesperson_id = Column(String)
    employee_name = Column(String)

    __table_args__ = tuple(
        Index(f"idx_{column}", column) for column in INDEXED_COLUMNS
    )


__all__ = ["Transaction"]
