from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class TransactionRead(BaseModel):
    transaction_id: Optional[str] = Field(None, serialization_alias="Transaction ID")
    date: Optional[str] = Field(None, serialization_alias="Date")
    customer_id: Optional[str] = Field(None, serialization_alias="Customer ID")
    customer_name: Optional[str] = Field(None, serialization_alias="Customer Name")
    phone_number: Optional[str] = Field(None, serialization_alias="Phone Number")
    gender: Optional[str] = Field(None, serialization_alias="Gender")
    age: Optional[int] = Field(None, serialization_alias="Age")
    customer_region: Optional[str] = Field(None, serialization_alias="Customer Region")
    customer_type: Optional[str] = Field(None, serialization_alias="Customer Type")
    product_id: Optional[str] = Field(None, serialization_alias="Product ID")
    product_name: Optional[str] = Field(None, serialization_alias="Product Name")
    brand: Optional[str] = Field(None, serialization_alias="Brand")
    product_category: Optional[str] = Field(None, serialization_alias="Product Category")
    tags: Optional[str] = Field(None, serialization_alias="Tags")
    quantity: Optional[int] = Field(None, serialization_alias="Quantity")
    price_per_unit: Optional[float] = Field(None, serialization_alias="Price per Unit")
    discount_percentage: Optional[float] = Field(
        None, serialization_alias="Discount Percentage"
    )
    total_amount: Optional[float] = Field(None, serialization_alias="Total Amount")
    final_amount: Optional[float] = Field(None, serialization_alias="Final Amount")
    payment_method: Optional[str] = Field(None, serialization_alias="Payment Method")
    order_status: Optional[str] = Field(None, serialization_alias="Order Status")
    delivery_type: Optional[str] = Field(None, serialization_alias="Delivery Type")
    store_id: Optional[str] = Field(None, serialization_alias="Store ID")
    store_location: Optional[str] = Field(None, serialization_alias="Store Location")
    salesperson_id: Optional[str] = Field(None, serialization_alias="Salesperson ID")
    employee_name: Optional[str] = Field(None, serialization_alias="Employee Name")

    model_config = ConfigDict(from_attributes=True)


class TransactionPage(BaseModel):
    transactions: List[TransactionRead] = Field(default_factory=list)
    current_page: int = Field(serialization_alias="currentPage")
    total_pages: int = Field(serialization_alias="totalPages")
    total_records: int = Field(serialization_alias="totalRecords")
    page_size: int = Field(serialization_alias="pageSize")


class FilterOptions(BaseModel):
    regions: List[str] = Field(default_factory=list)
    genders: List[str] = Field(default_factory=list)
    categories: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    payment_methods: List[str] = Field(
        default_factory=list, serialization_alias="paymentMethods"
    )


class TransactionSummary(BaseModel):
    total_records: int = Field(0, serialization_alias="totalRecords")
    total_units: int = Field(0, serialization_alias="totalUnits")
    total_amount: float = Field(0.0, serialization_alias="totalAmount")
    total_discount: float = Field(0.0, serialization_alias="totalDiscount")
    discounted_records: int = Field(0, serialization_alias="discountedRecords")
