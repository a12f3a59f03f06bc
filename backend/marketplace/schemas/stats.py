"""Inventory Stats Schema — response shape of the admin dashboard statistics."""

from pydantic import BaseModel


class InventoryStatsResponse(BaseModel):
    total_items: int
    unique_titles: int
    total_value: int
    avg_price: int
    stock_by_university: dict[str, int]
    stock_by_condition: dict[str, int]
    low_stock_count: int
    out_of_stock_count: int
    total_sellers: int
