from enum import Enum


class ProductSortField(str, Enum):
    """Columns a product listing may be sorted by (query value -> model attribute)."""
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"
    NAME = "name"
    PRICE = "price"
    STOCK = "stock"
    BRAND = "brand"

    @property
    def column_name(self) -> str:
        return {
            ProductSortField.CREATED_AT: "created_at",
            ProductSortField.UPDATED_AT: "updated_at",
        }.get(self, self.value)
