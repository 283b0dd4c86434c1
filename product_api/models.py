# product_api/models.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Union


class Product(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: str
    price: Union[int, float]
    category: str
    in_stock: bool = Field(alias="inStock")

    def to_dict(self) -> Dict[str, object]:
        return self.model_dump(by_alias=True)


class ProductPage(BaseModel):
    total: int
    page: int
    limit: int
    products: List[Product]


class SearchResult(BaseModel):
    total: int
    products: List[Product]


class CategoryStats(BaseModel):
    countByCategory: Dict[str, int]


class DeleteResult(BaseModel):
    message: str
    product: Product


class ErrorBody(BaseModel):
    error: str
