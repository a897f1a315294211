import strawberry
from typing import List, Optional
from strawberry.types import Info

from graphql_api.crud import create_record, delete_record, get_record, list_records, to_type, update_record
from services.resources import PRODUCTS


@strawberry.type
class Product:
    id: int
    title: str
    description: str
    price: float
    category: str
    stock: int
    rating: Optional[float] = None
    image: Optional[str] = None


@strawberry.input
class ProductInput:
    title: str
    price: float
    category: str
    description: str = ""
    stock: int = 0
    rating: Optional[float] = None
    image: Optional[str] = None


@strawberry.input
class ProductUpdateInput:
    title: Optional[str] = None
    price: Optional[float] = None
    category: Optional[str] = None
    description: Optional[str] = None
    stock: Optional[int] = None
    rating: Optional[float] = None
    image: Optional[str] = None


@strawberry.type
class Query:
    @strawberry.field
    def products(self, info: Info, skip: int = 0, limit: Optional[int] = None) -> List[Product]:
        return [to_type(Product, m) for m in list_records(info, PRODUCTS, skip, limit)]

    @strawberry.field
    def product(self, info: Info, id: int) -> Optional[Product]:
        return to_type(Product, get_record(info, PRODUCTS, id))


@strawberry.type
class Mutation:
    @strawberry.mutation
    def create_product(self, info: Info, input: ProductInput) -> Product:
        return to_type(Product, create_record(info, PRODUCTS, input))

    @strawberry.mutation
    def update_product(self, info: Info, id: int, input: ProductUpdateInput) -> Optional[Product]:
        return to_type(Product, update_record(info, PRODUCTS, id, input))

    @strawberry.mutation
    def delete_product(self, info: Info, id: int) -> Optional[Product]:
        return to_type(Product, delete_record(info, PRODUCTS, id))


products_schema = strawberry.Schema(query=Query, mutation=Mutation)
