"""Response schemas for the mock endpoints."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """Catalogue item. Instances are frozen so the fixture cannot drift."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    description: str
    price: float
    stock: int
    image_url: str = Field(alias="imageUrl")


class User(BaseModel):
    """Canned user returned by the login endpoint.

    ``email`` is whatever the client sent, of any JSON type. When the client
    sent none the field is left unset and dropped from the response.
    """

    id: str
    username: str
    email: Any = None
    role: str


class LoginResponse(BaseModel):
    """Login result."""

    access_token: str
    user: User


class ProductPage(BaseModel):
    """Pagination envelope around a product list."""

    data: list[Product]
    total: int
    page: int
    limit: int


class ErrorMessage(BaseModel):
    """Body of a 401 response."""

    message: str
