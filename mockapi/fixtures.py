"""Static data served in place of a real backend."""

from mockapi.models import Product

ACCESS_TOKEN = "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9.mock_token_data.signature"

USER_ID = "user-123"
USERNAME = "usuario_real"
USER_ROLE = "employee"

PAGE = 0
PAGE_LIMIT = 20

PRODUCTS: tuple[Product, ...] = (
    Product(
        id="1",
        name="Producto 1",
        description="Descripción del producto 1",
        price=10.50,
        stock=100,
        image_url="https://via.placeholder.com/200",
    ),
    Product(
        id="2",
        name="Producto 2",
        description="Descripción del producto 2",
        price=15.75,
        stock=50,
        image_url="https://via.placeholder.com/200",
    ),
)
