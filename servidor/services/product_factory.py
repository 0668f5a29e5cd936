"""Fabrica de productos con precio minimo por categoria."""

from __future__ import annotations

import logging
from decimal import Decimal

from parametros import BOOK_MIN_PRICE, ELECTRONICS_MIN_PRICE
from servidor.domain.models import Category, Product
from servidor.services.inventory_utils import to_decimal
from shared.errors import UnsupportedCategoryError, ValidationError

LOGGER = logging.getLogger(__name__)

MIN_PRICE_BY_CATEGORY: dict[Category, Decimal] = {
    Category.BOOK: BOOK_MIN_PRICE,
    Category.ELECTRONICS: ELECTRONICS_MIN_PRICE,
}


class ProductFactory:
    """Construye productos aplicando las reglas de cada categoria."""

    @staticmethod
    def create_book(
        name: str,
        price: Decimal | float | int | str,
        quantity: int,
    ) -> Product:
        """Crea un libro; el precio nunca queda bajo el minimo de libros."""
        return ProductFactory._create_with_floor(Category.BOOK, name, price, quantity)

    @staticmethod
    def create_electronics(
        name: str,
        price: Decimal | float | int | str,
        quantity: int,
    ) -> Product:
        """Crea un electronico; el precio nunca queda bajo el minimo de electronicos."""
        return ProductFactory._create_with_floor(
            Category.ELECTRONICS, name, price, quantity
        )

    @staticmethod
    def create_product(
        category: Category | str,
        name: str,
        price: Decimal | float | int | str,
        quantity: int,
    ) -> Product:
        """Despacha la creacion segun categoria.

        Lanza ``UnsupportedCategoryError`` si la categoria no existe.
        """
        match Category.parse(category):
            case Category.BOOK:
                return ProductFactory.create_book(name, price, quantity)
            case Category.ELECTRONICS:
                return ProductFactory.create_electronics(name, price, quantity)
            case _:
                raise UnsupportedCategoryError(category)

    @staticmethod
    def is_valid_type(category: Category | str) -> bool:
        return Category.parse(category) is not None

    @staticmethod
    def get_valid_types() -> list[str]:
        """Lista ordenada de categorias para menus de seleccion."""
        return [category.value for category in Category]

    @staticmethod
    def _create_with_floor(
        category: Category,
        name: str,
        price: Decimal | float | int | str,
        quantity: int,
    ) -> Product:
        amount = to_decimal(price)
        if not amount.is_finite():
            raise ValidationError(f"Invalid price: {price}")
        if quantity < 0:
            raise ValidationError(f"Initial quantity cannot be negative: {quantity}")

        product = Product(name=name, category=category, price=amount, quantity=quantity)
        min_price = MIN_PRICE_BY_CATEGORY[category]
        if product.price < min_price:
            LOGGER.info(
                "Precio %s bajo el minimo de %s; se ajusta a %s",
                product.price,
                category.value,
                min_price,
            )
            product.set_price(min_price)
        return product
