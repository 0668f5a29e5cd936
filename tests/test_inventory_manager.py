"""Tests para el servicio de inventario."""

from __future__ import annotations

import unittest
from decimal import Decimal

from parametros import SAMPLE_PRODUCTS
from servidor.domain.models import Category
from servidor.services.inventory_manager import InventoryManager


class InventoryManagerTests(unittest.TestCase):
    """Valida altas, ventas, reposicion y reportes del inventario."""

    def setUp(self) -> None:
        self.manager = InventoryManager()

    def test_add_product(self) -> None:
        """Debe agregar el producto y retornar exito."""
        result = self.manager.add_product("Book", "Test Book", 25.99, 10)

        self.assertTrue(result)
        self.assertEqual(result.message, "Added product: Test Book")
        self.assertEqual(self.manager.get_product_count(), 1)

    def test_add_product_invalid_category_does_not_mutate(self) -> None:
        """Una categoria invalida debe fallar sin modificar la coleccion."""
        result = self.manager.add_product("InvalidType", "Test", 10.00, 5)

        self.assertFalse(result)
        self.assertIn("InvalidType", result.message)
        self.assertEqual(self.manager.get_product_count(), 0)

    def test_add_product_blank_name_is_rejected(self) -> None:
        """Debe rechazar nombres vacios."""
        result = self.manager.add_product("Book", "   ", 10.00, 5)

        self.assertFalse(result)
        self.assertEqual(self.manager.get_product_count(), 0)

    def test_add_product_negative_initial_quantity_is_rejected(self) -> None:
        """Un stock inicial negativo debe fallar sin modificar la coleccion."""
        result = self.manager.add_product("Book", "Novel", "10", -3)

        self.assertFalse(result)
        self.assertIn("negative", result.message)
        self.assertEqual(self.manager.get_product_count(), 0)

    def test_add_product_non_finite_price_is_rejected(self) -> None:
        """Precios NaN o infinitos deben retornar fallo, no lanzar excepcion."""
        for price in ("NaN", "Infinity", "-Infinity", "sNaN"):
            with self.subTest(price=price):
                result = self.manager.add_product("Book", "Novel", price, 1)

                self.assertFalse(result)
                self.assertIn("Invalid price", result.message)

        self.assertEqual(self.manager.get_product_count(), 0)
        self.assertEqual(self.manager.get_total_inventory_value(), Decimal("0"))

    def test_find_product_case_insensitive(self) -> None:
        """Debe encontrar productos sin distinguir mayusculas."""
        self.manager.add_product("Book", "Java Programming", 29.99, 10)

        found = self.manager.find_product("java PROGRAMMING")

        self.assertIsNotNone(found)
        self.assertEqual(found.name, "Java Programming")
        self.assertIsNone(self.manager.find_product("Python"))

    def test_find_product_duplicate_names_returns_first(self) -> None:
        """Con nombres duplicados debe ganar el primero insertado."""
        self.manager.add_product("Book", "Guide", 20.00, 1)
        self.manager.add_product("Electronics", "guide", 50.00, 2)

        found = self.manager.find_product("GUIDE")

        self.assertIs(found.category, Category.BOOK)
        self.assertEqual(self.manager.get_product_count(), 2)

    def test_sell_product_with_discount(self) -> None:
        """Debe vender, calcular totales y descontar stock."""
        self.manager.add_product("Book", "Test Book", 20.00, 10)

        result = self.manager.sell_product("test book", 2, "Student")

        self.assertTrue(result)
        summary = result.summary
        self.assertEqual(summary.unit_price, Decimal("20.00"))
        self.assertEqual(summary.original_total, Decimal("40.00"))
        self.assertEqual(summary.discount, Decimal("4.00"))
        self.assertEqual(summary.final_price, Decimal("36.00"))
        self.assertEqual(summary.remaining_stock, 8)
        self.assertEqual(
            summary.discount_description, "Student discount (10% off books): $4.00"
        )
        self.assertEqual(self.manager.find_product("Test Book").quantity, 8)

    def test_sell_product_insufficient_stock(self) -> None:
        """Pedir 5 con stock 2 debe fallar y dejar el stock en 2."""
        self.manager.add_product("Book", "Test Book", 20.00, 2)

        result = self.manager.sell_product("Test Book", 5, "None")

        self.assertFalse(result)
        self.assertIsNone(result.summary)
        self.assertEqual(result.message, "Not enough stock. Available: 2")
        self.assertEqual(self.manager.find_product("Test Book").quantity, 2)

    def test_sell_product_out_of_stock(self) -> None:
        """Un producto sin stock no se puede vender."""
        self.manager.add_product("Book", "Empty", 20.00, 0)

        self.assertFalse(self.manager.sell_product("Empty", 0, "None"))

    def test_sell_product_not_found(self) -> None:
        """Debe fallar si el producto no existe."""
        result = self.manager.sell_product("Ghost", 1, "None")

        self.assertFalse(result)
        self.assertEqual(result.message, "Product not found: Ghost")

    def test_sell_product_negative_quantity(self) -> None:
        """Debe rechazar cantidades negativas sin modificar stock."""
        self.manager.add_product("Book", "Test Book", 20.00, 3)

        self.assertFalse(self.manager.sell_product("Test Book", -2, "None"))
        self.assertEqual(self.manager.find_product("Test Book").quantity, 3)

    def test_add_stock(self) -> None:
        """Debe sumar stock: 3 + 5 = 8."""
        self.manager.add_product("Book", "Test Book", 20.00, 3)

        result = self.manager.add_stock("Test Book", 5)

        self.assertTrue(result)
        self.assertEqual(result.message, "Added 5 items to Test Book. New stock: 8")
        self.assertEqual(self.manager.find_product("Test Book").quantity, 8)

    def test_add_stock_not_found(self) -> None:
        """Debe fallar si el producto no existe."""
        self.assertFalse(self.manager.add_stock("Ghost", 5))

    def test_get_products_by_type(self) -> None:
        """Debe filtrar por categoria preservando el orden."""
        self.manager.add_product("Book", "B1", 20.00, 1)
        self.manager.add_product("Electronics", "E1", 50.00, 1)
        self.manager.add_product("Book", "B2", 20.00, 1)

        books = self.manager.get_products_by_type("Book")

        self.assertEqual([product.name for product in books], ["B1", "B2"])
        self.assertEqual(self.manager.get_products_by_type("InvalidType"), [])

    def test_get_low_stock_products(self) -> None:
        """Con stocks 10, 3 y 0 deben calificar dos productos."""
        self.manager.add_product("Book", "High", 20.00, 10)
        self.manager.add_product("Book", "Low", 20.00, 3)
        self.manager.add_product("Electronics", "Zero", 50.00, 0)

        low_stock = self.manager.get_low_stock_products()

        self.assertEqual([product.name for product in low_stock], ["Low", "Zero"])

    def test_low_stock_threshold_is_inclusive(self) -> None:
        """Stock igual a 5 se considera bajo."""
        self.manager.add_product("Book", "Edge", 20.00, 5)
        self.manager.add_product("Book", "Safe", 20.00, 6)

        low_stock = self.manager.get_low_stock_products()

        self.assertEqual([product.name for product in low_stock], ["Edge"])

    def test_total_inventory_value(self) -> None:
        """20.00 x 5 + 300.00 x 2 debe ser 700.00."""
        self.manager.add_product("Book", "Book", 20.00, 5)
        self.manager.add_product("Electronics", "Phone", 300.00, 2)

        self.assertEqual(self.manager.get_total_inventory_value(), Decimal("700.00"))

    def test_total_inventory_value_empty(self) -> None:
        """Un inventario vacio vale cero."""
        self.assertEqual(self.manager.get_total_inventory_value(), Decimal("0"))

    def test_get_statistics(self) -> None:
        """Debe agrupar conteo, valor total y stock bajo."""
        self.manager.add_product("Book", "Book", 20.00, 5)
        self.manager.add_product("Electronics", "Phone", 300.00, 20)

        statistics = self.manager.get_statistics()

        self.assertEqual(statistics.product_count, 2)
        self.assertEqual(statistics.total_value, Decimal("6100.00"))
        self.assertEqual([product.name for product in statistics.low_stock], ["Book"])

    def test_get_products_returns_copy(self) -> None:
        """Modificar la lista retornada no debe alterar el inventario."""
        self.manager.add_product("Book", "Book", 20.00, 5)

        products = self.manager.get_products()
        products.clear()

        self.assertEqual(self.manager.get_product_count(), 1)

    def test_load_sample_products(self) -> None:
        """Debe cargar todos los productos de ejemplo."""
        added = self.manager.load_sample_products()

        self.assertEqual(added, len(SAMPLE_PRODUCTS))
        self.assertEqual(self.manager.get_product_count(), len(SAMPLE_PRODUCTS))
        self.assertEqual(self.manager.find_product("laptop").price, Decimal("599.99"))


if __name__ == "__main__":
    unittest.main()
