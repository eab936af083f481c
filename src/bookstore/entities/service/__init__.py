"""Store entities: catalog, carts and orders."""
