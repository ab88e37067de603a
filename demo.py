#!/usr/bin/env python
import os

from sdk.productclient import ProductClient, ProductApiError

def main():
    c = ProductClient(base_url="http://127.0.0.1:3000", api_key=os.getenv("API_KEY", "demo-key"))

    print(c.hello())

    # -----------------------------
    # Seed catalog
    # -----------------------------
    print("\nListing seed products...")
    print(c.list_products())

    # -----------------------------
    # Create products
    # -----------------------------
    print("\nCreating products...")
    lamp = c.create_product("Desk Lamp", 39.5, "LED lamp with dimmer", "Furniture")
    mouse = c.create_product("Wireless Mouse", 24.99, category="Electronics", in_stock=False)
    print(lamp)
    print(mouse)

    # -----------------------------
    # Filter, search, paginate
    # -----------------------------
    print("\nFurniture only...")
    print(c.list_products(category="Furniture"))

    print("\nSearching for 'lamp'...")
    print(c.list_products(search="lamp"))

    print("\nPage 2, two per page...")
    print(c.list_products(page=2, limit=2))

    # -----------------------------
    # Update keeps omitted fields
    # -----------------------------
    print("\nRestocking the mouse...")
    print(c.update_product(mouse["id"], "Wireless Mouse", 22.0, in_stock=True))

    # -----------------------------
    # Stats
    # -----------------------------
    print("\nStatistics...")
    print(c.get_stats())

    # -----------------------------
    # Delete
    # -----------------------------
    print("\nDeleting the lamp...")
    c.delete_product(lamp["id"])
    try:
        c.get_product(lamp["id"])
    except ProductApiError as e:
        print(f"Lookup after delete: {e}")

if __name__ == "__main__":
    main()
