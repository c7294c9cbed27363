#!/usr/bin/env python3
"""
Seed script: creates users, inventories and items via the API (no direct DB).
Run: API must be running.
  python scripts/seed_data.py
  python scripts/seed_data.py --users 10 --inventories-per-user 3 --items-per-inventory 20
"""

import argparse
import random

import httpx

API_BASE = "http://localhost:8000/api"

INVENTORY_NAMES = [
    "Main Warehouse", "Garage", "Back Office", "Storefront", "Cold Storage",
    "Workshop", "Basement", "Van 1", "Van 2", "Overflow Shelf",
]

ITEM_NAMES = [
    "Hex Bolt M8", "Washer 10mm", "Cordless Drill", "Tape Measure", "Safety Goggles",
    "Work Gloves", "Extension Cord", "LED Bulb", "Cable Ties", "Duct Tape",
    "Screwdriver Set", "Ladder", "Paint Roller", "Sandpaper", "Wood Glue",
]


def random_sku() -> str:
    return f"SKU-{random.randint(1000, 9999)}" if random.random() > 0.2 else ""


def random_price() -> float:
    return random.choice([0, 0.99, 2.5, 4.99, 12.0, 19.99, 49.5, 129.0])


def main():
    ap = argparse.ArgumentParser(description="Seed users, inventories and items via API")
    ap.add_argument("--users", type=int, default=5, help="Number of users to create")
    ap.add_argument("--inventories-per-user", type=int, default=3)
    ap.add_argument("--items-per-inventory", type=int, default=10)
    ap.add_argument("--base-url", default=API_BASE, help="API base URL")
    args = ap.parse_args()

    created_inventories = 0
    created_items = 0
    errors = []

    with httpx.Client(base_url=args.base_url, timeout=30.0) as client:
        for i in range(args.users):
            email = f"user{i+1}@example.com"
            password = "password123"
            r = client.post(
                "/auth/register",
                json={"name": f"User {i+1}", "email": email, "password": password},
            )
            if r.status_code == 409:
                # Already exists - log in with the same credentials
                r = client.post("/auth/login", json={"email": email, "password": password})
            if r.status_code not in (200, 201):
                errors.append(f"Auth {email}: {r.status_code} {r.text[:80]}")
                continue
            headers = {"Authorization": f"Bearer {r.json()['token']}"}

            for name in random.sample(INVENTORY_NAMES, k=min(args.inventories_per_user, len(INVENTORY_NAMES))):
                r = client.post(
                    "/inventories",
                    headers=headers,
                    json={"name": name, "description": f"Seeded for {email}"},
                )
                if r.status_code != 201:
                    errors.append(f"Inventory {email}/{name}: {r.status_code}")
                    continue
                created_inventories += 1
                inventory_id = r.json()["id"]

                for _ in range(args.items_per_inventory):
                    r = client.post(
                        "/items",
                        headers=headers,
                        json={
                            "inventoryId": inventory_id,
                            "name": random.choice(ITEM_NAMES),
                            "sku": random_sku(),
                            "quantity": random.randint(0, 250),
                            "price": random_price(),
                        },
                    )
                    if r.status_code == 201:
                        created_items += 1
                    else:
                        errors.append(f"Item {email}/{name}: {r.status_code}")
            print(f"  {email}: done (inventories so far: {created_inventories}, items: {created_items})")

    print(f"\nDone. Inventories: {created_inventories}, Items: {created_items}")
    if errors:
        print(f"Errors ({len(errors)}):")
        for e in errors[:15]:
            print("  ", e)
        if len(errors) > 15:
            print("  ... and", len(errors) - 15, "more")


if __name__ == "__main__":
    main()
