#!/usr/bin/env python3
"""
Command-line front end for the product catalog.

Lists, adds and removes products through the running API, using the
same view state and validation as the web UI.

Usage:
    python catalog_cli.py list
    python catalog_cli.py add --name Banana --price 2.5 --sku B1
    python catalog_cli.py remove 1
    python catalog_cli.py --base-url http://localhost:3001 list
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from product_catalog_client import ProductCatalogClient, ProductCatalogView


def print_products(view: ProductCatalogView) -> None:
    print(f"Products ({len(view.products)})")
    if not view.products:
        print("No products registered")
        return
    for product in view.products:
        print(
            f"  #{product['id']} {product['name']}  "
            f"price={float(product['price']):.2f}  sku={product['sku']}  "
            f"missing={product['missingLetter']}"
        )


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Manage the product catalog.")
    ap.add_argument(
        "--base-url",
        default=os.getenv("CATALOG_API_URL", "http://localhost:3001"),
        help="API base URL (default: $CATALOG_API_URL or http://localhost:3001)",
    )
    sub = ap.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List products sorted by name")

    add = sub.add_parser("add", help="Register a product")
    add.add_argument("--name", default="", help="Product name")
    add.add_argument("--price", default="", help="Unit price, greater than zero")
    add.add_argument("--sku", default="", help="Unique SKU")

    remove = sub.add_parser("remove", help="Delete a product by id")
    remove.add_argument("id", type=int, help="Product id")
    return ap


def main(argv: Optional[List[str]] = None, view: Optional[ProductCatalogView] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.WARNING)

    if view is None:
        view = ProductCatalogView(ProductCatalogClient(base_url=args.base_url))

    if not view.load():
        print(f"[!] Could not reach the catalog at {args.base_url}", file=sys.stderr)
        return 1

    if args.command == "add":
        view.update_field("name", args.name)
        view.update_field("price", args.price)
        view.update_field("sku", args.sku)
        product = view.submit()
        if product is None:
            for message in view.errors:
                print(f"[!] {message}", file=sys.stderr)
            return 2
        print(f"[+] Added #{product['id']} {product['name']}")
    elif args.command == "remove":
        if not view.remove(args.id):
            print(f"[!] Failed to remove product {args.id}", file=sys.stderr)
            return 2
        print(f"[-] Removed #{args.id}")

    print_products(view)
    return 0


if __name__ == "__main__":
    sys.exit(main())
