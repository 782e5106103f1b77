import argparse
import logging

from sqlalchemy import delete, select

from catalog.core.logging import setup_logging
from catalog.database import SessionLocal, create_schema
from catalog.models.product import Product
from catalog.services.product_service import ProductService
from catalog.stores.sql import SqlProductStore

logger = logging.getLogger(__name__)

SAMPLE_PRODUCTS = [
    {
        "name": "Bamboo Watch",
        "description": "Product Description",
        "image": "bamboo-watch.jpg",
        "category": "Accessories",
        "price": 65.0,
        "quantity": 24,
        "internal_reference": "REF-1000",
        "shell_id": "SH-01",
        "inventory_status": "INSTOCK",
        "rating": 5.0,
        "created_at": "2024-01-01T00:00:00Z",
        "updated_at": "2024-01-01T00:00:00Z",
    },
    {
        "name": "Black Watch",
        "description": "Product Description",
        "image": "black-watch.jpg",
        "category": "Accessories",
        "price": 72.0,
        "quantity": 61,
        "internal_reference": "REF-1001",
        "shell_id": "SH-01",
        "inventory_status": "INSTOCK",
        "rating": 4.0,
        "created_at": "2024-01-02T00:00:00Z",
        "updated_at": "2024-01-02T00:00:00Z",
    },
    {
        "name": "Blue Band",
        "description": "Product Description",
        "image": "blue-band.jpg",
        "category": "Fitness",
        "price": 79.0,
        "quantity": 2,
        "internal_reference": "REF-1002",
        "shell_id": "SH-02",
        "inventory_status": "LOWSTOCK",
        "rating": 3.0,
        "created_at": "2024-01-03T00:00:00Z",
        "updated_at": "2024-01-03T00:00:00Z",
    },
    {
        "name": "Blue T-Shirt",
        "description": "Product Description",
        "image": "blue-t-shirt.jpg",
        "category": "Clothing",
        "price": 29.0,
        "quantity": 0,
        "internal_reference": "REF-1003",
        "shell_id": "SH-03",
        "inventory_status": "OUTOFSTOCK",
        "rating": 5.0,
        "created_at": "2024-01-04T00:00:00Z",
        "updated_at": "2024-01-04T00:00:00Z",
    },
]


def parse_args():
    parser = argparse.ArgumentParser(description="Seed sample catalog products.")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Clear existing products before seeding.",
    )
    return parser.parse_args()


def main():
    setup_logging()
    args = parse_args()

    create_schema()

    db = SessionLocal()
    try:
        if args.reset:
            db.execute(delete(Product))
            db.commit()

        has_product = db.execute(select(Product.id).limit(1)).first()
        if has_product:
            logger.info("Seed skipped: products already exist.")
            return

        service = ProductService(SqlProductStore(db))
        for payload in SAMPLE_PRODUCTS:
            service.create(payload)
        logger.info("Seeded %d products.", len(SAMPLE_PRODUCTS))
    finally:
        db.close()


if __name__ == "__main__":
    main()
