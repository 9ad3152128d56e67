"""Catalog storage backends."""

import json
import sqlite3
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Union

from .models.catalog_models import Product


class BaseCatalog(ABC):
    """Abstract catalog interface."""

    @abstractmethod
    def get(self, product_id: str) -> Optional[Product]:
        """Get a product by ID."""

    @abstractmethod
    def set(self, product: Product) -> None:
        """Store a product, replacing any product with the same ID."""

    @abstractmethod
    def all(self) -> List[Product]:
        """Return every stored product."""

    def close(self) -> None:
        """Release any resources held by the catalog."""


class InMemoryCatalog(BaseCatalog):
    """In-memory catalog for development/testing."""

    def __init__(self, products: Optional[List[Product]] = None):
        self._store: dict[str, Product] = {}
        for product in products or []:
            self.set(product)

    def get(self, product_id: str) -> Optional[Product]:
        return self._store.get(product_id)

    def set(self, product: Product) -> None:
        self._store[product.id] = product

    def all(self) -> List[Product]:
        return list(self._store.values())


class SQLiteCatalog(BaseCatalog):
    """SQLite-based catalog for persistence across restarts."""

    def __init__(self, db_path: str = "catalog.db"):
        self.db_path = db_path
        self._conn = sqlite3.connect(self.db_path, check_same_thread=False)
        self._init_db()

    def _init_db(self) -> None:
        self._conn.execute(
            """
            CREATE TABLE IF NOT EXISTS products (
                id TEXT PRIMARY KEY,
                payload TEXT NOT NULL
            )
            """
        )
        self._conn.commit()

    def get(self, product_id: str) -> Optional[Product]:
        row = self._conn.execute(
            "SELECT payload FROM products WHERE id = ?",
            (product_id,),
        ).fetchone()
        if not row:
            return None
        return Product.model_validate_json(row[0])

    def set(self, product: Product) -> None:
        self._conn.execute(
            "INSERT OR REPLACE INTO products (id, payload) VALUES (?, ?)",
            (product.id, product.model_dump_json()),
        )
        self._conn.commit()

    def all(self) -> List[Product]:
        rows = self._conn.execute("SELECT payload FROM products ORDER BY id").fetchall()
        return [Product.model_validate_json(payload) for (payload,) in rows]

    def close(self) -> None:
        self._conn.close()


def load_catalog(path: Union[str, Path]) -> InMemoryCatalog:
    """Load a JSON list of products into an in-memory catalog."""
    with open(path) as f:
        data = json.load(f)
    return InMemoryCatalog([Product(**p) for p in data])
