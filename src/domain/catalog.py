"""
Static Catalog: 상품/주문 목 데이터.

catalog.yaml에서 기동 시 1회 로드, 이후 읽기 전용.
system instruction에 JSON 텍스트로 삽입됨.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .errors import CatalogError, ErrorCodes


@dataclass(frozen=True)
class Product:
    """상품 재고 레코드."""
    id: str
    name: str
    category: str
    price: int | float
    stock: int
    sold: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "price": self.price,
            "stock": self.stock,
            "sold": self.sold,
        }


@dataclass(frozen=True)
class OrderItem:
    """주문 라인 아이템."""
    product_id: str
    qty: int

    def to_dict(self) -> dict[str, Any]:
        return {"productId": self.product_id, "qty": self.qty}


@dataclass(frozen=True)
class Order:
    """
    주문 레코드.

    날짜 필드는 상태에 따라 하나만 있을 수 있음
    (Processing → order_date, Shipped → shipping_date, Delivered → delivery_date).
    """
    order_id: str
    customer: str
    status: str
    items: tuple[OrderItem, ...]
    total: int | float
    order_date: str | None = None
    shipping_date: str | None = None
    delivery_date: str | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "orderId": self.order_id,
            "customer": self.customer,
            "status": self.status,
            "items": [item.to_dict() for item in self.items],
            "total": self.total,
            "orderDate": self.order_date,
            "shippingDate": self.shipping_date,
            "deliveryDate": self.delivery_date,
        }
        # 없는 날짜 키 제거
        return {k: v for k, v in result.items() if v is not None}


@dataclass(frozen=True)
class Catalog:
    """상품 + 주문 목록 (읽기 전용)."""
    products: tuple[Product, ...] = field(default_factory=tuple)
    orders: tuple[Order, ...] = field(default_factory=tuple)

    def products_json(self) -> str:
        return json.dumps([p.to_dict() for p in self.products], indent=2)

    def orders_json(self) -> str:
        return json.dumps([o.to_dict() for o in self.orders], indent=2)


# =============================================================================
# Loading
# =============================================================================

def _number(value: Any) -> int | float:
    """YAML 숫자 그대로 유지 (정수는 int, 35 → "35" 로 직렬화)."""
    if isinstance(value, bool):
        raise TypeError(f"숫자가 아님: {value!r}")
    if isinstance(value, int | float):
        return value
    return float(value)


def _parse_product(raw: dict[str, Any]) -> Product:
    return Product(
        id=str(raw["id"]),
        name=str(raw["name"]),
        category=str(raw["category"]),
        price=_number(raw["price"]),
        stock=int(raw["stock"]),
        sold=int(raw["sold"]),
    )


def _parse_order(raw: dict[str, Any]) -> Order:
    items = tuple(
        OrderItem(product_id=str(item["product_id"]), qty=int(item["qty"]))
        for item in raw.get("items") or []
    )
    return Order(
        order_id=str(raw["order_id"]),
        customer=str(raw["customer"]),
        status=str(raw["status"]),
        items=items,
        total=_number(raw["total"]),
        order_date=raw.get("order_date"),
        shipping_date=raw.get("shipping_date"),
        delivery_date=raw.get("delivery_date"),
    )


def parse_catalog(data: dict[str, Any]) -> Catalog:
    """
    dict → Catalog 변환.

    Raises:
        CatalogError: 필수 키 누락 또는 타입 변환 실패
    """
    try:
        products = tuple(_parse_product(p) for p in data.get("products") or [])
        orders = tuple(_parse_order(o) for o in data.get("orders") or [])
    except (KeyError, TypeError, ValueError) as e:
        raise CatalogError(
            ErrorCodes.CATALOG_INVALID,
            f"카탈로그 레코드 파싱 실패: {e}",
        ) from e

    return Catalog(products=products, orders=orders)


def load_catalog(catalog_path: Path) -> Catalog:
    """
    catalog.yaml 로드.

    Args:
        catalog_path: catalog.yaml 경로

    Returns:
        Catalog

    Raises:
        CatalogError: 파일 없음, YAML 오류, 레코드 오류
    """
    if not catalog_path.exists():
        raise CatalogError(
            ErrorCodes.CATALOG_INVALID,
            "카탈로그 파일이 없습니다.",
            path=str(catalog_path),
        )

    try:
        with open(catalog_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise CatalogError(
            ErrorCodes.CATALOG_INVALID,
            f"YAML 파싱 실패: {e}",
            path=str(catalog_path),
        ) from e

    if not isinstance(data, dict):
        raise CatalogError(
            ErrorCodes.CATALOG_INVALID,
            "카탈로그 최상위는 mapping이어야 합니다.",
            path=str(catalog_path),
        )

    return parse_catalog(data)
