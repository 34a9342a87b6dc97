"""
Label Item Model
================

One shelf/price label for the TSPL label printer.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..formatting import NAN, format_money, stringify


@dataclass
class LabelItem:
    """Product label contents."""

    shopname: str = ""
    barcode: str = ""
    code: str = ""
    product_name: str = ""
    name: str = ""  # variant
    size: str = ""
    brand: str = ""
    sprice: Any = None  # regular price (MRP)
    dprice: Any = None  # discounted price

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LabelItem':
        def text(key):
            value = data.get(key)
            return stringify(value) if value else ''

        return cls(
            shopname=text('shopname'),
            barcode=text('barcode'),
            code=text('code'),
            product_name=text('productName'),
            name=text('name'),
            size=text('size'),
            brand=text('brand'),
            sprice=data.get('sprice'),
            dprice=data.get('dprice'),
        )

    def missing_fields(self) -> list:
        """Names of required fields that are empty."""
        required = {
            'barcode': self.barcode,
            'productName': self.product_name,
            'name': self.name,
            'sprice': self.sprice,
            'shopname': self.shopname,
        }
        missing = [key for key, value in required.items() if not value]
        if self.sprice and format_money(self.sprice) == NAN:
            missing.append('sprice')
        return missing

    @property
    def has_discount(self) -> bool:
        return bool(self.dprice) and format_money(self.dprice) != NAN

    def variant_text(self) -> str:
        return f'{self.name} - {self.size}' if self.size else self.name

    def discount_price(self) -> Optional[str]:
        return format_money(self.dprice) if self.has_discount else None
