"""
Bill Model
==========

A sales invoice as posted by the point-of-sale frontend.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List

from ..exceptions import InvalidRequest
from ..formatting import build_upi_payload, resolve_discount, stringify


@dataclass
class LineItem:
    """One invoice line."""

    description: str = ""
    hsn: str = ""
    tax: Any = 0  # percent
    qty: Any = 0
    mrp: Any = 0
    value: Any = 0
    discount: Any = 0  # percent
    tvalue: Any = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LineItem':
        return cls(
            description=data.get('description', ''),
            hsn=data.get('hsn', ''),
            tax=data.get('tax', 0),
            qty=data.get('qty', 0),
            mrp=data.get('mrp', 0),
            value=data.get('value', 0),
            discount=data.get('discount', 0),
            tvalue=data.get('tvalue', 0),
        )


@dataclass
class CompanyAddress:
    name: str = ""
    street: str = ""
    locality: str = ""
    city: str = ""
    state: str = ""
    pincode: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'CompanyAddress':
        if not isinstance(data, dict):
            data = {}
        return cls(**{key: data.get(key) or '' for key in
                      ('name', 'street', 'locality', 'city', 'state', 'pincode')})

    def formatted(self) -> str:
        """Single-line address, e.g. ``Shop, MG Road, Pune, - 411001``."""
        parts = [
            self.name,
            self.street,
            self.locality,
            self.city,
            self.state,
            f'- {self.pincode}' if self.pincode else '',
        ]
        return ', '.join(str(p) for p in parts if p)


@dataclass
class SplitPayment:
    """Cash and UPI legs of a split payment."""

    cash: Any = 0
    upi: Any = 0

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional['SplitPayment']:
        if not isinstance(data, dict) or not data:
            return None
        return cls(cash=data.get('cash', 0), upi=data.get('upi', 0))


@dataclass
class Bill:
    """Invoice with precomputed totals."""

    invoice_number: str = ""
    date: Optional[str] = None
    payment_method: str = ""

    # Seller
    company_name: str = ""
    company_address: CompanyAddress = field(default_factory=CompanyAddress)
    gstin: str = ""

    # Customer
    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None

    entries: List[LineItem] = field(default_factory=list)

    # Totals (computed by the frontend)
    tqty: Any = 0
    tvalue: Any = 0
    tdiscount: Any = 0
    subtotal: Any = 0
    discount: Any = 0  # negative = absolute amount, otherwise percent
    grand_total: Any = 0

    # UPI
    upi_id: Optional[str] = None
    acc_holder_name: Optional[str] = None
    split_payment: Optional[SplitPayment] = None

    @classmethod
    def from_dict(cls, data: Any) -> 'Bill':
        """Create from request JSON, rejecting bills that cannot be printed."""
        if not isinstance(data, dict):
            raise InvalidRequest('Invalid bill data')

        entries = data.get('entries')
        if not data.get('invoiceNumber') or not isinstance(entries, list) or not entries:
            raise InvalidRequest('Invalid bill data')
        if not all(isinstance(entry, dict) for entry in entries):
            raise InvalidRequest('Invalid bill data', 'entries must be objects')

        return cls(
            invoice_number=data['invoiceNumber'],
            date=data.get('date'),
            payment_method=stringify(data.get('paymentMethod') or ''),
            company_name=data.get('companyName') or '',
            company_address=CompanyAddress.from_dict(data.get('companyAddress')),
            gstin=data.get('gstin') or '',
            customer_name=data.get('customerName'),
            customer_phone=data.get('customerPhone'),
            entries=[LineItem.from_dict(entry) for entry in entries],
            tqty=data.get('tqty', 0),
            tvalue=data.get('tvalue', 0),
            tdiscount=data.get('tdiscount', 0),
            subtotal=data.get('subtotal', 0),
            discount=data.get('discount', 0),
            grand_total=data.get('grandTotal', 0),
            upi_id=data.get('upiId'),
            acc_holder_name=data.get('accHolderName'),
            split_payment=SplitPayment.from_dict(data.get('splitPayment')),
        )

    @property
    def is_split(self) -> bool:
        return self.payment_method.lower() == 'split' and self.split_payment is not None

    def calculated_discount(self) -> float:
        return resolve_discount(self.discount, self.subtotal)

    def upi_amount(self) -> Optional[Any]:
        """Amount to collect over UPI, or None when nothing is paid by UPI."""
        method = self.payment_method.lower()
        if method == 'upi':
            return self.grand_total
        if self.is_split and float(self.split_payment.upi or 0) > 0:
            return self.split_payment.upi
        return None

    def upi_payload(self) -> Optional[str]:
        """Payment link for the receipt QR code."""
        amount = self.upi_amount()
        if amount is None or not self.upi_id:
            return None
        return build_upi_payload(self.upi_id, self.acc_holder_name,
                                 self.invoice_number, amount)
