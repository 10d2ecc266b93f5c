"""Django storage scope for the purchase workflow."""

from typing import Optional
from uuid import UUID

from apps.ledger.storage import DjangoLedgerScope
from apps.common.storage import DjangoStorage
from apps.vendors.models import Vendor, VendorRate
from .models import PurchaseRecord, PurchaseLine, PurchasePayment


class DjangoPurchaseScope(DjangoLedgerScope):
    """Purchase and ledger operations available inside one atomic scope."""

    def get_vendor(self, vendor_id: UUID, *, company_id: UUID) -> Optional[Vendor]:
        return Vendor.objects.filter(id=vendor_id, company_id=company_id).first()

    def get_vendor_rate(self, vendor_id: UUID, scrap_type_id: UUID) -> Optional[VendorRate]:
        return (
            VendorRate.objects
            .select_related('scrap_type')
            .filter(vendor_id=vendor_id, scrap_type_id=scrap_type_id)
            .first()
        )

    def create_purchase_header(self, **fields) -> PurchaseRecord:
        return PurchaseRecord.objects.create(**fields)

    def create_purchase_line(self, **fields) -> PurchaseLine:
        return PurchaseLine.objects.create(**fields)

    def finalize_purchase_total(self, purchase: PurchaseRecord, total) -> None:
        purchase.total_amount = total
        purchase.save(update_fields=['total_amount'])

    def set_payment_status(self, purchase: PurchaseRecord, status, mode) -> None:
        purchase.payment_status = status
        purchase.payment_mode = mode
        purchase.save(update_fields=['payment_status', 'payment_mode'])

    def create_purchase_payment(self, **fields) -> PurchasePayment:
        return PurchasePayment.objects.create(**fields)


class DjangoPurchaseStorage(DjangoStorage):
    scope_class = DjangoPurchaseScope
