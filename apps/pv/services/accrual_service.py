"""
Accrual of PV from completed orders.
"""
import logging
from decimal import Decimal

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from django.db.models import Sum
from django.utils import timezone

from apps.orders.models import Order
from apps.products.services import ProductPVService
from apps.users.models import is_pv_eligible
from ..exceptions import ConcurrentWriteConflict, UnresolvedPurchaser
from ..models import PVAccrual
from .ledger_service import PVLedgerService

logger = logging.getLogger(__name__)


class PVAccrualService:
    """Credit order PV to the purchaser's monthly ledger"""

    @staticmethod
    def resolve_purchaser(order):
        """Purchaser of ``order``; None for guest orders"""
        if order.uid_id is None:
            return None
        purchaser = get_user_model().objects.filter(pk=order.uid_id).first()
        if purchaser is None:
            raise UnresolvedPurchaser(
                f"Purchaser {order.uid_id} of order {order.roid} not found",
                order=order.roid,
                user_id=order.uid_id,
            )
        return purchaser

    @staticmethod
    def order_pv(order):
        """Sum of product PV times quantity over the order's line items"""
        items = order.items.select_related('product')
        return ProductPVService.pv_for_items((item.product, item.quantity) for item in items)

    @staticmethod
    def accrue_for_order(order, now=None):
        """
        Add the order's PV to its purchaser's monthly total.

        Orders that are not completed, guest orders and purchasers without
        the distributor role are skipped.
        An order is credited at most once; a repeat call returns None.
        Concurrent writers are serialised by the unique accrual per order and
        the in-database increment. An IntegrityError that is not a duplicate
        accrual (a ledger creation race that get_or_create could not absorb,
        e.g. under REPEATABLE READ) is retried.
        Returns the PVAccrual created.
        """
        if not order.is_completed:
            logger.warning(f"Order {order.roid} is not completed, no PV accrued")
            return None

        purchaser = PVAccrualService.resolve_purchaser(order)
        if purchaser is None:
            logger.debug(f"Order {order.roid} has no purchaser, no PV accrued")
            return None
        if not is_pv_eligible(purchaser):
            logger.debug(f"User {purchaser.id} is not a distributor, no PV accrued for {order.roid}")
            return None

        order_pv = PVAccrualService.order_pv(order)
        now = now or timezone.now()
        max_retries = settings.PV_DISCOUNT.get('ACCRUAL_MAX_RETRIES', 3)

        for attempt in range(1, max_retries + 1):
            try:
                with transaction.atomic():
                    ledger = PVLedgerService.get_or_create_ledger(purchaser)
                    accrual = PVAccrual.objects.create(
                        user=purchaser,
                        order=order,
                        pv=order_pv,
                        created_at=now,
                    )
                    PVLedgerService.increment(ledger, order_pv, at=now)
            except IntegrityError:
                if PVAccrual.objects.filter(order=order).exists():
                    logger.info(f"Order {order.roid} already credited, skipping")
                    return None
                logger.warning(f"Ledger write for user {purchaser.id} collided (attempt {attempt}/{max_retries})")
                continue

            logger.info(
                f"Accrued {order_pv} PV for user {purchaser.id} from order {order.roid}, "
                f"monthly total {ledger.monthly_pv}"
            )
            return accrual

        raise ConcurrentWriteConflict(
            f"Could not record PV for order {order.roid} after {max_retries} attempts",
            order=order.roid,
            user_id=purchaser.id,
        )

    @staticmethod
    def accrue_for_order_id(order_id, now=None):
        """Accrue for an order given its primary key or public order number"""
        lookup = {'roid': order_id} if isinstance(order_id, str) else {'pk': order_id}
        order = Order.objects.filter(**lookup).first()
        if order is None:
            raise UnresolvedPurchaser(f"Order {order_id} not found", order_id=order_id)
        return PVAccrualService.accrue_for_order(order, now=now)

    @staticmethod
    def accrued_since(user, since):
        """PV credited to ``user`` after ``since``"""
        total = PVAccrual.objects.filter(user=user, created_at__gt=since).aggregate(total=Sum('pv'))['total']
        return total or Decimal('0')
