import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class PvConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.pv'
    verbose_name = 'Distributor PV'

    def ready(self):
        import apps.pv.signals  # noqa: F401
        from .tiers import get_tier_table

        table = get_tier_table()
        for after, up_to in table.gaps():
            logger.warning(f"Discount tiers leave {after} < PV <= {up_to} uncovered; it earns no discount")
        for current, following in table.overlaps():
            logger.warning(f"Discount tiers overlap: {current} and {following}")
