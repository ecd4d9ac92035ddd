"""
Errors raised by the PV ledger and discount policy.

Services raise these; event receivers and jobs catch them and hand them to
``report_pv_error`` so the operator log records them without failing the
request or job that triggered the hook.
"""
import logging

from rest_framework import status

from apps.common.exceptions import ServiceError

operator_logger = logging.getLogger('pv.operator')


class PVError(ServiceError):
    """Base class for PV policy errors"""
    default_message = 'PV policy error'


class InvalidPVValue(PVError):
    """A product PV was negative or not a number"""
    default_message = 'Point value must be a non-negative number'

    def __init__(self, value, message=None, **context):
        self.value = value
        super().__init__(message or f"Invalid point value: {value!r}", value=value, **context)


class UnresolvedPurchaser(PVError):
    """The order or its purchaser could not be loaded for accrual"""
    status_code = status.HTTP_404_NOT_FOUND
    default_message = 'Purchaser could not be resolved'


class ConcurrentWriteConflict(PVError):
    """A ledger write kept colliding with concurrent writers"""
    status_code = status.HTTP_409_CONFLICT
    default_message = 'PV ledger write conflict'


class ResetPartialFailure(PVError):
    """The monthly reset left some ledgers untouched"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = 'Monthly PV reset did not complete for every user'

    def __init__(self, period, failed_user_ids, message=None):
        self.period = period
        self.failed_user_ids = list(failed_user_ids)
        super().__init__(
            message or f"PV reset for {period} failed for users {self.failed_user_ids}",
            period=period,
            failed_user_ids=self.failed_user_ids,
        )


def report_pv_error(exc, **context):
    """Record a PV policy error in the operator log"""
    details = {**getattr(exc, 'context', {}), **context}
    detail_text = ' '.join(f"{key}={value}" for key, value in sorted(details.items()))
    operator_logger.error(f"{exc.__class__.__name__}: {exc} {detail_text}".rstrip())
