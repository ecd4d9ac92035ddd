"""
Tests for PV error reporting and API error mapping.
"""
import logging

from rest_framework.views import APIView

from apps.common.exceptions import custom_exception_handler
from apps.pv.exceptions import (
    ConcurrentWriteConflict, InvalidPVValue, PVError, ResetPartialFailure, UnresolvedPurchaser, report_pv_error
)


def test_errors_share_a_base_class():
    for error in (InvalidPVValue('-1'), UnresolvedPurchaser(), ConcurrentWriteConflict(), ResetPartialFailure('2026-01', [3])):
        assert isinstance(error, PVError)


def test_invalid_value_message():
    error = InvalidPVValue('-4')
    assert error.value == '-4'
    assert str(error) == "Invalid point value: '-4'"
    assert error.status_code == 400


def test_reset_failure_carries_users():
    error = ResetPartialFailure('2026-01', [4, 9])
    assert error.failed_user_ids == [4, 9]
    assert error.context == {'period': '2026-01', 'failed_user_ids': [4, 9]}
    assert '2026-01' in str(error)


def test_report_goes_to_operator_log(caplog):
    with caplog.at_level(logging.ERROR, logger='pv.operator'):
        report_pv_error(UnresolvedPurchaser('Order x not found', order='x'), hook='order_completed')

    record = caplog.records[-1]
    assert record.name == 'pv.operator'
    assert record.getMessage() == 'UnresolvedPurchaser: Order x not found hook=order_completed order=x'


def test_service_errors_map_to_status_codes():
    context = {'view': APIView(), 'request': None}

    response = custom_exception_handler(ConcurrentWriteConflict('busy'), context)
    assert response.status_code == 409
    assert response.data == {
        'code': 409,
        'msg': 'busy',
        'errors': {'detail': 'busy', 'type': 'ConcurrentWriteConflict'},
    }

    response = custom_exception_handler(InvalidPVValue('abc'), context)
    assert response.status_code == 400


def test_unknown_errors_are_left_to_django():
    assert custom_exception_handler(RuntimeError('boom'), {'view': APIView(), 'request': None}) is None
