"""
Custom exception handlers for consistent API responses
"""
from rest_framework.views import exception_handler
from rest_framework.response import Response
from rest_framework import status
import logging

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base class for errors raised by service layers.

    Subclasses set ``status_code`` so the API layer can map them to a
    response without knowing every concrete error type.
    """
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = 'Service error'

    def __init__(self, message=None, **context):
        self.message = message or self.default_message
        self.context = context
        super().__init__(self.message)


def custom_exception_handler(exc, context):
    """
    Custom exception handler that returns consistent error responses
    """
    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)

    if response is None and isinstance(exc, ServiceError):
        logger.warning(f"Service error in {context.get('view').__class__.__name__}: {exc}")
        return Response({
            'code': exc.status_code,
            'msg': exc.message,
            'errors': {'detail': exc.message, 'type': exc.__class__.__name__}
        }, status=exc.status_code)

    if response is not None:
        logger.error(f"API Exception: {exc}", exc_info=True)

        custom_response_data = {
            'code': response.status_code,
            'msg': 'An error occurred',
            'errors': response.data
        }

        if response.status_code == status.HTTP_400_BAD_REQUEST:
            custom_response_data['msg'] = 'Validation error'
        elif response.status_code == status.HTTP_401_UNAUTHORIZED:
            custom_response_data['msg'] = 'Authentication required'
        elif response.status_code == status.HTTP_403_FORBIDDEN:
            custom_response_data['msg'] = 'Permission denied'
        elif response.status_code == status.HTTP_404_NOT_FOUND:
            custom_response_data['msg'] = 'Resource not found'
        elif response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            custom_response_data['msg'] = 'Method not allowed'
        elif response.status_code >= 500:
            custom_response_data['msg'] = 'Internal server error'
            # Don't expose internal errors to non-staff users
            request = context.get('request')
            if not request or not getattr(request.user, 'is_staff', False):
                custom_response_data['errors'] = {'detail': 'Internal server error'}

        response.data = custom_response_data

    return response
