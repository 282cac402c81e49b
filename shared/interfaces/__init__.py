# Shared interfaces module
from .exception_handlers import custom_exception_handler, error_response

__all__ = ['custom_exception_handler', 'error_response']
