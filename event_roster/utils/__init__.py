"""
Response envelopes consumed by the HTTP layer
"""

from .responses import error_response, success_response

__all__ = ["error_response", "success_response"]
