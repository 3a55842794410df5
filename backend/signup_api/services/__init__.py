"""Service layer public API.

This package exposes the essential building blocks for the service layer so
that callers can import from :mod:`signup_api.services` without knowing the
internal structure.

Re-exports
----------
- Base primitives (from ``signup_api.services._shared``)
    * :class:`BaseService`
    * :class:`ServiceContext`
    * :class:`Deadline`

- Registration (from ``signup_api.services.registration``)
    * :class:`RegistrationService`
    * DTOs: :class:`SignUpRequest`, :class:`NewUserFields`
    * :func:`validate_signup_request`
"""

from __future__ import annotations

from ._shared.base import BaseService, ServiceContext
from ._shared.deadline import Deadline
from .registration.dto import NewUserFields, SignUpRequest
from .registration.service import RegistrationService
from .registration.validation import validate_signup_request

__all__ = [
    # Base
    "BaseService",
    "ServiceContext",
    "Deadline",
    # Registration
    "RegistrationService",
    "SignUpRequest",
    "NewUserFields",
    "validate_signup_request",
]
