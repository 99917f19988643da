"""
Authorization hook interface.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping

from ..types import HttpMethod


class AuthorizationHook(ABC):
    """
    Signs or authorizes a request before it is finalized.

    ``prepare`` awaits ``sign_and_parameterize`` and then immediately calls
    ``apply_auth_header`` with no suspension in between, so a hook may carry
    state from the first call to the second.
    """

    @abstractmethod
    async def sign_and_parameterize(
        self,
        url: str,
        parameters: Mapping[str, Any],
        method: HttpMethod,
    ) -> Dict[str, Any]:
        """Return the parameters to send, signed if the scheme requires it."""
        pass

    @abstractmethod
    def apply_auth_header(self, url: str, headers: Mapping[str, str]) -> Dict[str, str]:
        """Return a new header mapping carrying the authorization header."""
        pass
