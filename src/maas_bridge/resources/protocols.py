"""Upstream MAAS client protocol.

ONLY the client contract - resource handlers depend on this, never on a
concrete HTTP transport.
"""

from typing import Any, Mapping, Optional

from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class MaasClient(Protocol):
    """Read access to the MAAS REST API."""
    
    async def get(
        self,
        endpoint: str,
        params: Optional[Mapping[str, str]] = None
    ) -> Any:
        """Fetch decoded JSON from an API endpoint.
        
        Args:
            endpoint: Endpoint path, e.g. "/machines/abc123/"
            params: Query parameters
            
        Returns:
            Decoded JSON body
            
        Raises:
            Exception: Transport failures. Exceptions exposing a
                ``status_code`` attribute of 404 are reported as not found.
        """
        ...
