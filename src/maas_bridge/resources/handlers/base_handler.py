"""Base resource handlers.

ONLY the request pipeline shared by every resource: URI parameter
validation, cache lookup, upstream fetch, payload validation, cache store
and response rendering.
"""

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel

from ...core.exceptions.resource import (
    InvalidResourceData,
    InvalidResourceParams,
    ResourceError,
    ResourceNotFound,
)
from ...platform.cache.application.services.cache_manager import CacheManager
from ...platform.cache.core.value_objects.cache_options import CacheOptions
from ..protocols import MaasClient
from ..utils.resource_utils import (
    extract_and_validate_params,
    handle_resource_fetch_error,
    validate_resource_data,
)
from ..utils.uri_template import UriTemplate

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)
P = TypeVar("P", bound=BaseModel)


@dataclass(frozen=True)
class ResourceContent:
    """One rendered resource body."""
    
    uri: str
    text: str
    mime_type: str = "application/json"
    headers: Dict[str, str] = field(default_factory=dict)
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "uri": self.uri,
            "text": self.text,
            "mimeType": self.mime_type,
            "headers": dict(self.headers),
        }


@dataclass(frozen=True)
class ResourceResponse:
    """Result of reading a resource URI."""
    
    contents: List[ResourceContent]
    from_cache: bool = False
    
    def to_dict(self) -> Dict[str, Any]:
        return {"contents": [content.to_dict() for content in self.contents]}


class BaseResourceHandler(ABC, Generic[T, P]):
    """Base handler for one MAAS resource URI template.
    
    Cached values are the JSON-compatible dump of the validated payload.
    Caching applies only while both the handler's options and the manager
    are enabled.
    """
    
    def __init__(
        self,
        client: MaasClient,
        cache_manager: CacheManager,
        resource_name: str,
        uri_pattern: str,
        data_model: Type[T],
        params_model: Type[P],
        api_endpoint: str,
        cache_options: Optional[Mapping[str, Any]] = None
    ):
        """Initialize resource handler.
        
        Args:
            client: Upstream MAAS client
            cache_manager: Response cache
            resource_name: Resource name used in cache keys and messages
            uri_pattern: URI template, e.g. "maas://machine/{system_id}/details"
            data_model: Model validating one upstream item
            params_model: Model validating URI and query parameters
            api_endpoint: Upstream endpoint, e.g. "/machines"
            cache_options: Overrides merged over the default cache options
        """
        self.client = client
        self.cache_manager = cache_manager
        self.resource_name = resource_name
        self.uri_pattern = uri_pattern
        self.template = UriTemplate(uri_pattern)
        self.data_model = data_model
        self.params_model = params_model
        self.api_endpoint = api_endpoint
        
        self._cache_options = CacheOptions(
            enabled=True,
            ttl=cache_manager.get_resource_ttl(resource_name),
            include_query_params=True,
        ).merge(**dict(cache_options or {}))
        
        logger.debug(
            f"Initialized {resource_name} resource handler "
            f"(cache_enabled={self._cache_options.enabled}, cache_ttl={self._cache_options.ttl})"
        )
    
    def matches(self, uri: str) -> bool:
        return self.template.match(uri) is not None
    
    def _caching_active(self) -> bool:
        return self._cache_options.enabled and self.cache_manager.is_enabled()
    
    async def handle_request(self, uri: str) -> ResourceResponse:
        """Read the resource addressed by ``uri``.
        
        Raises:
            ResourceError: Parameter, upstream or payload failures
        """
        params = self.validate_params(uri)
        resource_id = self.get_resource_id(params)
        id_message = f": {resource_id}" if resource_id else ""
        logger.info(f"Fetching {self.resource_name}{id_message}")
        
        cache_key = None
        if self._caching_active():
            cache_key = self.cache_manager.generate_key(
                self.resource_name,
                uri,
                self._key_params(params, resource_id),
                self._cache_options
            )
            entry = self.cache_manager.get_entry(cache_key)
            if entry is not None:
                logger.debug(f"Cache hit for {self.resource_name}{id_message}")
                age = int(entry.age(self.cache_manager.strategy.now()))
                return self.format_response(uri, entry.value, from_cache=True, age=age)
            logger.debug(f"Cache miss for {self.resource_name}{id_message}")
        
        try:
            raw = await self.fetch_resource_data(params)
        except ResourceError:
            raise
        except Exception as e:
            raise handle_resource_fetch_error(e, self.resource_name, resource_id) from e
        
        data = self.validate_data(raw, resource_id)
        logger.info(f"Successfully fetched {self._describe(data)}{id_message}")
        
        if cache_key is not None:
            self.cache_manager.set(cache_key, data, self.resource_name, self._cache_options)
            logger.debug(f"Cached {self.resource_name} with key {cache_key}")
        
        return self.format_response(uri, data)
    
    def validate_params(self, uri: str) -> P:
        return extract_and_validate_params(
            uri,
            self.template,
            self.params_model,
            self.resource_name
        )
    
    @abstractmethod
    def get_resource_id(self, params: P) -> Optional[str]:
        """Identifier of the addressed instance, None for collections."""
        pass
    
    @abstractmethod
    async def fetch_resource_data(self, params: P) -> Any:
        """Fetch the raw upstream payload."""
        pass
    
    def validate_data(self, data: Any, resource_id: Optional[str] = None) -> Any:
        """Validate one upstream item and return its JSON-compatible form."""
        return self._dump_item(data, resource_id)
    
    def _dump_item(self, data: Any, resource_id: Optional[str]) -> Dict[str, Any]:
        model = validate_resource_data(data, self.data_model, self.resource_name, resource_id)
        return model.model_dump(mode="json")
    
    def _key_params(self, params: P, resource_id: Optional[str]) -> Dict[str, Any]:
        key_params = params.model_dump(exclude_none=True)
        if resource_id:
            key_params.setdefault("id", resource_id)
        return key_params
    
    def _describe(self, data: Any) -> str:
        if isinstance(data, list):
            return f"{len(data)} {self.resource_name}"
        return self.resource_name
    
    def format_response(
        self,
        uri: str,
        data: Any,
        from_cache: bool = False,
        age: Optional[int] = None
    ) -> ResourceResponse:
        """Render data as a JSON resource body with cache headers."""
        headers: Dict[str, str] = {}
        if self._caching_active():
            directives = [f"max-age={self.cache_manager.resolve_ttl(self.resource_name, self._cache_options)}"]
            if self._cache_options.cache_control is not None:
                directives.extend(self._cache_options.cache_control.directives())
            headers["Cache-Control"] = ", ".join(directives)
            if from_cache:
                headers["Age"] = str(age if age is not None else 0)
        
        content = ResourceContent(uri=uri, text=json.dumps(data), headers=headers)
        return ResourceResponse(contents=[content], from_cache=from_cache)
    
    # Cache administration
    
    def invalidate_cache(self) -> int:
        """Invalidate every cached entry of this resource."""
        if not self._caching_active():
            return 0
        count = self.cache_manager.invalidate_resource(self.resource_name)
        logger.debug(f"Invalidated {count} cache entries for {self.resource_name}")
        return count
    
    def invalidate_cache_by_id(self, resource_id: str) -> int:
        """Invalidate cached entries of one instance of this resource."""
        if not self._caching_active() or not resource_id:
            return 0
        count = self.cache_manager.invalidate_resource_by_id(self.resource_name, resource_id)
        logger.debug(f"Invalidated {count} cache entries for {self.resource_name} with ID {resource_id}")
        return count
    
    def set_cache_options(self, **changes: Any) -> None:
        self._cache_options = self._cache_options.merge(**changes)
        logger.debug(
            f"Updated cache options for {self.resource_name} "
            f"(cache_enabled={self._cache_options.enabled}, cache_ttl={self._cache_options.ttl})"
        )
    
    def get_cache_options(self) -> CacheOptions:
        return self._cache_options


class DetailResourceHandler(BaseResourceHandler[T, P]):
    """Handler for a single resource instance, fetched from ``{endpoint}/{id}/``."""
    
    async def fetch_resource_data(self, params: P) -> Any:
        resource_id = self.get_resource_id(params)
        if not resource_id or not resource_id.strip():
            logger.error(f"{self.resource_name} ID is missing or empty in the resource URI")
            raise InvalidResourceParams(
                f"{self.resource_name} ID is missing or empty in the resource URI",
                resource_name=self.resource_name,
                error_code="missing_parameter"
            )
        
        data = await self.client.get(f"{self.api_endpoint}/{resource_id}/")
        if not data:
            logger.error(f"{self.resource_name} not found: {resource_id}")
            raise ResourceNotFound(
                f"{self.resource_name} '{resource_id}' not found",
                resource_name=self.resource_name,
                resource_id=resource_id
            )
        return data


class ListResourceHandler(BaseResourceHandler[T, P]):
    """Handler for a resource collection.
    
    The upstream payload must be a JSON array; each item is validated
    against the data model.
    """
    
    def get_resource_id(self, params: P) -> Optional[str]:
        return None
    
    def query_params(self, params: P) -> Dict[str, str]:
        """Upstream query parameters for a validated request."""
        if hasattr(params, "to_query"):
            return params.to_query()
        return {}
    
    async def fetch_resource_data(self, params: P) -> Any:
        query = self.query_params(params)
        return await self.client.get(self.api_endpoint, query or None)
    
    def validate_data(self, data: Any, resource_id: Optional[str] = None) -> Any:
        if not isinstance(data, list):
            logger.error(f"Invalid response format: expected an array of {self.resource_name}")
            raise InvalidResourceData(
                f"Invalid response format: expected an array of {self.resource_name}",
                resource_name=self.resource_name,
                resource_id=resource_id
            )
        return [self._dump_item(item, resource_id) for item in data]
