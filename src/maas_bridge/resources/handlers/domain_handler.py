"""Domain resource handlers."""

from typing import Optional

from ...platform.cache.application.services.cache_manager import CacheManager
from ..protocols import MaasClient
from ..schemas.collection_query_params import DomainCollectionQueryParams
from ..schemas.domain import (
    DOMAIN_DETAILS_URI_PATTERN,
    DOMAINS_LIST_URI_PATTERN,
    GetDomainParams,
    MaasDomain,
)
from .base_handler import DetailResourceHandler, ListResourceHandler


class DomainDetailsResourceHandler(DetailResourceHandler[MaasDomain, GetDomainParams]):
    
    def __init__(self, client: MaasClient, cache_manager: CacheManager):
        super().__init__(
            client,
            cache_manager,
            resource_name="Domain",
            uri_pattern=DOMAIN_DETAILS_URI_PATTERN,
            data_model=MaasDomain,
            params_model=GetDomainParams,
            api_endpoint="/domains",
        )
    
    def get_resource_id(self, params: GetDomainParams) -> Optional[str]:
        return params.domain_id


class DomainsListResourceHandler(ListResourceHandler[MaasDomain, DomainCollectionQueryParams]):
    
    def __init__(self, client: MaasClient, cache_manager: CacheManager):
        super().__init__(
            client,
            cache_manager,
            resource_name="Domains",
            uri_pattern=DOMAINS_LIST_URI_PATTERN,
            data_model=MaasDomain,
            params_model=DomainCollectionQueryParams,
            api_endpoint="/domains",
        )
