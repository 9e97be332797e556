"""Subnet resource handlers."""

from typing import Optional

from ...platform.cache.application.services.cache_manager import CacheManager
from ..protocols import MaasClient
from ..schemas.collection_query_params import SubnetCollectionQueryParams
from ..schemas.subnet import (
    SUBNET_DETAILS_URI_PATTERN,
    SUBNETS_LIST_URI_PATTERN,
    GetSubnetParams,
    MaasSubnet,
)
from .base_handler import DetailResourceHandler, ListResourceHandler


class SubnetDetailsResourceHandler(DetailResourceHandler[MaasSubnet, GetSubnetParams]):
    
    def __init__(self, client: MaasClient, cache_manager: CacheManager):
        super().__init__(
            client,
            cache_manager,
            resource_name="Subnet",
            uri_pattern=SUBNET_DETAILS_URI_PATTERN,
            data_model=MaasSubnet,
            params_model=GetSubnetParams,
            api_endpoint="/subnets",
        )
    
    def get_resource_id(self, params: GetSubnetParams) -> Optional[str]:
        return params.subnet_id


class SubnetsListResourceHandler(ListResourceHandler[MaasSubnet, SubnetCollectionQueryParams]):
    
    def __init__(self, client: MaasClient, cache_manager: CacheManager):
        super().__init__(
            client,
            cache_manager,
            resource_name="Subnets",
            uri_pattern=SUBNETS_LIST_URI_PATTERN,
            data_model=MaasSubnet,
            params_model=SubnetCollectionQueryParams,
            api_endpoint="/subnets",
        )
