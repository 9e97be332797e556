"""Machine resource handlers."""

from typing import Optional

from ...platform.cache.application.services.cache_manager import CacheManager
from ...platform.cache.core.entities.cache_entry import CacheControl
from ..protocols import MaasClient
from ..schemas.collection_query_params import MachineCollectionQueryParams
from ..schemas.machine import (
    MACHINE_DETAILS_URI_PATTERN,
    MACHINES_LIST_URI_PATTERN,
    GetMachineParams,
    MaasMachine,
)
from .base_handler import DetailResourceHandler, ListResourceHandler


# Query parameters that select a different view of the machine list
MACHINE_FILTER_PARAMS = (
    "hostname", "status", "zone", "pool", "tags", "owner", "architecture",
)


class MachineDetailsResourceHandler(DetailResourceHandler[MaasMachine, GetMachineParams]):
    """Single machine by system_id.
    
    Machine state changes often, so entries live 60 seconds and clients
    must revalidate.
    """
    
    def __init__(self, client: MaasClient, cache_manager: CacheManager):
        super().__init__(
            client,
            cache_manager,
            resource_name="Machine",
            uri_pattern=MACHINE_DETAILS_URI_PATTERN,
            data_model=MaasMachine,
            params_model=GetMachineParams,
            api_endpoint="/machines",
            cache_options={
                "ttl": 60,
                "cache_control": CacheControl(max_age=60, must_revalidate=True),
            }
        )
    
    def get_resource_id(self, params: GetMachineParams) -> Optional[str]:
        return params.system_id


class MachinesListResourceHandler(ListResourceHandler[MaasMachine, MachineCollectionQueryParams]):
    """Machine collection with filtering, pagination and sorting."""
    
    def __init__(self, client: MaasClient, cache_manager: CacheManager):
        super().__init__(
            client,
            cache_manager,
            resource_name="Machines",
            uri_pattern=MACHINES_LIST_URI_PATTERN,
            data_model=MaasMachine,
            params_model=MachineCollectionQueryParams,
            api_endpoint="/machines",
            cache_options={
                "ttl": 30,
                "include_query_params": True,
                "include_query_params_list": [
                    *MACHINE_FILTER_PARAMS,
                    "limit", "offset", "page", "per_page", "sort", "order",
                ],
                "cache_control": CacheControl(max_age=30, must_revalidate=True),
            }
        )
