"""Lookup of identity code services by country"""

from typing import Dict, Mapping, Optional

from loan_gateway.domain.models import Country
from loan_gateway.infrastructure.identity.base import IdentityCodeService
from loan_gateway.infrastructure.identity.baltic import (
    EstonianIdentityCodeService,
    LithuanianIdentityCodeService,
)
from loan_gateway.infrastructure.identity.latvia import LatvianIdentityCodeService


class IdentityCodeRegistry:
    """Maps each supported country to its identity code service"""

    def __init__(self, services: Optional[Mapping[Country, IdentityCodeService]] = None):
        if services is None:
            services = {
                Country.EE: EstonianIdentityCodeService(),
                Country.LV: LatvianIdentityCodeService(),
                Country.LT: LithuanianIdentityCodeService(),
            }
        self._services: Dict[Country, IdentityCodeService] = dict(services)

    def for_country(self, country: Country) -> IdentityCodeService:
        try:
            return self._services[country]
        except KeyError:
            raise ValueError(f"No identity code service registered for {country}") from None
