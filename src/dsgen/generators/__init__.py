"""
Table row generators.

Importing this package registers every generator; use create_generator to
build one for a table and a GenerationContext.
"""

from .base import (
    GenerationContext,
    Row,
    TableRowGenerator,
    create_generator,
    register,
    registered_tables,
)
from .call_center import CallCenterGenerator
from .customer_demographics import CustomerDemographicsGenerator
from .date_dim import DateDimGenerator
from .household_demographics import HouseholdDemographicsGenerator
from .income_band import IncomeBandGenerator
from .promotion import PromotionGenerator
from .reason import ReasonGenerator
from .ship_mode import ShipModeGenerator
from .time_dim import TimeDimGenerator
from .warehouse import WarehouseGenerator
from .web_page import WebPageGenerator
from .web_site import WebSiteGenerator

__all__ = [
    # Framework
    "GenerationContext",
    "Row",
    "TableRowGenerator",
    "create_generator",
    "register",
    "registered_tables",
    # Generators
    "CallCenterGenerator",
    "CustomerDemographicsGenerator",
    "DateDimGenerator",
    "HouseholdDemographicsGenerator",
    "IncomeBandGenerator",
    "PromotionGenerator",
    "ReasonGenerator",
    "ShipModeGenerator",
    "TimeDimGenerator",
    "WarehouseGenerator",
    "WebPageGenerator",
    "WebSiteGenerator",
]
