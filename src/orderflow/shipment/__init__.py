"""Shipments, shipping methods and cost calculators."""

from orderflow.shipment.method import (
    FlatRateCalculator,
    PerItemCalculator,
    ShippingCostCalculator,
    ShippingMethod,
)
from orderflow.shipment.shipment import SHIPMENT_TRANSITIONS, Shipment, ShipmentState

__all__ = [
    "SHIPMENT_TRANSITIONS",
    "FlatRateCalculator",
    "PerItemCalculator",
    "Shipment",
    "ShipmentState",
    "ShippingCostCalculator",
    "ShippingMethod",
]
