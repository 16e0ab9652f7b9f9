"""Engine subpackage - pricing orchestration and response merging."""
from .pricing_engine import PricingEngine
from .flow_engine import FlowEngine
from .models import Part, PartPricing, PricingSummary

__all__ = ['PricingEngine', 'FlowEngine', 'Part', 'PartPricing', 'PricingSummary']
