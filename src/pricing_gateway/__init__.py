"""
Pricing Gateway Package

Thin HTTP front end for part pricing. Forwards part records to the
DecisionRules service (per-rule or via a pricing flow) and reshapes the
responses into pricing results.
"""

__version__ = "1.0.0"
