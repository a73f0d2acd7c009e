"""
Cargo and ship limits used by the container rules.

Fractions are relative to a container's nominal max payload. Override per
fleet in future if needed.
"""

from __future__ import annotations

# Liquid containers: ordinary cargo may fill 90% of max payload
LIQUID_SAFE_FILL_FRACTION = 0.9

# Liquid containers: hazardous cargo is limited to half of max payload
LIQUID_HAZARDOUS_FILL_FRACTION = 0.5

# Gas containers keep 5% of their cargo when emptied (residual gas)
GAS_RESIDUAL_FRACTION = 0.05

# Container masses are in kg, ship limits in tonnes
KG_PER_TONNE = 1000.0

# Serial number prefixes per container type
PREFIX_LIQUID = "L"
PREFIX_GAS = "G"
PREFIX_REFRIGERATED = "C"
PREFIX_BASIC = "B"

# Floating-point tolerance for summed ship weights
EPS = 1e-9
