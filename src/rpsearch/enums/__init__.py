"""
Search Enums

All enumeration types for the recursive population search.
"""

# Objective functions
from rpsearch.enums.function import ObjectiveFunctionType

# Selection strategies
from rpsearch.enums.selection import SelectionMethod


__all__ = [
	# Objective functions
	'ObjectiveFunctionType',
	# Selection strategies
	'SelectionMethod',
]
