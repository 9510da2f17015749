"""
Ordering Package - Sorting Utilities.

Kept apart from the pipeline: sorting needs the whole roster at once and is
not a filter/map/act traversal.
"""

from roster_pipeline.ordering.age_order import sorted_by_age

__all__ = ["sorted_by_age"]
