"""
Unit Tests - Testing Individual Components in Isolation.

Test Files:
    - test_element_pipeline.py: Generic filter/map/act runner
    - test_specializations.py: Roster printer and processor routines
    - test_predicates.py: Predicate builders and predicate objects
    - test_argument_validator.py: Fail-fast argument checks
    - test_entities.py: Person record and age helpers
    - test_age_order.py: Sort-by-age utility
    - test_adapters.py: Roster provider, printer and collector
    - test_config_loader.py: Configuration loading/validation
"""
