"""
Tests for the mansion room tree and its exploration.

Test organization:
- test_models.py: Room and name handling
- test_layout.py: Layout validation
- test_builder.py: Tree building and allocation failures
- test_mansion.py: Post-order release and allocation counters
- test_explorer.py: Navigation state machine
"""
