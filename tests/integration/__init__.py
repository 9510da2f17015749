"""
Integration Tests - End-to-End Demonstration Runs.
"""
