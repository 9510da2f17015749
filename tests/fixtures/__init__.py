"""
Test Fixtures - Sample Configurations.
"""
