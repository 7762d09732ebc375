"""
Core modules for AI Water Meter.

This package contains token counting, prompt classification, response
length estimation, the energy/water model and usage aggregation.
"""
