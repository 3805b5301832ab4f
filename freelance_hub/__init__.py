"""Freelance Hub: deadline and payment alert reconciliation service.

The package re-exports nothing; importing it only makes ``freelance_hub`` a
regular package so its layers resolve from the project root.
"""
