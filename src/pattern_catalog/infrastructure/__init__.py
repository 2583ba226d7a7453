"""
Infrastructure Layer - Factories, Strategies, Adapters and Shared Resources
"""
