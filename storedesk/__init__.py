"""
StoreDesk - store management presentation core

Headless view models and section builders for the order list and product
settings screens of a store-management client.
"""

__version__ = "0.3.0"
