"""Headless presentation layer for StoreDesk.

View models, section builders and component state live here. These modules
avoid hard dependencies on a display server so they can be imported in
headless test runs and bound to any toolkit.
"""
