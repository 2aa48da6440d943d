"""Routing layer package for capturing remote application paths."""

from .route_table import RemoteAppRoute, RemoteAppRouteTable, routing_build_pattern

__all__ = ["RemoteAppRoute", "RemoteAppRouteTable", "routing_build_pattern"]
