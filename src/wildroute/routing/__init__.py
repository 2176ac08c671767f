"""Routing — ordered route table with segment-wise wildcard matching.

Routes are registered on a ``Router`` during setup and compiled into an
immutable ``RouteTable`` before serving begins.
"""
