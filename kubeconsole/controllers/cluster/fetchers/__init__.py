"""Fetchers used by the cluster controller."""

from kubeconsole.controllers.cluster.fetchers.node_fetcher import NodeFetcher

__all__ = ["NodeFetcher"]
