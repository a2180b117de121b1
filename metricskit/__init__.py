"""Metrics facade plus buckets, compressed integer sets, quantiles and metric trees."""

__version__ = "0.1.0"