"""Cluster discovery with registered matchers and health-check filtering."""

__all__ = ["aws", "consul", "gcp", "lb", "local", "model", "service"]