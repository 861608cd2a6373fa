"""
OpenTelemetry Integration Module

Provides distributed tracing and metrics collection capabilities:
- tracer: Span creation and trace context propagation
- metrics: Metrics collection

Used by the client and the transport adapters so every RPC call can be traced
across the HTTP and ZeroMQ transports.
"""

from .tracer import (
    setup_tracer,
    inject_trace_context,
    inject_trace_headers,
    create_span
)
from .metrics import (
    setup_metrics,
    increment_counter,
    record_latency
)

__all__ = [
    "setup_tracer",
    "inject_trace_context",
    "inject_trace_headers",
    "create_span",
    "setup_metrics",
    "increment_counter",
    "record_latency"
]
