"""
OpenTelemetry Trace Context Management

Provides span creation and trace context injection so that RPC requests can be
followed across transports.
"""

import logging
from typing import Any, Dict, Optional

from opentelemetry import propagate, trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.trace.sampling import ALWAYS_ON

logger = logging.getLogger(__name__)


def setup_tracer(service_name: str, otlp_endpoint: str = "localhost:4317"):
    """Configure OpenTelemetry tracer

    Args:
        service_name: Service name
        otlp_endpoint: OTLP receiver address

    Returns:
        Tracer for the service
    """
    provider = TracerProvider(
        sampler=ALWAYS_ON,
        resource=Resource.create({SERVICE_NAME: service_name}),
    )
    provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint)))

    # Set global TracerProvider
    trace.set_tracer_provider(provider)

    logger.info(f"OpenTelemetry trace configured, service name: {service_name}, OTLP endpoint: {otlp_endpoint}")

    return trace.get_tracer(service_name)


def inject_trace_context() -> Optional[Dict[str, Any]]:
    """Convert the active span context into a transportable dictionary

    Returns:
        Dict[str, Any]: trace_id, span_id and sampled flag, or None if no span is active
    """
    span_context = trace.get_current_span().get_span_context()
    if not span_context.is_valid:
        return None

    return {
        'trace_id': format(span_context.trace_id, '032x'),
        'span_id': format(span_context.span_id, '016x'),
        'sampled': span_context.trace_flags.sampled,
    }


def inject_trace_headers(headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """Add W3C trace context headers (traceparent, tracestate) for the active span

    Args:
        headers: Headers to extend, copied before modification

    Returns:
        Dict[str, str]: Headers including the propagation fields
    """
    carrier = dict(headers or {})
    propagate.inject(carrier)
    return carrier


def create_span(name: str, attributes: Dict[str, Any] = None, kind=trace.SpanKind.CLIENT):
    """Create new span

    Args:
        name: Span name
        attributes: Span attributes
        kind: Span kind

    Returns:
        Context manager yielding the span
    """
    tracer = trace.get_tracer(__name__)
    return tracer.start_as_current_span(
        name,
        attributes=attributes or {},
        kind=kind,
    )
