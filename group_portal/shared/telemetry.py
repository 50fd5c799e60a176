# group_portal/shared/telemetry.py
from typing import Optional

import structlog
from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

from group_portal import __version__
from group_portal.shared.config import Settings, settings as default_settings

logger = structlog.get_logger()

def build_tracer_provider(config: Settings) -> Optional[TracerProvider]:
    """
    Tracer provider exporting to `{OTEL_EXPORTER_OTLP_ENDPOINT}/v1/traces`,
    or None when no endpoint is configured.
    """
    if not config.OTEL_EXPORTER_OTLP_ENDPOINT:
        return None

    resource = Resource.create(attributes={
        "service.name": config.OTEL_SERVICE_NAME,
        "deployment.environment": config.APP_ENV.value,
        "service.version": __version__,
    })
    provider = TracerProvider(resource=resource)
    provider.add_span_processor(
        BatchSpanProcessor(OTLPSpanExporter(endpoint=f"{config.OTEL_EXPORTER_OTLP_ENDPOINT}/v1/traces"))
    )
    if config.DEBUG:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
    return provider

def setup_telemetry(config: Optional[Settings] = None) -> Optional[TracerProvider]:
    """
    Installs the global tracer provider. Call once at process startup.
    Spans stay non-recording when telemetry is disabled.
    """
    config = config or default_settings
    provider = build_tracer_provider(config)
    if provider is None:
        logger.info("telemetry_disabled", reason="no_otlp_endpoint")
        return None

    trace.set_tracer_provider(provider)
    logger.info(
        "telemetry_enabled",
        service=config.OTEL_SERVICE_NAME,
        endpoint=config.OTEL_EXPORTER_OTLP_ENDPOINT,
    )
    return provider

def instrument_fastapi(app, config: Optional[Settings] = None) -> bool:
    """Traces incoming HTTP requests when an OTLP endpoint is configured."""
    config = config or default_settings
    if not config.OTEL_EXPORTER_OTLP_ENDPOINT:
        return False
    FastAPIInstrumentor.instrument_app(app)
    return True

def get_tracer(name: str):
    return trace.get_tracer(name)
