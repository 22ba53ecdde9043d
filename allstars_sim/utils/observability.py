# allstars_sim/utils/observability.py
import logging
import sys
from typing import Optional
import structlog
import contextvars
from prometheus_client import Counter, Histogram, CollectorRegistry

from allstars_sim.config import settings
from allstars_sim.config.settings import ObservabilitySettings

# Correlation ID for tracing one CLI invocation across modules
CORRELATION_ID = contextvars.ContextVar('correlation_id', default=None)

class MetricsRegistry:
    """Centralized metrics management."""
    
    def __init__(self):
        self.registry = CollectorRegistry()
        self._init_metrics()
    
    def _init_metrics(self):
        """Initialize all metrics with proper naming conventions."""
        
        # HISTOGRAMS (timing data)
        self.season_duration = Histogram(
            'season_simulation_seconds',
            'Wall time to simulate one season',
            buckets=(0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5),
            registry=self.registry
        )
        
        # COUNTERS (monotonic increases)
        self.seasons_simulated = Counter(
            'seasons_simulated_total',
            'Total number of seasons simulated',
            labelnames=['mode'],  # 'single' or 'monte_carlo'
            registry=self.registry
        )
        
        self.configuration_errors = Counter(
            'configuration_errors_total',
            'Rejected season configurations',
            labelnames=['error_type'],
            registry=self.registry
        )
        
        self.monte_carlo_runs = Counter(
            'monte_carlo_runs_total',
            'Monte Carlo batch runs',
            labelnames=['status'],  # 'success' or 'failure'
            registry=self.registry
        )

class StructlogConfig:
    """Structured logging configuration."""
    
    @staticmethod
    def configure(log_format: str = 'console', log_level: str = 'INFO'):
        """
        Configure structlog for the requested output format.
        
        json: machine-readable, one object per line
        console: human-readable
        """
        
        shared_processors = [
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt='iso'),
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
        ]
        
        if log_format == 'json':
            processors = shared_processors + [
                structlog.processors.dict_tracebacks,
                structlog.processors.JSONRenderer(),
            ]
        else:
            processors = shared_processors + [
                structlog.dev.ConsoleRenderer(),
            ]
        
        structlog.configure(
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(
                logging.getLevelName(log_level)
            ),
            context_class=dict,
            # stderr keeps stdout free for JSON/CSV output
            logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
            cache_logger_on_first_use=True,
        )

class Logger:
    """Wrapper for structured logging with context awareness."""
    
    def __init__(self, module_name: str):
        self.logger = structlog.get_logger(module_name)
        self.module_name = module_name
    
    def with_correlation_id(self, correlation_id: str):
        """Bind correlation ID to all subsequent logs."""
        CORRELATION_ID.set(correlation_id)
        return self.logger.bind(correlation_id=correlation_id)
    
    def log_event(self, event: str, **kwargs):
        """Log structured event with automatic context."""
        corr_id = CORRELATION_ID.get()
        ctx = {'correlation_id': corr_id, 'module': self.module_name}
        ctx.update(kwargs)
        return self.logger.info(event, **ctx)
    
    def log_error(self, event: str, exc_info=None, **kwargs):
        """Log error with exception details."""
        corr_id = CORRELATION_ID.get()
        ctx = {'correlation_id': corr_id, 'module': self.module_name}
        ctx.update(kwargs)
        return self.logger.error(event, exc_info=exc_info, **ctx)

def initialize_observability(config: Optional[ObservabilitySettings] = None):
    """One-stop initialization for all observability components."""
    global METRICS, CONFIG
    if config is None:
        config = settings.observability
    log_format = 'json' if config.environment == 'production' else config.log_format
    StructlogConfig.configure(log_format=log_format, log_level=config.log_level)
    metrics = MetricsRegistry()
    
    logger = structlog.get_logger(__name__)
    logger.info(
        'observability_initialized',
        environment=config.environment,
        log_format=log_format,
        metrics_enabled=config.enable_metrics,
    )
    
    METRICS, CONFIG = metrics, config
    return metrics, config

# Global metrics instance
METRICS = None
CONFIG = None

def get_metrics() -> MetricsRegistry:
    """Lazy-load metrics singleton."""
    if METRICS is None:
        initialize_observability()
    return METRICS

def metrics_enabled() -> bool:
    """Whether metric updates should be recorded."""
    config = CONFIG if CONFIG is not None else settings.observability
    return config.enable_metrics
