"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="consulta-cnae")
    logger = get_logger(__name__)
    logger.info("consulta_recebida", extra={"total_cnaes": 3})

Campos obrigatórios em todo log:
- correlation_id
- service
- level
- logger
- message
- asctime

A API key do chamador nunca é logada em claro.
"""

from config.logging.config import configure_logging, get_logger, log_fallback
from config.logging.filters import (
    MASK,
    CorrelationIdFilter,
    SensitiveFieldFilter,
    mask_sensitive,
)
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "MASK",
    "REQUIRED_LOG_FIELDS",
    # Filters
    "CorrelationIdFilter",
    "SensitiveFieldFilter",
    # Configuração principal
    "configure_logging",
    # Formatters
    "create_json_formatter",
    "get_logger",
    "log_fallback",
    "mask_sensitive",
]
