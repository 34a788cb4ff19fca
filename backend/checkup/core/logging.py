# backend/checkup/core/logging.py
"""
Configuration du logging applicatif.

Appelée une seule fois par le lifespan FastAPI (main.py) : aucun effet
de bord à l'import. Chaque module utilise logging.getLogger(__name__).

Deux formats :
    JSON   → production (stderr non-TTY), une ligne par événement
    Humain → développement local
"""
import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

# Clés jamais écrites en clair dans les logs (comparaison insensible à la casse)
SENSITIVE_KEYS = (
    "password",
    "token",
    "secret",
    "api_key",
    "apikey",
    "private_key",
    "privatekey",
    "authorization",
)
REDACTED = "***REDACTED***"

# Attributs standards d'un LogRecord : tout le reste vient de `extra`
_RESERVED = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None)).keys()
) | {"message", "asctime", "taskName"}


def sanitize(data: Any) -> Any:
    """Masque récursivement les valeurs dont la clé paraît sensible."""
    if isinstance(data, dict):
        clean = {}
        for key, value in data.items():
            if any(s in str(key).lower() for s in SENSITIVE_KEYS):
                clean[key] = REDACTED
            else:
                clean[key] = sanitize(value)
        return clean
    if isinstance(data, (list, tuple)):
        return [sanitize(item) for item in data]
    return data


def _extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    return {k: v for k, v in record.__dict__.items() if k not in _RESERVED}


class JSONFormatter(logging.Formatter):

    def format(self, record: logging.LogRecord) -> str:
        log_obj: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z",
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)
        log_obj.update(sanitize(_extra_fields(record)))
        return json.dumps(log_obj, default=str)


class HumanFormatter(logging.Formatter):

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"{timestamp} [{record.levelname}] {record.name}: {record.getMessage()}"
        extra = _extra_fields(record)
        if extra:
            line += f" {sanitize(extra)}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def configure_logging(level: str = "INFO", json_format: Optional[bool] = None) -> None:
    """
    Installe un unique handler stderr sur le root logger.

    json_format=None → JSON si stderr n'est pas un terminal.
    """
    if json_format is None:
        json_format = not sys.stderr.isatty()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JSONFormatter() if json_format else HumanFormatter())
    root_logger.addHandler(handler)
