"""JSON formatter for machine-readable log files."""

import logging
import json
from datetime import datetime


class JsonFormatter(logging.Formatter):
    """Format log records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        context = getattr(record, 'context', None)
        if context:
            log_data['context'] = context

        if record.exc_info:
            log_data['traceback'] = self.formatException(record.exc_info)

        return json.dumps(log_data, separators=(',', ':'), default=str)
