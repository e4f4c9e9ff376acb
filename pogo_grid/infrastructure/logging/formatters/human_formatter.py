"""Human-readable formatter for console output."""

import logging
from datetime import datetime


class HumanFormatter(logging.Formatter):
    """Format log records for the console with optional colors.

    Context passed as ``extra={'context': {...}}`` is shown in brackets,
    e.g. ``[level:14 | cell:F4ij[657,11172]@14]``.
    """

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[0m',        # Default
        'WARNING': '\033[93m',    # Yellow
        'ERROR': '\033[91m',      # Red
        'CRITICAL': '\033[95m',   # Magenta
    }

    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'

    CONTEXT_KEYS = ('level', 'cell', 'bounds')

    def __init__(self, use_colors: bool = True, show_context: bool = True):
        super().__init__()
        self.use_colors = use_colors
        self.show_context = show_context

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S')

        if self.use_colors:
            level_color = self.COLORS.get(record.levelname, '')
            reset = self.RESET
            bold = self.BOLD
            dim = self.DIM
        else:
            level_color = reset = bold = dim = ''

        parts = [
            f"{dim}{timestamp}{reset}",
            f"{level_color}{record.levelname:8}{reset}",
            f"{dim}[{self._shorten_logger_name(record.name)}]{reset}",
        ]

        context_str = self._format_context(record) if self.show_context else ''
        if context_str:
            parts.append(f"{bold}{context_str}{reset}")

        parts.append(record.getMessage())
        output = ' '.join(parts)

        if record.exc_info:
            tb = self.formatException(record.exc_info)
            if self.use_colors:
                tb = '\n'.join(f"  {level_color}{line}{reset}" for line in tb.split('\n'))
            output += f"\n{tb}"

        return output

    def _format_context(self, record: logging.LogRecord) -> str:
        context = getattr(record, 'context', None)
        if not context:
            return ''

        parts = [f"{key}:{context[key]}" for key in self.CONTEXT_KEYS if key in context]
        return f"[{' | '.join(parts)}]" if parts else ''

    def _shorten_logger_name(self, name: str, max_length: int = 24) -> str:
        """Shorten logger name for display."""
        if len(name) <= max_length:
            return name

        # Try to show last component
        last = name.split('.')[-1]
        if len(last) <= max_length - 3:
            return f"...{last}"

        return f"{name[:max_length-3]}..."
