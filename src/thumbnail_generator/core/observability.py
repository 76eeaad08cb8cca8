"""Log context carried through one invocation."""

import uuid
from typing import Any, Dict
from dataclasses import dataclass, field


@dataclass
class LogContext:
    """Context information attached to log lines."""

    correlation_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    operation: str = ""
    component: str = ""
    metadata: Dict[str, Any] = field(default_factory=dict)

    def with_operation(self, operation: str) -> "LogContext":
        """Create new context with operation set."""
        return LogContext(
            correlation_id=self.correlation_id,
            operation=operation,
            component=self.component,
            metadata=self.metadata.copy(),
        )

    def with_metadata(self, **kwargs: Any) -> "LogContext":
        """Create new context with additional metadata."""
        new_metadata = self.metadata.copy()
        new_metadata.update(kwargs)
        return LogContext(
            correlation_id=self.correlation_id,
            operation=self.operation,
            component=self.component,
            metadata=new_metadata,
        )

    def format_message(self, message: str, **kwargs: Any) -> str:
        """Render ``message`` prefixed with operation and correlation id."""
        formatted = f"[{self.correlation_id}] {message}"
        if self.operation:
            formatted = f"[{self.operation}] {formatted}"

        extra = {**self.metadata, **kwargs}
        if extra:
            metadata_str = ", ".join(f"{k}={v}" for k, v in extra.items())
            formatted = f"{formatted} ({metadata_str})"
        return formatted
