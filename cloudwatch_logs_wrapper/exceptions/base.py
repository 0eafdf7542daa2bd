from typing import Any, Dict, Optional

# Context keys that name the log group / stream an error concerns
TARGET_KEYS = ('log_group', 'log_stream', 'scope')


class LogsWrapperError(Exception):
    """Base exception for all CloudWatch Logs wrapper errors.

    Errors raised while working on a particular log group or stream carry it
    in their context ('log_group', 'log_stream', or 'scope' for listings).
    ``target`` renders it as ``group:stream`` and ``str()`` leads with it, so
    a failure among many streams (e.g. a preview batch) names its stream.

    Attributes:
        message: Human-readable error message
        original_error: The underlying exception (boto3, OS or JSON error) if any
        context: Diagnostic details such as log group, stream, token and page index
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        self.message = message
        self.original_error = original_error
        self.context = context or {}
        super().__init__(message)

    @property
    def target(self) -> Optional[str]:
        """'group:stream', the group alone, or None when no log target is known."""
        group = self.context.get('log_group') or self.context.get('scope')
        stream = self.context.get('log_stream')
        if group and stream:
            return f"{group}:{stream}"
        return group or stream or None

    def __str__(self) -> str:
        """Return '[target] message (Context: ...)' with the target keys folded into the prefix."""
        error_str = self.message
        target = self.target
        if target:
            error_str = f"[{target}] {error_str}"
        details = {k: v for k, v in self.context.items() if k not in TARGET_KEYS}
        if details:
            context_str = ", ".join(f"{k}={v}" for k, v in details.items())
            error_str += f" (Context: {context_str})"
        return error_str

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, target={self.target!r}, context={self.context!r})"
