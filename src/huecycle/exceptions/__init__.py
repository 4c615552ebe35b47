"""
Custom exception hierarchy for huecycle.

## Exception Hierarchy

```
HueCycleError (base)
├── ColorError
│   ├── MalformedColorError
│   └── ColorSpaceExhaustedError
├── SessionError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

All custom exceptions inherit from `HueCycleError`, which provides
`user_message`, `technical_message`, `recoverable` and `recovery_hint`.

`MalformedColorError` never reaches callers of `ColorHistory`: the history
logs it and treats the operation as a no-op so a cycling loop keeps running.

See `huecycle.exceptions.handlers` for utilities to handle these exceptions.
"""

from .base import HueCycleError
from .color import ColorError, ColorSpaceExhaustedError, MalformedColorError, SessionError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import ErrorContext, format_error_for_display, wrap_pydantic_error

__all__ = [
    # Color
    "ColorError",
    "ColorSpaceExhaustedError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Handlers
    "ErrorContext",
    # Base
    "HueCycleError",
    "MalformedColorError",
    "SessionError",
    "format_error_for_display",
    "wrap_pydantic_error",
]
