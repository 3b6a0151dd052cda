"""Core package for shared application functionality.

- **config**: Settings loaded from the environment
- **context**: Correlation and request ID management
- **exceptions**: Error types reported to clients
- **error_context**: Sensitive data sanitization for safe logging
- **logging**: Loguru configuration
"""
