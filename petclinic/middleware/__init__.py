"""Request middleware: error handling, metrics, rate limiting, tracing."""
