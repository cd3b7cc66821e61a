"""Infrastructure modules for the notification service.

Centralized infrastructure components:
- configuration: Settings management (Settings and per-concern sections)
- logging: Structured logging (configure_logging, get_module_logger)
- events: Event base model and synchronous dispatcher
- notifications: Channels, registry and the dispatch orchestrator
- telegram: Telegram Bot API client, markup helpers and webhook handling
- services: Composition root and FastAPI dependency aliases
"""
