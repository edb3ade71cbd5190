# Core package - configuration bootstrap
#
# Modules:
# - config: Configuration document, loader, defaulting and validation
# - bootstrap: Fatal-on-error entry point for the service
# - errors: Configuration error hierarchy
# - logging: Structured logging
# - schema: Shared base model for config file blocks
# - settings: Process environment settings
