"""Framework-agnostic core: configuration, logging, models, and errors."""
