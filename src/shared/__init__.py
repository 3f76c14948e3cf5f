"""Cross-context building blocks: errors, configuration, logging and web glue."""
