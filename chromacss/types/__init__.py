"""Value records, enums and module-level constants."""
