"""Processing services: per-device system information and credential pipelines."""
