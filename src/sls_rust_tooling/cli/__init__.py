"""sls-rust command line."""
