"""UniswapX order intake — logging and error taxonomy."""
