"""UniswapX order intake — configuration."""
