"""Element rendering, accumulation and orchestration for hbconcat."""
