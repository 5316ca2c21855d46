"""Services — catalog operations orchestrating SQL around pure core logic."""
