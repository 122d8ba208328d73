"""HTTP API over the fee engine."""
