"""HTTP relay for the portfolio assistant."""
