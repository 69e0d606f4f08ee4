"""Infrastructure layer - adapters implementing the checkout ports."""
