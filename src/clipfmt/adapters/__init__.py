"""Host adapters implementing the core ports."""
