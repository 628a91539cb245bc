"""Host adapters that drive text input sessions."""
