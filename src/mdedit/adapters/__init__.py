"""Host adapters that drive the editing core from UI toolkits."""
