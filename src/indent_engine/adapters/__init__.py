"""Host adapters that embed the indent engine in UI toolkits."""
