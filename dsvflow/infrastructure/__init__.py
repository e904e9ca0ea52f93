"""Infrastructure adapters: storage, notifications, PDF rendering."""
